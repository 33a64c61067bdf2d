"""User role enum for role-based access control."""

from enum import Enum as PyEnum


class UserRole(str, PyEnum):
    """
    Roles a user can hold inside their company.

    - MANAGER: manages accounts, employees and company settings
    - EMPLOYEE: reads company data, records own activity
    """

    MANAGER = "manager"
    EMPLOYEE = "employee"
