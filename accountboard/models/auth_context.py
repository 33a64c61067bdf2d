"""Authenticated request context."""

from dataclasses import dataclass
from accountboard.models.user import User
from accountboard.models.company import Company
from accountboard.models.role import UserRole


@dataclass
class AuthContext:
    """
    User and company resolved from a verified bearer token.

    Every tenant-scoped query filters on ``company.id`` taken from here,
    never from request input.

    Attributes:
        user: The authenticated, active User
        company: The Company the user belongs to
    """

    user: User
    company: Company

    @property
    def company_id(self) -> int:
        return self.company.id

    @property
    def role(self) -> str:
        return self.user.role

    def is_manager(self) -> bool:
        """Check if user may manage company data (accounts, employees)."""
        return self.user.role == UserRole.MANAGER.value

    def __repr__(self) -> str:
        return f"<AuthContext(user_id={self.user.id}, company_id={self.company.id}, role={self.role})>"
