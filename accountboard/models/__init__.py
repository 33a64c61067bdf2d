"""
SQLAlchemy models.

Importing this package registers every table on ``Base.metadata``.
``TABLE_CREATION_ORDER`` is the order tables must be created in so that
each foreign key points at an existing table.
"""

from accountboard.models.base import Base, TimestampMixin
from accountboard.models.role import UserRole
from accountboard.models.company import Company
from accountboard.models.user import User
from accountboard.models.employee import Employee
from accountboard.models.account import Account, AccountType
from accountboard.models.customer import Customer
from accountboard.models.service import Service
from accountboard.models.transaction import Transaction, TransactionType
from accountboard.models.project import Project, ProjectStatus
from accountboard.models.collaborator import Collaborator
from accountboard.models.commission_calculation import CommissionCalculation

TABLE_CREATION_ORDER = (
    Company.__table__,
    User.__table__,
    Employee.__table__,
    Account.__table__,
    Customer.__table__,
    Service.__table__,
    Transaction.__table__,
    Project.__table__,
    Collaborator.__table__,
    CommissionCalculation.__table__,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "UserRole",
    "Company",
    "User",
    "Employee",
    "Account",
    "AccountType",
    "Customer",
    "Service",
    "Transaction",
    "TransactionType",
    "Project",
    "ProjectStatus",
    "Collaborator",
    "CommissionCalculation",
    "TABLE_CREATION_ORDER",
]
