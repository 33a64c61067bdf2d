"""
Demo tenant seeding.

The demo company is inserted with ON CONFLICT (email) DO NOTHING, so a
second run finds the company already present, gets no id back and leaves
the tenant untouched.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from passlib.context import CryptContext
from sqlalchemy import Table, insert, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.engine import Connection

from accountboard.config import Settings
from accountboard.core.security import build_password_context, hash_password
from accountboard.models import Account, AccountType, Company, User, UserRole

logger = logging.getLogger(__name__)

DEMO_ACCOUNTS = (
    ("Cash", AccountType.CASH, Decimal("10000")),
    ("Bank Account", AccountType.BANK, Decimal("25000")),
    ("Credit Card", AccountType.CREDIT_CARD, Decimal("-5000")),
)

_CONFLICT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


@dataclass(frozen=True)
class SeedResult:
    """Outcome of the seed step: the new company id, or None when it already existed."""

    company_id: int | None

    @property
    def created(self) -> bool:
        return self.company_id is not None


def insert_ignoring_conflict(connection: Connection, table: Table, values: dict, conflict_column: str) -> int | None:
    """
    Insert a row unless one with the same unique value exists.

    Returns the new primary key, or None when the row already existed.
    PostgreSQL and SQLite use ON CONFLICT DO NOTHING RETURNING id; other
    dialects look the value up before inserting.
    """
    dialect_insert = _CONFLICT_INSERTS.get(connection.dialect.name)

    if dialect_insert is not None:
        stmt = (
            dialect_insert(table)
            .values(**values)
            .on_conflict_do_nothing(index_elements=[conflict_column])
            .returning(table.c.id)
        )
        return connection.execute(stmt).scalar_one_or_none()

    existing = connection.execute(
        select(table.c.id).where(table.c[conflict_column] == values[conflict_column])
    ).first()
    if existing is not None:
        return None
    result = connection.execute(insert(table).values(**values))
    return result.inserted_primary_key[0]


def seed_demo_tenant(connection: Connection, config: Settings, pwd_context: CryptContext | None = None) -> SeedResult:
    """
    Create the demo company, its manager login and three demo accounts.

    Nothing is written when a company with the demo email already exists.
    """
    company_id = insert_ignoring_conflict(
        connection,
        Company.__table__,
        {
            "name": config.DEMO_COMPANY_NAME,
            "email": config.DEMO_EMAIL,
            "currency": config.DEMO_CURRENCY,
        },
        conflict_column="email",
    )

    if company_id is None:
        logger.info("Demo company already exists")
        return SeedResult(company_id=None)

    context = pwd_context or build_password_context(config.BCRYPT_ROUNDS)
    insert_ignoring_conflict(
        connection,
        User.__table__,
        {
            "company_id": company_id,
            "email": config.DEMO_EMAIL,
            "password": hash_password(config.DEMO_PASSWORD, context),
            "role": UserRole.MANAGER.value,
        },
        conflict_column="email",
    )

    connection.execute(
        insert(Account.__table__),
        [
            {
                "company_id": company_id,
                "name": name,
                "type": account_type.value,
                "balance": balance,
                "currency": config.DEMO_CURRENCY,
            }
            for name, account_type, balance in DEMO_ACCOUNTS
        ],
    )

    logger.info(
        "Demo company created (id=%s) with login %s and %d default accounts",
        company_id,
        config.DEMO_EMAIL,
        len(DEMO_ACCOUNTS),
    )
    return SeedResult(company_id=company_id)
