from decimal import Decimal
from enum import Enum as PyEnum
from sqlalchemy import String, Integer, Boolean, Numeric, ForeignKey, CheckConstraint, Index, true
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from accountboard.models.base import Base, TimestampMixin, in_values

if TYPE_CHECKING:
    from accountboard.models.company import Company
    from accountboard.models.transaction import Transaction


class AccountType(str, PyEnum):
    """Account type enumeration"""

    CASH = "cash"
    BANK = "bank"
    CREDIT_CARD = "credit_card"
    ASSET = "asset"
    LIABILITY = "liability"
    EQUITY = "equity"


class Account(Base, TimestampMixin):
    """
    Financial accounts owned by a company.

    Balance is signed: credit cards and liabilities typically go negative.
    Accounts are deactivated (is_active = false) rather than deleted.
    """

    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    balance: Mapped[Decimal] = mapped_column(
        Numeric(precision=15, scale=2), nullable=False, default=0, server_default="0"
    )
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="TRY", server_default="TRY")
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default=true())

    # Relationships
    company: Mapped["Company"] = relationship("Company", back_populates="accounts")
    transactions: Mapped[list["Transaction"]] = relationship(
        "Transaction",
        back_populates="account",
        passive_deletes=True,  # ON DELETE CASCADE removes transactions in the database
    )

    __table_args__ = (
        CheckConstraint(in_values("type", AccountType), name="ck_accounts_type"),
        Index("idx_accounts_company_id", "company_id"),
    )
