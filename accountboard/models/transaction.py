from datetime import date
from decimal import Decimal
from enum import Enum as PyEnum
from sqlalchemy import String, Integer, Numeric, ForeignKey, Date, Text, CheckConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from accountboard.models.base import Base, TimestampMixin, in_values

if TYPE_CHECKING:
    from accountboard.models.account import Account


class TransactionType(str, PyEnum):
    INCOME = "income"
    EXPENSE = "expense"


class Transaction(Base, TimestampMixin):
    """
    Income or expense booked against an account.

    Deleting the account deletes the transaction; deleting the customer,
    employee or service only clears the reference.
    """

    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False
    )
    account_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    )
    customer_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("customers.id", ondelete="SET NULL"), nullable=True
    )
    employee_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("employees.id", ondelete="SET NULL"), nullable=True
    )
    service_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("services.id", ondelete="SET NULL"), nullable=True
    )
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    amount: Mapped[Decimal] = mapped_column(Numeric(precision=15, scale=2), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="TRY", server_default="TRY")
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    date: Mapped[date] = mapped_column(Date, nullable=False)

    # Relationships
    account: Mapped["Account"] = relationship("Account", back_populates="transactions")

    __table_args__ = (
        CheckConstraint(in_values("type", TransactionType), name="ck_transactions_type"),
        Index("idx_transactions_company_id", "company_id"),
        Index("idx_transactions_date", "date"),
    )
