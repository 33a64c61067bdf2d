from datetime import datetime
from decimal import Decimal
from sqlalchemy import Integer, Numeric, DateTime, ForeignKey, CheckConstraint, Index, func
from sqlalchemy.orm import Mapped, mapped_column
from accountboard.models.base import Base


class CommissionCalculation(Base):
    """
    Commission earned by an employee on one transaction for a period.

    Rows are immutable once written, so there is no updated_at.
    """

    __tablename__ = "commission_calculations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False
    )
    employee_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False
    )
    transaction_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("transactions.id", ondelete="CASCADE"), nullable=False
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(precision=15, scale=2), nullable=False)
    rate: Mapped[Decimal] = mapped_column(Numeric(precision=5, scale=2), nullable=False)
    calculated_amount: Mapped[Decimal] = mapped_column(Numeric(precision=15, scale=2), nullable=False)
    period_month: Mapped[int | None] = mapped_column(Integer, nullable=True)
    period_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.current_timestamp()
    )

    __table_args__ = (
        CheckConstraint(
            "period_month >= 1 AND period_month <= 12",
            name="ck_commission_calculations_period_month",
        ),
        Index("idx_commission_calculations_company_id", "company_id"),
    )
