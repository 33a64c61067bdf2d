from datetime import date
from decimal import Decimal
from sqlalchemy import String, Integer, Boolean, Numeric, Date, ForeignKey, Index, true
from sqlalchemy.orm import Mapped, mapped_column
from accountboard.models.base import Base, TimestampMixin


class Employee(Base, TimestampMixin):
    """
    Staff member of a company, optionally linked to a login user.

    commission_rate is a percentage (0-100), default 0.
    """

    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    surname: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    position: Mapped[str | None] = mapped_column(String(255), nullable=True)
    salary: Mapped[Decimal | None] = mapped_column(Numeric(precision=15, scale=2), nullable=True)
    commission_rate: Mapped[Decimal] = mapped_column(
        Numeric(precision=5, scale=2), nullable=False, default=0, server_default="0"
    )
    hire_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default=true())

    __table_args__ = (Index("idx_employees_company_id", "company_id"),)
