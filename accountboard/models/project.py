from datetime import date
from decimal import Decimal
from enum import Enum as PyEnum
from sqlalchemy import String, Integer, Text, Numeric, Date, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column
from accountboard.models.base import Base, TimestampMixin, in_values


class ProjectStatus(str, PyEnum):
    ACTIVE = "active"
    COMPLETED = "completed"
    ON_HOLD = "on_hold"
    CANCELLED = "cancelled"


class Project(Base, TimestampMixin):
    """Customer project; collaborators attach employees to it."""

    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False
    )
    customer_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("customers.id", ondelete="CASCADE"), nullable=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(50), nullable=False, default=ProjectStatus.ACTIVE.value, server_default=ProjectStatus.ACTIVE.value
    )
    budget: Mapped[Decimal | None] = mapped_column(Numeric(precision=15, scale=2), nullable=True)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="TRY", server_default="TRY")
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    __table_args__ = (
        CheckConstraint(in_values("status", ProjectStatus), name="ck_projects_status"),
        Index("idx_projects_company_id", "company_id"),
    )
