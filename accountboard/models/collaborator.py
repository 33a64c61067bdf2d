from decimal import Decimal
from sqlalchemy import String, Integer, Numeric, ForeignKey, UniqueConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column
from accountboard.models.base import Base, TimestampMixin


class Collaborator(Base, TimestampMixin):
    """
    Join row linking an employee to a project with a role and commission.

    Constraints:
    - Unique(project_id, employee_id) - one row per employee per project
    - Deleted together with either the project or the employee
    """

    __tablename__ = "collaborators"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False
    )
    project_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False
    )
    employee_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False
    )
    role: Mapped[str | None] = mapped_column(String(255), nullable=True)
    commission_rate: Mapped[Decimal] = mapped_column(
        Numeric(precision=5, scale=2), nullable=False, default=0, server_default="0"
    )

    __table_args__ = (
        UniqueConstraint("project_id", "employee_id", name="uq_collaborators_project_employee"),
        Index("idx_collaborators_company_id", "company_id"),
    )
