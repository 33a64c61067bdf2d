from sqlalchemy import String, Integer, Boolean, ForeignKey, Index, true
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from accountboard.models.base import Base, TimestampMixin
from accountboard.models.role import UserRole

if TYPE_CHECKING:
    from accountboard.models.company import Company


class User(Base, TimestampMixin):
    """
    Login identity inside a company.

    The password column stores a bcrypt hash, never the plain text.
    Deactivated users keep their row (is_active = false).
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False
    )
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(
        String(50), nullable=False, default=UserRole.EMPLOYEE.value, server_default=UserRole.EMPLOYEE.value
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default=true())

    # Relationships
    company: Mapped["Company"] = relationship("Company", back_populates="users")

    __table_args__ = (Index("idx_users_company_id", "company_id"),)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', role={self.role})>"
