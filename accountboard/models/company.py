"""Company model: the tenant isolation boundary."""

from sqlalchemy import String, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING

from accountboard.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from accountboard.models.user import User
    from accountboard.models.account import Account


class Company(Base, TimestampMixin):
    """
    Multi-tenant isolation boundary.

    Every other row (users, employees, accounts, customers, services,
    transactions, projects, collaborators, commission calculations) carries a
    company_id and is deleted together with its company.
    """

    __tablename__ = "companies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="TRY", server_default="TRY")

    # Relationships
    users: Mapped[list["User"]] = relationship(
        "User", back_populates="company", passive_deletes=True
    )
    accounts: Mapped[list["Account"]] = relationship(
        "Account", back_populates="company", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Company(id={self.id}, name='{self.name}')>"
