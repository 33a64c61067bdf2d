"""Repository for Company model operations."""

from sqlalchemy.orm import Session
from accountboard.models.company import Company


class CompanyRepository:
    """Repository for Company model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, company_id: int) -> Company | None:
        """
        Get company by ID.

        Args:
            company_id: Company ID

        Returns:
            Company object or None if not found
        """
        return self.db.query(Company).filter(Company.id == company_id).first()
