from sqlalchemy.orm import Session
from accountboard.models.user import User


class UserRepository:
    """Repository for User model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: int) -> User | None:
        """Get user by internal ID"""
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_email(self, email: str, company_id: int | None = None) -> User | None:
        """
        Get user by login email, optionally restricted to one company.

        Emails are globally unique, so the company filter only narrows
        the lookup when the client names a company explicitly.
        """
        query = self.db.query(User).filter(User.email == email)
        if company_id is not None:
            query = query.filter(User.company_id == company_id)
        return query.first()

    def update(self, user: User) -> User:
        """Persist changes to an existing user"""
        self.db.commit()
        self.db.refresh(user)
        return user
