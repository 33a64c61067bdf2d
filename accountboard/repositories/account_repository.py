from sqlalchemy.orm import Session
from accountboard.models.account import Account


class AccountRepository:
    """Account queries, always scoped to one company"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_company(self, company_id: int, include_inactive: bool = False) -> list[Account]:
        """Get a company's accounts, ordered by type then name"""
        query = self.db.query(Account).filter(Account.company_id == company_id)
        if not include_inactive:
            query = query.filter(Account.is_active.is_(True))
        return query.order_by(Account.type, Account.name).all()

    def get_by_id_and_company(self, account_id: int, company_id: int) -> Account | None:
        """
        Look up an account by id within a company.

        Deactivated accounts are returned too. None when the id is unknown
        or owned by a different company, so callers cannot tell the two apart.
        """
        return (
            self.db.query(Account)
            .filter(Account.id == account_id, Account.company_id == company_id)
            .first()
        )

    def create(self, account: Account) -> Account:
        self.db.add(account)
        self.db.commit()
        self.db.refresh(account)
        return account

    def update(self, account: Account) -> Account:
        """Commit pending changes on an already-loaded account"""
        self.db.commit()
        self.db.refresh(account)
        return account
