from sqlalchemy.orm import Session
from accountboard.models.account import Account
from accountboard.models.auth_context import AuthContext
from accountboard.repositories.account_repository import AccountRepository
from accountboard.schemas.account_schemas import AccountCreate, AccountUpdate
from accountboard.core.exceptions import NotFoundException, ForbiddenException


class AccountService:
    """Service for account business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = AccountRepository(db)

    def _require_manager(self, context: AuthContext) -> None:
        if not context.is_manager():
            raise ForbiddenException("Manager role required")

    def create_account(self, data: AccountCreate, context: AuthContext) -> Account:
        """Create new account for the caller's company (managers only)"""
        self._require_manager(context)
        account = Account(
            company_id=context.company_id,
            name=data.name,
            type=data.type.value,
            balance=data.balance,
            currency=data.currency,
        )
        return self.repo.create(account)

    def get_company_accounts(self, context: AuthContext) -> list[Account]:
        """Get all active accounts of the caller's company"""
        return self.repo.get_by_company(context.company_id)

    def get_account(self, account_id: int, context: AuthContext) -> Account:
        """
        Get specific account ensuring company ownership.

        Raises:
            NotFoundException: If account not found or belongs to another company
        """
        account = self.repo.get_by_id_and_company(account_id, context.company_id)
        if not account:
            raise NotFoundException("Account not found")
        return account

    def update_account(self, account_id: int, data: AccountUpdate, context: AuthContext) -> Account:
        """Update account details; the balance only moves through transactions"""
        self._require_manager(context)
        account = self.get_account(account_id, context)

        if data.name is not None:
            account.name = data.name
        if data.type is not None:
            account.type = data.type.value
        if data.currency is not None:
            account.currency = data.currency
        if data.is_active is not None:
            account.is_active = data.is_active

        return self.repo.update(account)

    def deactivate_account(self, account_id: int, context: AuthContext) -> Account:
        """Soft-delete: the row and its transactions stay, is_active turns false"""
        self._require_manager(context)
        account = self.get_account(account_id, context)
        account.is_active = False
        return self.repo.update(account)
