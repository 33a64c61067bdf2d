from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from accountboard.database import get_db
from accountboard.dependencies import get_auth_context
from accountboard.models.auth_context import AuthContext
from accountboard.services.account_service import AccountService
from accountboard.schemas.account_schemas import (
    AccountCreate,
    AccountUpdate,
    AccountEnvelope,
    AccountListResponse,
)
from accountboard.schemas.auth_schemas import MessageResponse

router = APIRouter()


@router.post("", response_model=AccountEnvelope, status_code=status.HTTP_201_CREATED)
def create_account(
    data: AccountCreate, context: AuthContext = Depends(get_auth_context), db: Session = Depends(get_db)
):
    """Create a new account for the caller's company (manager only)"""
    service = AccountService(db)
    account = service.create_account(data, context)
    return {"account": account}


@router.get("", response_model=AccountListResponse)
def list_accounts(context: AuthContext = Depends(get_auth_context), db: Session = Depends(get_db)):
    """Get all active accounts for the caller's company"""
    service = AccountService(db)
    accounts = service.get_company_accounts(context)
    return AccountListResponse(accounts=accounts, total=len(accounts))


@router.get("/{account_id}", response_model=AccountEnvelope)
def get_account(
    account_id: int, context: AuthContext = Depends(get_auth_context), db: Session = Depends(get_db)
):
    """Get specific account details"""
    service = AccountService(db)
    account = service.get_account(account_id, context)
    return {"account": account}


@router.put("/{account_id}", response_model=AccountEnvelope)
def update_account(
    account_id: int,
    data: AccountUpdate,
    context: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    """Update account details (manager only)"""
    service = AccountService(db)
    account = service.update_account(account_id, data, context)
    return {"account": account}


@router.delete("/{account_id}", response_model=MessageResponse)
def delete_account(
    account_id: int, context: AuthContext = Depends(get_auth_context), db: Session = Depends(get_db)
):
    """Deactivate an account; its transactions are kept (manager only)"""
    service = AccountService(db)
    service.deactivate_account(account_id, context)
    return MessageResponse(message="Account deactivated")
