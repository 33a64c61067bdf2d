from datetime import datetime
from pydantic import BaseModel, Field
from accountboard.models.account import AccountType


class AccountCreate(BaseModel):
    """Schema for creating a new account"""

    name: str = Field(..., min_length=1, max_length=255)
    type: AccountType
    balance: float = Field(default=0.00)
    currency: str = Field(default="TRY", min_length=3, max_length=3)


class AccountUpdate(BaseModel):
    """Schema for updating an account"""

    name: str | None = Field(None, min_length=1, max_length=255)
    type: AccountType | None = None
    currency: str | None = Field(None, min_length=3, max_length=3)
    is_active: bool | None = None


class AccountResponse(BaseModel):
    """Schema for account response"""

    id: int
    company_id: int
    name: str
    type: AccountType
    balance: float
    currency: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class AccountEnvelope(BaseModel):
    account: AccountResponse


class AccountListResponse(BaseModel):
    """Schema for list of accounts"""

    accounts: list[AccountResponse]
    total: int
