from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Credentials posted to /api/auth/login"""

    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)
    company_id: int | None = Field(None, alias="companyId")


class ChangePasswordRequest(BaseModel):
    """Body of PUT /api/auth/change-password"""

    model_config = ConfigDict(populate_by_name=True)

    current_password: str = Field(..., min_length=1, alias="currentPassword")
    new_password: str = Field(..., min_length=6, alias="newPassword")


class UserResponse(BaseModel):
    """Logged-in user, without the password hash"""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    email: str
    role: str
    company_id: int = Field(serialization_alias="companyId")
    company_name: str = Field(serialization_alias="companyName")
    is_active: bool = Field(serialization_alias="isActive")


class LoginResponse(BaseModel):
    message: str
    token: str
    user: UserResponse


class CurrentUserResponse(BaseModel):
    user: UserResponse


class MessageResponse(BaseModel):
    message: str
