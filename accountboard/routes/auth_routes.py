import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from accountboard.database import get_db
from accountboard.dependencies import get_auth_context
from accountboard.models.auth_context import AuthContext
from accountboard.services.auth_service import AuthService
from accountboard.schemas.auth_schemas import (
    ChangePasswordRequest,
    CurrentUserResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    """
    Exchange email and password for a bearer token.

    - 401 with a single generic message for unknown email, wrong password
      or deactivated user
    """
    service = AuthService(db)
    token, user = service.login(data)
    return LoginResponse(message="Login successful", token=token, user=user)


@router.get("/me", response_model=CurrentUserResponse)
def get_current_user(context: AuthContext = Depends(get_auth_context), db: Session = Depends(get_db)):
    """Details of the user the token belongs to"""
    service = AuthService(db)
    return CurrentUserResponse(user=service.describe(context.user))


@router.post("/logout", response_model=MessageResponse)
def logout(context: AuthContext = Depends(get_auth_context)):
    """Tokens are stateless; the client discards its copy"""
    logger.info("User %s logged out", context.user.id)
    return MessageResponse(message="Logout successful")


@router.put("/change-password", response_model=MessageResponse)
def change_password(
    data: ChangePasswordRequest,
    context: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    """
    Change the caller's password.

    - Requires the current password
    - New password must be at least 6 characters
    """
    service = AuthService(db)
    service.change_password(data, context)
    return MessageResponse(message="Password changed successfully")
