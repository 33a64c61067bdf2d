from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from accountboard.core.security import decode_jwt
from accountboard.core.exceptions import UnauthorizedException
from accountboard.database import get_db
from accountboard.models.auth_context import AuthContext
from accountboard.services.auth_service import AuthService

security = HTTPBearer(auto_error=False)


async def get_auth_context(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
) -> AuthContext:
    """
    FastAPI dependency to validate the JWT and load user and company.

    Flow:
    1. Extract token from Authorization: Bearer <token>
    2. Validate JWT using SECRET_KEY
    3. Read user id ('sub') and company_id claims
    4. Load the active user and its company
    5. Return AuthContext for use in endpoints

    Raises:
        UnauthorizedException: If token missing, invalid, expired or stale
            (rendered as 401 by the exception handler)
    """
    if credentials is None:
        raise UnauthorizedException("Access token required")

    payload = decode_jwt(credentials.credentials)
    try:
        user_id = int(payload["sub"])
        company_id = int(payload["company_id"])
    except (TypeError, ValueError):
        raise UnauthorizedException("Token has malformed identifiers")

    return AuthService(db).resolve_context(user_id, company_id)
