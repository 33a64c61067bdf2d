from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from accountboard.config import settings
from accountboard.core.exceptions import UnauthorizedException

ALGORITHM = "HS256"


def build_password_context(rounds: int = settings.BCRYPT_ROUNDS) -> CryptContext:
    """bcrypt context with an explicit work factor (minimum 10 rounds)."""
    if rounds < 10:
        raise ValueError(f"bcrypt rounds must be at least 10, got {rounds}")
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


pwd_context = build_password_context()


def hash_password(password: str, context: CryptContext | None = None) -> str:
    """Hash a plain-text password with bcrypt."""
    return (context or pwd_context).hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain-text password against a stored bcrypt hash."""
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(user_id: int, company_id: int, role: str, expires_delta: timedelta | None = None) -> str:
    """
    Create a signed access token for a logged-in user.

    Claims: 'sub' (user id as string), 'company_id', 'role', 'iat', 'exp'.
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    payload = {
        "sub": str(user_id),
        "company_id": company_id,
        "role": role,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)


def decode_jwt(token: str) -> dict:
    """
    Decode and validate JWT token using SECRET_KEY.

    Args:
        token: JWT access token from Authorization header

    Returns:
        Decoded token payload with 'sub' (user_id), 'company_id', 'exp', etc.

    Raises:
        UnauthorizedException: If token invalid, expired, or malformed
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as e:
        raise UnauthorizedException(f"Invalid token: {str(e)}")

    # Validate expiration (jose checks the value automatically, not its presence)
    if payload.get("exp") is None:
        raise UnauthorizedException("Token missing expiration")

    if payload.get("sub") is None:
        raise UnauthorizedException("Token missing user identifier")

    if payload.get("company_id") is None:
        raise UnauthorizedException("Token missing company identifier")

    return payload

