import logging

from sqlalchemy.orm import Session

from accountboard.core.exceptions import NotFoundException, UnauthorizedException
from accountboard.core.security import create_access_token, hash_password, verify_password
from accountboard.models.auth_context import AuthContext
from accountboard.models.user import User
from accountboard.repositories.company_repository import CompanyRepository
from accountboard.repositories.user_repository import UserRepository
from accountboard.schemas.auth_schemas import ChangePasswordRequest, LoginRequest, UserResponse

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    """Service layer for login, session lookup and password changes"""

    def __init__(self, db: Session):
        self.db = db
        self.user_repo = UserRepository(db)
        self.company_repo = CompanyRepository(db)

    def login(self, data: LoginRequest) -> tuple[str, UserResponse]:
        """
        Verify credentials and issue an access token.

        Returns:
            Tuple of (token, user details)

        Raises:
            UnauthorizedException: Unknown email, wrong password or inactive user.
                The message is the same in all three cases.
        """
        user = self.user_repo.get_by_email(data.email, company_id=data.company_id)
        if user is None or not user.is_active or not verify_password(data.password, user.password):
            logger.info("Rejected login for %s", data.email)
            raise UnauthorizedException(INVALID_CREDENTIALS)

        token = create_access_token(user.id, user.company_id, user.role)
        logger.info("User %s logged in to company %s", user.id, user.company_id)
        return token, self.describe(user)

    def resolve_context(self, user_id: int, company_id: int) -> AuthContext:
        """
        Load the user and company named by a verified token.

        Raises:
            UnauthorizedException: If the user is gone, inactive or moved company
        """
        user = self.user_repo.get_by_id(user_id)
        if user is None or not user.is_active or user.company_id != company_id:
            raise UnauthorizedException("User not found")

        company = self.company_repo.get_by_id(company_id)
        if company is None:
            raise UnauthorizedException("Company not found")

        return AuthContext(user=user, company=company)

    def describe(self, user: User) -> UserResponse:
        company = self.company_repo.get_by_id(user.company_id)
        if company is None:
            raise NotFoundException("Company not found")
        return UserResponse(
            id=user.id,
            email=user.email,
            role=user.role,
            company_id=company.id,
            company_name=company.name,
            is_active=user.is_active,
        )

    def change_password(self, data: ChangePasswordRequest, context: AuthContext) -> None:
        """
        Replace the user's password after checking the current one.

        Raises:
            UnauthorizedException: If the current password is wrong
        """
        if not verify_password(data.current_password, context.user.password):
            raise UnauthorizedException("Current password is incorrect")

        context.user.password = hash_password(data.new_password)
        self.user_repo.update(context.user)
        logger.info("User %s changed password", context.user.id)
