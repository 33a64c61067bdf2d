class AccountBoardException(Exception):
    """Base exception for AccountBoard"""

    pass


class UnauthorizedException(AccountBoardException):
    """Raised when credentials or the JWT fail validation"""

    pass


class NotFoundException(AccountBoardException):
    """Raised when resource not found"""

    pass


class ForbiddenException(AccountBoardException):
    """Raised when a user lacks the role required for an operation"""

    pass


class ValidationException(AccountBoardException):
    """Raised for business logic validation errors"""

    pass


class ProvisioningError(AccountBoardException):
    """Raised when a provisioning step fails; carries the failing step name"""

    def __init__(self, step: str, cause: BaseException):
        self.step = step
        self.cause = cause
        super().__init__(f"Provisioning step '{step}' failed: {cause}")
