NETWORK_ERROR_MESSAGE = "Network error"
REQUEST_FAILED_MESSAGE = "Request failed"


class ApiError(Exception):
    """
    Failure reported by the API client.

    status_code is None for transport failures (unreachable host, timeout,
    broken connection) and the HTTP status for application errors.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)
