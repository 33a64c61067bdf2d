from accountboard.client.api_client import ApiClient, LOGIN_PATH, resolve_base_url
from accountboard.client.errors import ApiError
from accountboard.client.outcomes import Ok, Outcome, Unauthorized
from accountboard.client.token_store import TOKEN_KEY, FileTokenStore, MemoryTokenStore, TokenStore

__all__ = [
    "ApiClient",
    "ApiError",
    "FileTokenStore",
    "LOGIN_PATH",
    "MemoryTokenStore",
    "Ok",
    "Outcome",
    "TOKEN_KEY",
    "TokenStore",
    "Unauthorized",
    "resolve_base_url",
]
