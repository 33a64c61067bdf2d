"""Tagged outcomes of a single API request."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Ok:
    """2xx response; data is the parsed JSON body (None for an empty body)."""

    data: Any


@dataclass(frozen=True)
class Unauthorized:
    """
    401 response.

    By the time this is returned the token has been cleared and the login
    redirect hook has run. It is not an error: callers get no exception.
    """

    status_code: int = 401


Outcome = Ok | Unauthorized
