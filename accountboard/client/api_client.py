"""
HTTP client for the AccountBoard REST API.

One ``ApiClient`` per process (or per user session), constructed
explicitly and passed to whatever needs it. The client holds the bearer
token, attaches it to every request and turns responses into one of
three results:

- 2xx: the parsed JSON body
- 401: token cleared, login hook called, ``Unauthorized`` returned
- anything else: ``ApiError`` with the server's ``error`` message
"""

import json
import logging
from typing import Any, Callable, Mapping

import httpx

from accountboard.client.errors import ApiError, NETWORK_ERROR_MESSAGE, REQUEST_FAILED_MESSAGE
from accountboard.client.outcomes import Ok, Outcome, Unauthorized
from accountboard.client.token_store import TOKEN_KEY, FileTokenStore, TokenStore
from accountboard.config import settings

logger = logging.getLogger(__name__)

LOGIN_PATH = "/login"
LOOPBACK_HOSTS = frozenset({"localhost", "127.0.0.1", "::1"})


def resolve_base_url(
    host: str,
    dev_url: str = settings.API_DEV_BASE_URL,
    prod_url: str = settings.API_PROD_BASE_URL,
) -> str:
    """Local backend for loopback hosts, production backend for everything else."""
    if host in LOOPBACK_HOSTS:
        return dev_url
    return prod_url


def _log_redirect(path: str) -> None:
    logger.info("Session is no longer authorized; login required at %s", path)


def _unwrap(data: Any, key: str) -> Any:
    if not isinstance(data, dict):
        return None
    return data.get(key)


class ApiClient:
    """
    Authenticated access point to the backend.

    Args:
        base_url: API root including the ``/api`` prefix. Resolved once from
            ``settings.API_HOST`` when omitted.
        token_store: persistent token storage (default: ``FileTokenStore``
            at ``settings.API_TOKEN_FILE``)
        http_client: preconfigured ``httpx.Client``; the client owns and
            closes it either way
        timeout: per-request timeout in seconds for the default HTTP client
        on_unauthorized: called with the login path after a 401 has cleared
            the token
    """

    def __init__(
        self,
        base_url: str | None = None,
        token_store: TokenStore | None = None,
        http_client: httpx.Client | None = None,
        timeout: float | None = None,
        on_unauthorized: Callable[[str], None] | None = None,
    ):
        self.base_url = (base_url or resolve_base_url(settings.API_HOST)).rstrip("/")
        self.token_store = token_store if token_store is not None else FileTokenStore(settings.API_TOKEN_FILE)
        self.on_unauthorized = on_unauthorized or _log_redirect
        self._http = http_client or httpx.Client(
            timeout=timeout if timeout is not None else settings.API_TIMEOUT
        )
        self.token: str | None = self.token_store.get(TOKEN_KEY)

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    # Token

    def set_token(self, token: str | None) -> None:
        """Replace the held token; a falsy value clears it from memory and storage."""
        self.token = token or None
        if token:
            self.token_store.set(TOKEN_KEY, token)
        else:
            self.token_store.remove(TOKEN_KEY)

    # Request primitive

    def _headers(self, extra: Mapping[str, str] | None = None) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if extra:
            headers.update(extra)
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _dispatch(
        self,
        method: str,
        path: str,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        content = None
        if body is not None:
            content = body if isinstance(body, (str, bytes)) else json.dumps(body)

        try:
            return self._http.request(
                method,
                f"{self.base_url}{path}",
                content=content,
                headers=self._headers(headers),
                params=params,
            )
        except httpx.TransportError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise ApiError(NETWORK_ERROR_MESSAGE) from exc

    def _check_status(self, method: str, path: str, response: httpx.Response) -> Unauthorized | None:
        """None for 2xx, Unauthorized for 401; raises ApiError for any other status."""
        if response.is_success:
            return None

        if response.status_code == 401:
            self.set_token(None)
            self.on_unauthorized(LOGIN_PATH)
            return Unauthorized()

        try:
            data = response.json()
        except ValueError:
            message = NETWORK_ERROR_MESSAGE
        else:
            message = (data.get("error") if isinstance(data, dict) else None) or REQUEST_FAILED_MESSAGE

        logger.warning("%s %s returned %s: %s", method, path, response.status_code, message)
        raise ApiError(message, status_code=response.status_code)

    def send(
        self,
        path: str,
        method: str = "GET",
        body: Any = None,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> Outcome:
        """
        Perform one request and return its tagged outcome.

        Raises:
            ApiError: transport failure, a non-2xx, non-401 response, or a
                2xx body that is not JSON
        """
        response = self._dispatch(method, path, body=body, headers=headers, params=params)
        unauthorized = self._check_status(method, path, response)
        if unauthorized is not None:
            return unauthorized
        if not response.content:
            return Ok(None)
        try:
            return Ok(response.json())
        except ValueError as exc:
            logger.warning("%s %s returned a non-JSON body", method, path)
            raise ApiError(NETWORK_ERROR_MESSAGE, status_code=response.status_code) from exc

    def request(
        self,
        path: str,
        method: str = "GET",
        body: Any = None,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Like ``send`` but returns the JSON body directly, or None after a 401."""
        outcome = self.send(path, method=method, body=body, headers=headers, params=params)
        if isinstance(outcome, Unauthorized):
            return None
        return outcome.data

    def download(self, path: str) -> bytes | None:
        """GET a binary payload; the body is returned unparsed."""
        response = self._dispatch("GET", path)
        if self._check_status("GET", path, response) is not None:
            return None
        return response.content

    # Auth

    def login(self, email: str, password: str, company_id: int | None = None) -> Any:
        response = self.request(
            "/auth/login",
            method="POST",
            body={"email": email, "password": password, "companyId": company_id},
        )
        if response and response.get("token"):
            self.set_token(response["token"])
        return response

    def logout(self) -> None:
        self.request("/auth/logout", method="POST")
        self.set_token(None)

    def get_current_user(self) -> Any:
        return self.request("/auth/me")

    def change_password(self, current_password: str, new_password: str) -> Any:
        return self.request(
            "/auth/change-password",
            method="PUT",
            body={"currentPassword": current_password, "newPassword": new_password},
        )

    # Employees

    def get_employees(self) -> Any:
        return _unwrap(self.request("/employees"), "employees")

    def get_employee(self, employee_id: int) -> Any:
        return _unwrap(self.request(f"/employees/{employee_id}"), "employee")

    def create_employee(self, employee_data: dict) -> Any:
        return _unwrap(self.request("/employees", method="POST", body=employee_data), "employee")

    def update_employee(self, employee_id: int, employee_data: dict) -> Any:
        return _unwrap(self.request(f"/employees/{employee_id}", method="PUT", body=employee_data), "employee")

    def delete_employee(self, employee_id: int) -> Any:
        return self.request(f"/employees/{employee_id}", method="DELETE")

    def make_payment_to_employee(self, employee_id: int, payment_data: dict) -> Any:
        return self.request(f"/employees/{employee_id}/payment", method="POST", body=payment_data)

    # Accounts

    def get_accounts(self) -> Any:
        return _unwrap(self.request("/accounts"), "accounts")

    def get_account(self, account_id: int) -> Any:
        return _unwrap(self.request(f"/accounts/{account_id}"), "account")

    def create_account(self, account_data: dict) -> Any:
        return _unwrap(self.request("/accounts", method="POST", body=account_data), "account")

    def update_account(self, account_id: int, account_data: dict) -> Any:
        return _unwrap(self.request(f"/accounts/{account_id}", method="PUT", body=account_data), "account")

    def delete_account(self, account_id: int) -> Any:
        return self.request(f"/accounts/{account_id}", method="DELETE")

    def transfer_between_accounts(
        self, from_account_id: int, to_account_id: int, amount: float, description: str | None = None
    ) -> Any:
        return self.request(
            "/accounts/transfer",
            method="POST",
            body={
                "fromAccountId": from_account_id,
                "toAccountId": to_account_id,
                "amount": amount,
                "description": description,
            },
        )

    def get_account_transactions(self, account_id: int, page: int = 1, limit: int = 50) -> Any:
        return self.request(f"/accounts/{account_id}/transactions", params={"page": page, "limit": limit})

    # Transactions

    def get_transactions(self, filters: Mapping[str, Any] | None = None) -> Any:
        return self.request("/transactions", params=filters or {})

    def get_transaction(self, transaction_id: int) -> Any:
        return _unwrap(self.request(f"/transactions/{transaction_id}"), "transaction")

    def create_transaction(self, transaction_data: dict) -> Any:
        return _unwrap(self.request("/transactions", method="POST", body=transaction_data), "transaction")

    def update_transaction(self, transaction_id: int, transaction_data: dict) -> Any:
        return self.request(f"/transactions/{transaction_id}", method="PUT", body=transaction_data)

    def delete_transaction(self, transaction_id: int) -> Any:
        return self.request(f"/transactions/{transaction_id}", method="DELETE")

    def approve_transaction(self, transaction_id: int, status: str) -> Any:
        return self.request(f"/transactions/{transaction_id}/approval", method="PUT", body={"status": status})

    def add_payment_to_transaction(self, transaction_id: int, payment_data: dict) -> Any:
        return self.request(f"/transactions/{transaction_id}/payments", method="POST", body=payment_data)

    # Customers

    def get_customers(self, filters: Mapping[str, Any] | None = None) -> Any:
        return self.request("/customers", params=filters or {})

    def get_customer(self, customer_id: int) -> Any:
        return _unwrap(self.request(f"/customers/{customer_id}"), "customer")

    def create_customer(self, customer_data: dict) -> Any:
        return _unwrap(self.request("/customers", method="POST", body=customer_data), "customer")

    def update_customer(self, customer_id: int, customer_data: dict) -> Any:
        return _unwrap(self.request(f"/customers/{customer_id}", method="PUT", body=customer_data), "customer")

    def delete_customer(self, customer_id: int) -> Any:
        return self.request(f"/customers/{customer_id}", method="DELETE")

    def get_customer_transactions(self, customer_id: int, page: int = 1, limit: int = 50) -> Any:
        return self.request(f"/customers/{customer_id}/transactions", params={"page": page, "limit": limit})

    def export_customers_csv(self) -> bytes | None:
        return self.download("/customers/export/csv")

    # Services and expense categories

    def get_services(self) -> Any:
        return self.request("/services")

    def get_service(self, service_id: int) -> Any:
        return _unwrap(self.request(f"/services/services/{service_id}"), "service")

    def create_service(self, service_data: dict) -> Any:
        return _unwrap(self.request("/services/services", method="POST", body=service_data), "service")

    def update_service(self, service_id: int, service_data: dict) -> Any:
        return _unwrap(
            self.request(f"/services/services/{service_id}", method="PUT", body=service_data), "service"
        )

    def delete_service(self, service_id: int) -> Any:
        return self.request(f"/services/services/{service_id}", method="DELETE")

    def create_expense_category(self, category_data: dict) -> Any:
        return _unwrap(
            self.request("/services/expense-categories", method="POST", body=category_data), "expenseCategory"
        )

    def update_expense_category(self, category_id: int, category_data: dict) -> Any:
        return _unwrap(
            self.request(f"/services/expense-categories/{category_id}", method="PUT", body=category_data),
            "expenseCategory",
        )

    def delete_expense_category(self, category_id: int) -> Any:
        return self.request(f"/services/expense-categories/{category_id}", method="DELETE")

    def get_service_statistics(self, service_id: int) -> Any:
        return self.request(f"/services/services/{service_id}/statistics")
