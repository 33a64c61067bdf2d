"""ApiClient against the in-process backend on a provisioned database"""

import pytest

from accountboard.client import ApiError, LOGIN_PATH, TOKEN_KEY
from tests.conftest import DEMO_EMAIL, DEMO_PASSWORD


def test_demo_login_stores_token(api, token_store):
    response = api.login(DEMO_EMAIL, DEMO_PASSWORD)

    assert response["user"]["role"] == "manager"
    assert api.token == response["token"]
    assert token_store.get(TOKEN_KEY) == response["token"]


def test_failed_login_redirects(api, redirects):
    """A failed login is a 401 like any other"""
    assert api.login(DEMO_EMAIL, "wrong") is None
    assert api.token is None
    assert redirects == [LOGIN_PATH]


def test_accounts_after_login(api):
    api.login(DEMO_EMAIL, DEMO_PASSWORD)

    accounts = api.get_accounts()

    assert sorted(a["name"] for a in accounts) == ["Bank Account", "Cash", "Credit Card"]


def test_current_user(api, demo_company):
    api.login(DEMO_EMAIL, DEMO_PASSWORD)

    user = api.get_current_user()["user"]

    assert user["companyId"] == demo_company.id
    assert user["companyName"] == "Demo Company"


def test_create_and_fetch_account(api):
    api.login(DEMO_EMAIL, DEMO_PASSWORD)

    created = api.create_account({"name": "Reserve", "type": "equity", "balance": 100})
    fetched = api.get_account(created["id"])

    assert fetched["name"] == "Reserve"
    assert fetched["balance"] == 100.0


def test_stale_token_clears_and_redirects(api, token_store, redirects):
    api.set_token("not-a-valid-token")

    assert api.get_accounts() is None
    assert api.token is None
    assert token_store.get(TOKEN_KEY) is None
    assert redirects == [LOGIN_PATH]


def test_missing_token_redirects(api, redirects):
    assert api.get_current_user() is None
    assert redirects == [LOGIN_PATH]


def test_server_error_message_surfaces(api):
    api.login(DEMO_EMAIL, DEMO_PASSWORD)

    with pytest.raises(ApiError) as exc_info:
        api.get_account(99999)

    assert exc_info.value.message == "Account not found"
    assert exc_info.value.status_code == 404


def test_validation_error_message(api):
    api.login(DEMO_EMAIL, DEMO_PASSWORD)

    with pytest.raises(ApiError) as exc_info:
        api.create_account({"name": "Broken", "type": "savings"})

    assert exc_info.value.message == "Validation failed"
    assert exc_info.value.status_code == 400


def test_change_password_then_relogin(api):
    api.login(DEMO_EMAIL, DEMO_PASSWORD)

    api.change_password(DEMO_PASSWORD, "new-secret")
    api.logout()

    assert api.token is None
    assert api.login(DEMO_EMAIL, "new-secret")["token"]


def test_logout_keeps_token_out_of_store(api, token_store):
    api.login(DEMO_EMAIL, DEMO_PASSWORD)

    api.logout()

    assert token_store.get(TOKEN_KEY) is None
