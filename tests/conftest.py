import os
import tempfile

# Settings are read at import time; configure them before importing accountboard
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("API_TOKEN_FILE", os.path.join(tempfile.gettempdir(), "accountboard-test-storage.json"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from accountboard.client import ApiClient, MemoryTokenStore
from accountboard.core.security import hash_password
from accountboard.database import create_db_engine, get_db
from accountboard.models import Company, User, UserRole
from accountboard.provisioning import Provisioner
# Import FastAPI app AFTER model imports
from accountboard.main import app

DEMO_EMAIL = "admin@demo.com"
DEMO_PASSWORD = "admin123"


@pytest.fixture(scope="function")
def engine():
    """Fresh in-memory database per test; StaticPool keeps it on one connection"""
    test_engine = create_db_engine("sqlite:///:memory:", poolclass=StaticPool)
    yield test_engine
    test_engine.dispose()


@pytest.fixture(scope="function")
def file_engine(tmp_path):
    """File-backed SQLite engine with a regular connection pool"""
    test_engine = create_db_engine(f"sqlite:///{tmp_path / 'accountboard.db'}")
    yield test_engine
    test_engine.dispose()


@pytest.fixture(scope="function")
def provisioned(engine):
    """Run the provisioner once (schema, indexes and demo tenant)"""
    return Provisioner(engine).run()


@pytest.fixture(scope="function")
def db_session(engine, provisioned):
    """Session on the provisioned database"""
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def demo_company(db_session):
    return db_session.query(Company).filter(Company.email == DEMO_EMAIL).one()


@pytest.fixture(scope="function")
def client(db_session):
    """FastAPI test client with test database"""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def create_user(db_session, company_id: int, email: str, password: str = "secret123",
                role: str = UserRole.EMPLOYEE.value, is_active: bool = True) -> User:
    """Insert a login user directly"""
    user = User(
        company_id=company_id,
        email=email,
        password=hash_password(password),
        role=role,
        is_active=is_active,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def login_headers(client, email: str = DEMO_EMAIL, password: str = DEMO_PASSWORD) -> dict:
    """Authorization headers for a user logged in through the API"""
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def auth_headers(client):
    """Authorization headers for the demo manager"""
    return login_headers(client)


@pytest.fixture
def redirects():
    """Login paths passed to the client's unauthorized hook"""
    return []


@pytest.fixture
def token_store():
    return MemoryTokenStore()


@pytest.fixture
def api(client, token_store, redirects):
    """ApiClient talking to the in-process backend"""
    return ApiClient(
        base_url="http://testserver/api",
        token_store=token_store,
        http_client=client,
        on_unauthorized=redirects.append,
    )
