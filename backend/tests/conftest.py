from __future__ import annotations

import time

import pytest
from httpx import ASGITransport, AsyncClient
from jose import jwt
from starlette.testclient import TestClient

from staffboard.core.dependencies import get_current_user
from staffboard.core.storage import MemoryStorage
from staffboard.main import app
from staffboard.models.auth import UserInfo
from staffboard.models.employee import Employee
from staffboard.services.employee_store import EmployeeStore

TEST_SECRET = "test-secret-key"
TEST_ALGORITHM = "HS256"


@pytest.fixture(autouse=True)
def _test_settings():
    from staffboard.core.config import settings

    original_secret = settings.AUTH_SECRET_KEY
    original_backend = settings.STORAGE_BACKEND
    settings.AUTH_SECRET_KEY = TEST_SECRET
    settings.STORAGE_BACKEND = "memory"
    yield
    settings.AUTH_SECRET_KEY = original_secret
    settings.STORAGE_BACKEND = original_backend


def _make_token(
    *,
    sub: str = "admin@empresa.com",
    name: str = "Administrador",
    role: str = "admin",
    expired: bool = False,
    secret: str = TEST_SECRET,
) -> str:
    now = int(time.time())
    claims = {
        "sub": sub,
        "name": name,
        "email": sub,
        "role": role,
        "iat": now - 60,
        "exp": now - 3600 if expired else now + 3600,
    }
    return jwt.encode(claims, secret, algorithm=TEST_ALGORITHM)


def make_employee(employee_id: str, **fields) -> Employee:
    defaults = {
        "first_name": "Test",
        "last_name": f"User{employee_id}",
        "email": f"user{employee_id}@empresa.com",
        "position": "Developer",
        "department": "Technology",
        "salary": "40000",
        "hire_date": "2024-01-01",
        "status": "Active",
    }
    defaults.update(fields)
    return Employee(id=employee_id, **defaults)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    return EmployeeStore(storage)


@pytest.fixture
def empty_store(storage):
    return EmployeeStore(storage, seed=())


@pytest.fixture
def client(store):
    app.state.employee_store = store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(store):
    app.state.employee_store = store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.state.employee_store = None
    app.dependency_overrides.clear()


@pytest.fixture
def mock_user_admin():
    return UserInfo(id="admin@empresa.com", name="Administrador", email="admin@empresa.com", role="admin")


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {_make_token()}"}


@pytest.fixture
def authenticated_client(store, mock_user_admin):
    app.state.employee_store = store
    app.dependency_overrides[get_current_user] = lambda: mock_user_admin
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
