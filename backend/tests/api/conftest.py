"""
Fixtures for API tests.

Routes run against the real services wired to in-memory repositories, so
requests go through the access gate, the services, and the session layer
without a store.
"""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import (
    get_auth_service,
    get_directory_service,
    get_monitoring_service,
)
from modules.auth.passwords import hash_password
from modules.auth.service import AuthService
from modules.auth.tokens import TokenCodec
from modules.directory.service import DirectoryService
from modules.monitoring.service import MonitoringService
from shared.models import AccessLevel

from tests.conftest import OPERATOR_ID, SUPERVISOR_ID, TEST_JWT_SECRET
from tests.fakes import InMemoryStatusRepository, InMemoryUserRepository

SUPERVISOR_EMAIL = "sara@example.com"
SUPERVISOR_PASSWORD = "senha-sup"
OPERATOR_EMAIL = "otto@example.com"
OPERATOR_PASSWORD = "senha-op"


@pytest.fixture
def users():
    repo = InMemoryUserRepository()
    repo.add(
        "Sara",
        SUPERVISOR_EMAIL,
        hash_password(SUPERVISOR_PASSWORD, rounds=4),
        AccessLevel.SUPERVISOR,
        user_id=SUPERVISOR_ID,
    )
    repo.add(
        "Otto",
        OPERATOR_EMAIL,
        hash_password(OPERATOR_PASSWORD, rounds=4),
        AccessLevel.OPERADOR,
        supervisor_id=SUPERVISOR_ID,
        user_id=OPERATOR_ID,
    )
    return repo


@pytest.fixture
def statuses():
    return InMemoryStatusRepository()


@pytest.fixture
def app(users, statuses):
    """Application with services backed by the in-memory repositories."""
    application = create_app()
    monitoring = MonitoringService(statuses)
    auth = AuthService(users, TokenCodec(TEST_JWT_SECRET))
    directory = DirectoryService(users, monitoring)

    application.dependency_overrides[get_auth_service] = lambda: auth
    application.dependency_overrides[get_monitoring_service] = lambda: monitoring
    application.dependency_overrides[get_directory_service] = lambda: directory
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def supervisor_client(app, supervisor_token):
    """Client carrying a supervisor session cookie."""
    client = TestClient(app)
    client.cookies.set("session_token", supervisor_token)
    return client


@pytest.fixture
def operator_client(app, operator_token):
    """Client carrying an operator session cookie."""
    client = TestClient(app)
    client.cookies.set("session_token", operator_token)
    return client
