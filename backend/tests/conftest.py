"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
import jwt  # PyJWT

from api.dependencies import reset_container
from shared.config import get_settings
from shared.database import reset_client_cache


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

SUPERVISOR_ID = "5f0c6a52-2d7e-4c84-9a43-6a0d9b0f1a01"
OPERATOR_ID = "8a1d2f3e-4b5c-4d6e-8f70-91a2b3c4d5e6"


def create_test_token(
    user_id: str = SUPERVISOR_ID,
    nivel_acesso: str = "supervisor",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a session token the way the API issues them.

    Args:
        user_id: User ID to include in the token
        nivel_acesso: Access level claim
        expired: If True, creates an expired token
        secret: Signing secret

    Returns:
        Token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=8)

    payload = {
        "sub": user_id,
        "nivel_acesso": nivel_acesso,
        "exp": int(exp.timestamp()),
        "iat": int((now - timedelta(hours=9) if expired else now).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    """Pin settings to test values and drop every cached singleton."""
    monkeypatch.setenv("JWT_SECRET", TEST_JWT_SECRET)
    monkeypatch.setenv("SESSION_SECRET", "test-session-secret")
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    monkeypatch.setenv("DEBUG", "false")
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_SERVICE_ROLE_KEY", raising=False)
    get_settings.cache_clear()
    reset_container()
    reset_client_cache()
    yield get_settings()
    get_settings.cache_clear()
    reset_container()
    reset_client_cache()


@pytest.fixture
def supervisor_token() -> str:
    """A valid supervisor token."""
    return create_test_token(SUPERVISOR_ID, "supervisor")


@pytest.fixture
def operator_token() -> str:
    """A valid operator token."""
    return create_test_token(OPERATOR_ID, "operador")
