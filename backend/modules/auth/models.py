"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import AccessLevel, AuthenticatedUser


class SessionClaims(BaseModel):
    """
    Decoded session token payload.

    Only ever constructed from a token whose signature and expiry were
    verified.
    """

    sub: str = Field(..., description="Subject (user ID)")
    nivel_acesso: AccessLevel = Field(..., description="Access level")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")

    model_config = {"frozen": True}

    def to_user(self) -> AuthenticatedUser:
        """The caller these claims identify."""
        return AuthenticatedUser(
            id=self.sub,
            nivel_acesso=self.nivel_acesso,
            issued_at=datetime.fromtimestamp(self.iat, tz=timezone.utc),
            expires_at=datetime.fromtimestamp(self.exp, tz=timezone.utc),
        )


class User(BaseModel):
    """A row of the usuarios table."""

    id: str
    nome: Optional[str] = None
    email: str
    senha: str = Field(..., repr=False, description="bcrypt digest")
    nivel_acesso: AccessLevel
    supervisor_id: Optional[str] = None


class LoginRequest(BaseModel):
    """Credentials posted to the login routes."""

    email: str = Field(..., min_length=1)
    senha: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    """Body returned by a successful login."""

    message: str
    userId: str
    nivel_acesso: AccessLevel


class LoginResult(BaseModel):
    """Outcome of AuthService.login: the issued token plus the user."""

    token: str
    user: User
    expires_at: datetime


class RegisterSupervisorRequest(BaseModel):
    """Self-service supervisor registration."""

    nome: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    senha: str = Field(..., min_length=1)


class RegisterSupervisorResponse(BaseModel):
    """Body returned after a supervisor registers."""

    message: str
    supervisor_id: str
