"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class AccessLevel(str, Enum):
    """Closed set of roles a user can hold (nivel_acesso)."""

    OPERADOR = "operador"
    SUPERVISOR = "supervisor"


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated caller.

    Populated from verified session token claims and made available
    to route handlers via dependency injection.
    """

    id: str = Field(..., description="User ID")
    nivel_acesso: AccessLevel = Field(..., description="Access level from the token")
    issued_at: Optional[datetime] = Field(None, description="Token issue time")
    expires_at: Optional[datetime] = Field(None, description="Token expiry time")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
