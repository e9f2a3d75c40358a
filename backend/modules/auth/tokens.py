"""
Session token codec.

Issues and verifies HS256-signed tokens carrying the user id and access
level. Tokens are never stored server side: rotating the secret invalidates
every outstanding token at once.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.models import AccessLevel

from .exceptions import (
    ExpiredTokenError,
    MalformedTokenError,
    MissingTokenError,
    SignatureMismatchError,
)
from .models import SessionClaims

JWT_ALGORITHM = "HS256"


class TokenCodec:
    """Signs and verifies session tokens with a process-wide secret."""

    def __init__(self, secret: str, ttl: timedelta = timedelta(hours=8)):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._ttl = ttl

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(
        self,
        user_id: str,
        access_level: AccessLevel,
        ttl: Optional[timedelta] = None,
        now: Optional[datetime] = None,
    ) -> str:
        """
        Create a signed token for a user.

        Args:
            user_id: The user's ID (stored as the "sub" claim)
            access_level: The user's access level
            ttl: Override for the default lifetime
            now: Issue time (defaults to the current UTC time)

        Returns:
            Encoded token string
        """
        issued_at = now or datetime.now(timezone.utc)
        expires_at = issued_at + (ttl if ttl is not None else self._ttl)
        payload = {
            "sub": str(user_id),
            "nivel_acesso": AccessLevel(access_level).value,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)

    def verify(self, token: Optional[str]) -> SessionClaims:
        """
        Verify signature and expiry, then return the claims.

        Raises:
            MissingTokenError: No token given
            ExpiredTokenError: Token is past its expiry
            SignatureMismatchError: Token signed with another secret
            MalformedTokenError: Anything else (undecodable, missing claims,
                unknown access level)
        """
        if not token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidSignatureError:
            raise SignatureMismatchError()
        except jwt.InvalidTokenError:
            raise MalformedTokenError()

        try:
            return SessionClaims(**payload)
        except PydanticValidationError:
            raise MalformedTokenError()
