"""
Authentication module.

Handles password hashing, session token issue/verification and login.

Public API:
- IAuthService: Interface for auth operations
- TokenCodec: Session token signer/verifier
- hash_password / verify_password: Credential verifier
- Auth exceptions: MissingTokenError, TokenError and its kinds, etc.
"""

from .interfaces import IAuthService
from .models import SessionClaims, User, LoginResult
from .passwords import hash_password, verify_password
from .tokens import TokenCodec
from .exceptions import (
    TokenErrorKind,
    TokenError,
    MalformedTokenError,
    SignatureMismatchError,
    ExpiredTokenError,
    MissingTokenError,
    InvalidCredentialsError,
    EmailAlreadyRegisteredError,
    InsufficientPermissionsError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "SessionClaims",
    "User",
    "LoginResult",
    # Primitives
    "TokenCodec",
    "hash_password",
    "verify_password",
    # Exceptions
    "TokenErrorKind",
    "TokenError",
    "MalformedTokenError",
    "SignatureMismatchError",
    "ExpiredTokenError",
    "MissingTokenError",
    "InvalidCredentialsError",
    "EmailAlreadyRegisteredError",
    "InsufficientPermissionsError",
]
