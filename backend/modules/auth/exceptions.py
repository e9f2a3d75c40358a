"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API layer
to return the matching HTTP responses.
"""

from enum import Enum

from shared.exceptions import AuthenticationError, AuthorizationError, ValidationError


class TokenErrorKind(str, Enum):
    """Why a session token failed verification."""

    MALFORMED = "malformed"
    SIGNATURE_MISMATCH = "signature_mismatch"
    EXPIRED = "expired"


class MissingTokenError(AuthenticationError):
    """Raised when no session token is provided."""

    def __init__(self, message: str = "Usuário não autenticado"):
        super().__init__(message, code="MISSING_TOKEN")


class TokenError(AuthenticationError):
    """Raised when a session token fails verification."""

    kind: TokenErrorKind = TokenErrorKind.MALFORMED

    def __init__(self, message: str = "Token inválido ou expirado"):
        super().__init__(
            message,
            code=f"TOKEN_{self.kind.name}",
            details={"kind": self.kind.value},
        )


class MalformedTokenError(TokenError):
    """Token is not a decodable token or its claims are incomplete."""

    kind = TokenErrorKind.MALFORMED


class SignatureMismatchError(TokenError):
    """Token was not signed with the current secret."""

    kind = TokenErrorKind.SIGNATURE_MISMATCH


class ExpiredTokenError(TokenError):
    """Token is past its expiry."""

    kind = TokenErrorKind.EXPIRED


class InvalidCredentialsError(ValidationError):
    """Raised when email/password do not match a user of the requested role."""

    def __init__(self, message: str = "Credenciais inválidas"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class EmailAlreadyRegisteredError(ValidationError):
    """Raised when registering an email that already exists."""

    def __init__(self, email: str):
        super().__init__(
            "Email já cadastrado",
            code="DUPLICATE_EMAIL",
            details={"email": email},
        )


class InsufficientPermissionsError(AuthorizationError):
    """Raised when the caller's access level does not satisfy the route."""

    def __init__(self, required_level: str, user_level: str):
        message = (
            "Acesso restrito a supervisores"
            if required_level == "supervisor"
            else "Acesso restrito a operadores"
        )
        super().__init__(
            message,
            code="INSUFFICIENT_PERMISSIONS",
            details={"required_level": required_level, "user_level": user_level},
        )
