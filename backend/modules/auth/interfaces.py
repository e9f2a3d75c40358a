"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from shared.models import AccessLevel, AuthenticatedUser

from .models import LoginResult


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to the API layer. Implementations must provide all these methods.
    """

    async def login(
        self,
        email: str,
        senha: str,
        required_level: AccessLevel,
    ) -> LoginResult:
        """
        Check credentials for a role and issue a session token.

        Args:
            email: Login email
            senha: Plaintext password
            required_level: Role the login route is for

        Returns:
            LoginResult with the token and the user

        Raises:
            InvalidCredentialsError: Unknown email, wrong role or wrong password
            UpstreamFailure: The store could not be queried
        """
        ...

    async def register_supervisor(self, nome: str, email: str, senha: str) -> str:
        """
        Register a supervisor account.

        Returns:
            The new supervisor's ID

        Raises:
            EmailAlreadyRegisteredError: If the email already exists
        """
        ...

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a session token and return the authenticated user.

        Raises:
            AuthenticationError: If the token is missing, invalid or expired
        """
        ...
