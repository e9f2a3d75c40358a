"""
Authentication service implementation.

Checks credentials against the usuarios table and issues session tokens.
"""

import logging
from datetime import datetime, timezone

from shared.models import AccessLevel, AuthenticatedUser

from .exceptions import EmailAlreadyRegisteredError, InvalidCredentialsError
from .interfaces import IAuthService
from .models import LoginResult
from .passwords import hash_password, verify_password
from .repository import UserRepository
from .tokens import TokenCodec

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    The codec (and therefore the signing secret) and the repository are
    injected at construction.
    """

    def __init__(self, users: UserRepository, codec: TokenCodec):
        self._users = users
        self._codec = codec

    async def login(
        self,
        email: str,
        senha: str,
        required_level: AccessLevel,
    ) -> LoginResult:
        """Check credentials for the requested role and issue a token."""
        user = self._users.get_by_email(email)

        if user is None or user.nivel_acesso != required_level:
            logger.warning(
                "Login rejected for %s: no %s with this email",
                email,
                required_level.value,
            )
            raise InvalidCredentialsError(
                f"Credenciais inválidas para {required_level.value}"
            )

        if not verify_password(senha, user.senha):
            logger.warning("Login rejected for %s: wrong password", email)
            raise InvalidCredentialsError()

        now = datetime.now(timezone.utc)
        token = self._codec.issue(user.id, user.nivel_acesso, now=now)
        logger.info("User %s logged in as %s", user.id, user.nivel_acesso.value)

        return LoginResult(
            token=token,
            user=user,
            expires_at=now + self._codec.ttl,
        )

    async def register_supervisor(self, nome: str, email: str, senha: str) -> str:
        """Register a supervisor account (self-service)."""
        if self._users.email_exists(email):
            raise EmailAlreadyRegisteredError(email)

        user = self._users.create(
            nome=nome,
            email=email,
            password_hash=hash_password(senha),
            access_level=AccessLevel.SUPERVISOR,
        )
        logger.info("Supervisor %s registered", user.id)
        return user.id

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """Verify a token and convert its claims to an AuthenticatedUser."""
        return self._codec.verify(token).to_user()
