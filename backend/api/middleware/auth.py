"""
Access gate.

Two chained FastAPI dependencies protect the routes:

1. get_current_user: verifies the session token (signed cookie session
   first, then the mirrored session_token cookie) and yields the caller.
2. require_access_level(level): depends on get_current_user, so it never
   runs for an unauthenticated request, and checks the caller's role.

Neither stage touches the store.
"""

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status

from modules.auth.exceptions import (
    InsufficientPermissionsError,
    MissingTokenError,
    TokenError,
)
from modules.auth.tokens import TokenCodec
from shared.config import Settings, get_settings
from shared.models import AccessLevel, AuthenticatedUser

from ..dependencies import get_token_codec

logger = logging.getLogger(__name__)

SESSION_TOKEN_KEY = "token"


class AuthError(HTTPException):
    """Authentication error with consistent format."""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
        )


class ForbiddenError(HTTPException):
    """Authorization error with consistent format."""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
        )


def get_candidate_tokens(request: Request, cookie_name: str) -> list[str]:
    """
    Collect the tokens the caller presented, session first.

    The session is only read when SessionMiddleware is installed.
    """
    candidates: list[str] = []
    if "session" in request.scope:
        session_token = request.session.get(SESSION_TOKEN_KEY)
        if session_token:
            candidates.append(session_token)

    cookie_token = request.cookies.get(cookie_name)
    if cookie_token and cookie_token not in candidates:
        candidates.append(cookie_token)
    return candidates


def authenticate(candidates: list[str], codec: TokenCodec) -> AuthenticatedUser:
    """
    Verify each presented token on its own; the first valid one wins.

    Raises:
        MissingTokenError: Nothing was presented
        TokenError: No candidate verified (the first failure is raised)
    """
    if not candidates:
        raise MissingTokenError()

    first_error: Optional[TokenError] = None
    for token in candidates:
        try:
            claims = codec.verify(token)
        except TokenError as e:
            first_error = first_error or e
            continue
        return claims.to_user()

    raise first_error


async def get_current_user(
    request: Request,
    codec: TokenCodec = Depends(get_token_codec),
    settings: Settings = Depends(get_settings),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    try:
        user = authenticate(get_candidate_tokens(request, settings.session_cookie_name), codec)
    except MissingTokenError as e:
        raise AuthError(e.message)
    except TokenError as e:
        logger.info("Rejected session token (%s)", e.kind.value)
        raise AuthError(e.message)

    request.state.user = user
    return user


def check_access_level(user: AuthenticatedUser, required: AccessLevel) -> None:
    """Raise InsufficientPermissionsError unless the user holds the required level."""
    if user.nivel_acesso is not AccessLevel(required):
        raise InsufficientPermissionsError(required.value, user.nivel_acesso.value)


def require_access_level(required: AccessLevel):
    """
    Build a dependency that admits only callers with the given access level.

    Usage:
        @router.get("/supervisor-only")
        async def route(user: AuthenticatedUser = RequireSupervisor):
            ...
    """
    async def dep(user: AuthenticatedUser = Depends(get_current_user)) -> AuthenticatedUser:
        try:
            check_access_level(user, required)
        except InsufficientPermissionsError as e:
            raise ForbiddenError(e.message)
        return user
    return dep


# Type aliases for cleaner route definitions
RequireAuth = Depends(get_current_user)
RequireSupervisor = Depends(require_access_level(AccessLevel.SUPERVISOR))
RequireOperator = Depends(require_access_level(AccessLevel.OPERADOR))
