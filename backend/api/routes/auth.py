"""
Authentication endpoints.

Login stores the issued token in the signed cookie session (Starlette
SessionMiddleware, nothing kept on the server) and mirrors it in an httpOnly
session_token cookie; either one is accepted by the access gate.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from modules.auth.exceptions import EmailAlreadyRegisteredError, InvalidCredentialsError
from modules.auth.interfaces import IAuthService
from modules.auth.models import (
    LoginRequest,
    LoginResponse,
    RegisterSupervisorRequest,
    RegisterSupervisorResponse,
)
from shared.config import Settings, get_settings
from shared.models import AccessLevel

from ..dependencies import get_auth_service
from ..middleware.auth import SESSION_TOKEN_KEY

router = APIRouter()

LOGIN_MESSAGES = {
    AccessLevel.OPERADOR: "Login de operador bem-sucedido",
    AccessLevel.SUPERVISOR: "Login de supervisor bem-sucedido",
}


def set_session_credential(
    request: Request,
    response: Response,
    token: str,
    settings: Settings,
) -> None:
    """Store the token in the session and in the mirrored cookie."""
    request.session[SESSION_TOKEN_KEY] = token
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.token_ttl_hours * 60 * 60,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )


async def login_as(
    level: AccessLevel,
    body: LoginRequest,
    request: Request,
    response: Response,
    auth: IAuthService,
    settings: Settings,
) -> LoginResponse:
    try:
        result = await auth.login(body.email, body.senha, level)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=400, detail=e.message)

    set_session_credential(request, response, result.token, settings)
    return LoginResponse(
        message=LOGIN_MESSAGES[level],
        userId=result.user.id,
        nivel_acesso=result.user.nivel_acesso,
    )


@router.post("/login-operador", response_model=LoginResponse)
async def login_operador(
    body: LoginRequest,
    request: Request,
    response: Response,
    auth: IAuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
) -> LoginResponse:
    """Log in an operator."""
    return await login_as(AccessLevel.OPERADOR, body, request, response, auth, settings)


@router.post("/login-supervisor", response_model=LoginResponse)
async def login_supervisor(
    body: LoginRequest,
    request: Request,
    response: Response,
    auth: IAuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
) -> LoginResponse:
    """Log in a supervisor."""
    return await login_as(AccessLevel.SUPERVISOR, body, request, response, auth, settings)


@router.post(
    "/registrar-supervisor",
    response_model=RegisterSupervisorResponse,
    status_code=201,
)
async def register_supervisor(
    body: RegisterSupervisorRequest,
    auth: IAuthService = Depends(get_auth_service),
) -> RegisterSupervisorResponse:
    """Self-service supervisor registration."""
    try:
        supervisor_id = await auth.register_supervisor(body.nome, body.email, body.senha)
    except EmailAlreadyRegisteredError as e:
        raise HTTPException(status_code=400, detail=e.message)

    return RegisterSupervisorResponse(
        message="Supervisor cadastrado com sucesso",
        supervisor_id=supervisor_id,
    )


@router.post("/logout")
async def logout(
    request: Request,
    response: Response,
    settings: Settings = Depends(get_settings),
) -> dict[str, str]:
    """Drop the session and the mirrored cookie."""
    request.session.clear()
    response.delete_cookie(settings.session_cookie_name)
    return {"message": "Logout realizado"}
