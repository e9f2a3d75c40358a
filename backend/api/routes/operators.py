"""
Operator roster endpoints (supervisors only).
"""

from fastapi import APIRouter, Depends, HTTPException

from modules.directory.exceptions import DuplicateEmailError
from modules.directory.interfaces import IDirectoryService
from modules.directory.models import (
    OperatorSummary,
    RegisterOperatorRequest,
    RegisterOperatorResponse,
)
from shared.models import AuthenticatedUser

from ..dependencies import get_directory_service
from ..middleware.auth import RequireSupervisor

router = APIRouter()


@router.post("/cadastrar", response_model=RegisterOperatorResponse, status_code=201)
async def register_operator(
    body: RegisterOperatorRequest,
    user: AuthenticatedUser = RequireSupervisor,
    directory: IDirectoryService = Depends(get_directory_service),
) -> RegisterOperatorResponse:
    """
    Register an operator under the calling supervisor.

    An empty offline status record is created for the new operator.
    """
    try:
        operator_id = await directory.register_operator(
            body.nome, body.email, body.senha, user.id
        )
    except DuplicateEmailError as e:
        raise HTTPException(status_code=400, detail=e.message)

    return RegisterOperatorResponse(
        message="Operador cadastrado com sucesso",
        operador_id=operator_id,
    )


@router.get("/list", response_model=list[OperatorSummary])
async def list_operators(
    user: AuthenticatedUser = RequireSupervisor,
    directory: IDirectoryService = Depends(get_directory_service),
) -> list[OperatorSummary]:
    """List the calling supervisor's operators with their online flag."""
    return await directory.list_operators(user.id)
