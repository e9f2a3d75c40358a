"""
Shift monitoring endpoints.

Operators register their own events; supervisors read and override the
status of the operators they supervise. An operator outside the caller's
roster always yields 404, whether or not it exists.
"""

from fastapi import APIRouter, Depends, HTTPException

from modules.directory.exceptions import OperatorNotFoundError
from modules.directory.interfaces import IDirectoryService
from modules.monitoring.exceptions import InvalidEventError
from modules.monitoring.interfaces import IMonitoringService
from modules.monitoring.models import (
    EventReceipt,
    OperatorRef,
    OperatorStatus,
    RegisterEventRequest,
    SetStatusRequest,
    SetStatusResponse,
)
from shared.models import AuthenticatedUser

from ..dependencies import get_directory_service, get_monitoring_service
from ..middleware.auth import RequireOperator, RequireSupervisor

router = APIRouter()


@router.post("/registrar", response_model=EventReceipt)
async def register_event(
    body: RegisterEventRequest,
    user: AuthenticatedUser = RequireOperator,
    monitoring: IMonitoringService = Depends(get_monitoring_service),
) -> EventReceipt:
    """
    Register a shift event for the calling operator.

    tipo: entrada | saida | almoco_inicio | almoco_fim | ping
    """
    try:
        return await monitoring.record_event(user.id, body.tipo)
    except InvalidEventError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.get("/status", response_model=list[OperatorStatus])
async def list_statuses(
    user: AuthenticatedUser = RequireSupervisor,
    directory: IDirectoryService = Depends(get_directory_service),
    monitoring: IMonitoringService = Depends(get_monitoring_service),
) -> list[OperatorStatus]:
    """Status and timestamps of every operator of the calling supervisor."""
    operators = await directory.list_operators(user.id)
    refs = [OperatorRef(id=op.id, nome=op.nome) for op in operators]
    return await monitoring.get_statuses(refs)


@router.get("/{operador_id}", response_model=OperatorStatus)
async def get_operator_status(
    operador_id: str,
    user: AuthenticatedUser = RequireSupervisor,
    directory: IDirectoryService = Depends(get_directory_service),
    monitoring: IMonitoringService = Depends(get_monitoring_service),
) -> OperatorStatus:
    """
    Status of one supervised operator.

    Operators without a record get a default (offline, no timestamps) that
    is not saved.
    """
    try:
        operator = await directory.get_supervised_operator(user.id, operador_id)
    except OperatorNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)

    return await monitoring.get_status(operator)


@router.put("/{operador_id}/status", response_model=SetStatusResponse)
async def set_operator_status(
    operador_id: str,
    body: SetStatusRequest,
    user: AuthenticatedUser = RequireSupervisor,
    directory: IDirectoryService = Depends(get_directory_service),
    monitoring: IMonitoringService = Depends(get_monitoring_service),
) -> SetStatusResponse:
    """Override the online flag of one supervised operator."""
    try:
        operator = await directory.get_supervised_operator(user.id, operador_id)
    except OperatorNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)

    await monitoring.set_status(operator.id, body.status_online)
    return SetStatusResponse(
        message="Status atualizado",
        operador_id=operator.id,
        status=body.status_online,
    )
