"""
Monitoring data models.

A StatusRecord is the single monitoramento row of an operator. Lunch
timestamps are informational markers only; they never change the online
flag.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class StatusEvent(str, Enum):
    """Shift events an operator can register."""

    ENTRADA = "entrada"
    SAIDA = "saida"
    ALMOCO_INICIO = "almoco_inicio"
    ALMOCO_FIM = "almoco_fim"
    PING = "ping"


class StatusRecord(BaseModel):
    """Stored monitoramento row."""

    operador_id: str
    status_online: bool = False
    horario_entrada: Optional[datetime] = None
    horario_almoco_inicio: Optional[datetime] = None
    horario_almoco_fim: Optional[datetime] = None
    horario_saida: Optional[datetime] = None
    ultima_atividade: Optional[datetime] = None


class OperatorRef(BaseModel):
    """Identity of an operator whose status is being read."""

    id: str
    nome: Optional[str] = None


class OperatorStatus(StatusRecord):
    """
    Status as returned to supervisors.

    observacao is set only when no record exists and the values are the
    synthesized default.
    """

    nome: Optional[str] = None
    observacao: Optional[str] = None


class RegisterEventRequest(BaseModel):
    """
    Body of POST /monitoramento/registrar.

    tipo accepts any JSON value; unknown values are rejected by the service.
    """

    tipo: Any = Field(..., description="entrada | saida | almoco_inicio | almoco_fim | ping")


class EventReceipt(BaseModel):
    """Result of registering an event."""

    message: str
    tipo: StatusEvent
    horario: datetime


class SetStatusRequest(BaseModel):
    """Body of PUT /monitoramento/{operador_id}/status."""

    status_online: bool


class SetStatusResponse(BaseModel):
    """Result of a supervisor-issued status change."""

    message: str
    operador_id: str
    status: bool
