"""
Status ledger service.

Applies shift events to the single monitoramento row of each operator:

    Unknown -> Offline -> Online -> (lunch markers) -> Online -> Offline

Each event is one conflict-resolving upsert carrying only the columns the
event touches, never a read followed by insert-or-update.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from .exceptions import InvalidEventError
from .interfaces import IMonitoringService
from .models import (
    EventReceipt,
    OperatorRef,
    OperatorStatus,
    StatusEvent,
    StatusRecord,
)
from .repository import StatusRepository

logger = logging.getLogger(__name__)

DEFAULT_STATUS_NOTE = "Nenhum registro de monitoramento para este operador"

# event -> (timestamp column set to now, online flag written)
# None means the event leaves that part of the record alone.
EVENT_EFFECTS: dict[StatusEvent, tuple[Optional[str], Optional[bool]]] = {
    StatusEvent.ENTRADA: ("horario_entrada", True),
    StatusEvent.SAIDA: ("horario_saida", False),
    StatusEvent.ALMOCO_INICIO: ("horario_almoco_inicio", None),
    StatusEvent.ALMOCO_FIM: ("horario_almoco_fim", None),
    StatusEvent.PING: (None, True),
}

EVENT_MESSAGES: dict[StatusEvent, str] = {
    StatusEvent.ENTRADA: "Entrada registrada",
    StatusEvent.SAIDA: "Saída registrada",
    StatusEvent.ALMOCO_INICIO: "Início do almoço registrado",
    StatusEvent.ALMOCO_FIM: "Fim do almoço registrado",
    StatusEvent.PING: "Atividade registrada",
}


def parse_event(tipo: Any) -> StatusEvent:
    """Convert a raw tipo value to a StatusEvent or raise InvalidEventError."""
    try:
        return StatusEvent(tipo)
    except ValueError:
        raise InvalidEventError(tipo)


def build_event_update(event: StatusEvent, now: datetime) -> dict[str, Any]:
    """
    Columns written for an event.

    Always stamps ultima_atividade.
    """
    column, online = EVENT_EFFECTS[event]
    stamp = now.isoformat()
    fields: dict[str, Any] = {"ultima_atividade": stamp}
    if column is not None:
        fields[column] = stamp
    if online is not None:
        fields["status_online"] = online
    return fields


class MonitoringService(IMonitoringService):
    """Status ledger backed by the monitoramento table."""

    def __init__(self, repository: StatusRepository):
        self._repository = repository

    async def record_event(
        self,
        operator_id: str,
        tipo: Any,
        now: Optional[datetime] = None,
    ) -> EventReceipt:
        event = parse_event(tipo)
        now = now or datetime.now(timezone.utc)

        self._repository.upsert(operator_id, build_event_update(event, now))
        logger.debug("Operator %s registered %s", operator_id, event.value)

        return EventReceipt(message=EVENT_MESSAGES[event], tipo=event, horario=now)

    async def set_status(self, operator_id: str, online: bool) -> None:
        # Supervisor override: online flag only, no activity stamp.
        self._repository.upsert(operator_id, {"status_online": online})
        logger.info("Status of operator %s set to online=%s", operator_id, online)

    async def initialize(self, operator_id: str) -> None:
        self._repository.upsert(
            operator_id,
            {"status_online": False},
            ignore_duplicates=True,
        )

    async def get_status(self, operator: OperatorRef) -> OperatorStatus:
        record = self._repository.get(operator.id)
        return self._to_status(operator, record)

    async def get_statuses(self, operators: list[OperatorRef]) -> list[OperatorStatus]:
        records = self._repository.get_many([op.id for op in operators])
        return [self._to_status(op, records.get(op.id)) for op in operators]

    async def get_online_flags(self, operator_ids: list[str]) -> dict[str, bool]:
        records = self._repository.get_many(operator_ids)
        return {
            operator_id: records[operator_id].status_online if operator_id in records else False
            for operator_id in operator_ids
        }

    def _to_status(
        self,
        operator: OperatorRef,
        record: Optional[StatusRecord],
    ) -> OperatorStatus:
        """Merge identity and record; synthesize the unsaved default if absent."""
        if record is None:
            return OperatorStatus(
                operador_id=operator.id,
                nome=operator.nome,
                status_online=False,
                observacao=DEFAULT_STATUS_NOTE,
            )
        return OperatorStatus(**record.model_dump(), nome=operator.nome)
