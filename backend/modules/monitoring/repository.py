"""
Status repository for the monitoramento table.

Every write is a single upsert on the operador_id unique constraint, so
concurrent writers for the same operator never produce a second row; the
last committed write wins for each column it carries.
"""

from typing import Any, Optional

from shared.repository import BaseRepository

from .models import StatusRecord

STATUS_TABLE = "monitoramento"
CONFLICT_KEY = "operador_id"


class StatusRepository(BaseRepository[StatusRecord]):
    """Repository for per-operator status rows."""

    def upsert(
        self,
        operator_id: str,
        fields: dict[str, Any],
        ignore_duplicates: bool = False,
    ) -> None:
        """
        Insert or update the operator's row with only the given columns.

        Args:
            operator_id: The operator's user ID.
            fields: Columns to write. Columns not listed keep their value on
                update and take the table default on insert.
            ignore_duplicates: Leave an existing row untouched.
        """
        data = {CONFLICT_KEY: operator_id, **fields}
        self._execute(
            self._db.table(STATUS_TABLE).upsert(
                data,
                on_conflict=CONFLICT_KEY,
                ignore_duplicates=ignore_duplicates,
            ),
            "upsert status",
        )

    def get(self, operator_id: str) -> Optional[StatusRecord]:
        """Get the operator's row, or None if it was never created."""
        result = self._execute(
            self._db.table(STATUS_TABLE).select("*").eq(CONFLICT_KEY, operator_id).limit(1),
            "get status",
        )
        if not result.data:
            return None
        return self._map_to_record(result.data[0])

    def get_many(self, operator_ids: list[str]) -> dict[str, StatusRecord]:
        """Get rows for several operators, keyed by operator ID."""
        if not operator_ids:
            return {}
        result = self._execute(
            self._db.table(STATUS_TABLE).select("*").in_(CONFLICT_KEY, operator_ids),
            "list statuses",
        )
        records = [self._map_to_record(row) for row in result.data]
        return {record.operador_id: record for record in records}

    def _map_to_record(self, data: dict[str, Any]) -> StatusRecord:
        """Map database row to StatusRecord model."""
        return StatusRecord(
            operador_id=str(data[CONFLICT_KEY]),
            status_online=bool(data.get("status_online") or False),
            horario_entrada=data.get("horario_entrada"),
            horario_almoco_inicio=data.get("horario_almoco_inicio"),
            horario_almoco_fim=data.get("horario_almoco_fim"),
            horario_saida=data.get("horario_saida"),
            ultima_atividade=data.get("ultima_atividade"),
        )
