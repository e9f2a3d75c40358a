"""
Monitoring module interface.

The API layer and the directory module depend on IMonitoringService for
every read and write of operator status.
"""

from datetime import datetime
from typing import Any, Optional, Protocol, runtime_checkable

from .models import EventReceipt, OperatorRef, OperatorStatus


@runtime_checkable
class IMonitoringService(Protocol):
    """Interface for the per-operator status ledger."""

    async def record_event(
        self,
        operator_id: str,
        tipo: Any,
        now: Optional[datetime] = None,
    ) -> EventReceipt:
        """
        Apply a shift event to the operator's record.

        Raises:
            InvalidEventError: If tipo is not a known event (nothing is written)
        """
        ...

    async def set_status(self, operator_id: str, online: bool) -> None:
        """Set only the online flag, creating the record if absent."""
        ...

    async def initialize(self, operator_id: str) -> None:
        """Create an empty offline record if none exists."""
        ...

    async def get_status(self, operator: OperatorRef) -> OperatorStatus:
        """Get the stored record, or an unsaved default if there is none."""
        ...

    async def get_statuses(self, operators: list[OperatorRef]) -> list[OperatorStatus]:
        """Get statuses for several operators, in the given order."""
        ...

    async def get_online_flags(self, operator_ids: list[str]) -> dict[str, bool]:
        """Map each operator ID to its online flag (False when absent)."""
        ...
