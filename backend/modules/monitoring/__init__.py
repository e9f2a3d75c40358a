"""
Monitoring module: the per-operator status ledger.

Public API:
- IMonitoringService: Interface for status reads and writes
- StatusEvent, StatusRecord, OperatorStatus: Data models
- InvalidEventError: Raised for unknown event kinds
"""

from .interfaces import IMonitoringService
from .models import (
    StatusEvent,
    StatusRecord,
    OperatorRef,
    OperatorStatus,
    EventReceipt,
)
from .exceptions import InvalidEventError

__all__ = [
    "IMonitoringService",
    "StatusEvent",
    "StatusRecord",
    "OperatorRef",
    "OperatorStatus",
    "EventReceipt",
    "InvalidEventError",
]
