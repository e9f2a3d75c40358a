"""
Directory module: supervisors' operator rosters.

Public API:
- IDirectoryService: Interface for roster operations
- OperatorSummary: Roster entry
- DuplicateEmailError, OperatorNotFoundError
"""

from .interfaces import IDirectoryService
from .models import OperatorSummary, RegisterOperatorRequest, RegisterOperatorResponse
from .exceptions import DuplicateEmailError, OperatorNotFoundError

__all__ = [
    "IDirectoryService",
    "OperatorSummary",
    "RegisterOperatorRequest",
    "RegisterOperatorResponse",
    "DuplicateEmailError",
    "OperatorNotFoundError",
]
