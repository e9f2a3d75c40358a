"""
Directory module interface.
"""

from typing import Protocol, runtime_checkable

from modules.monitoring.models import OperatorRef

from .models import OperatorSummary


@runtime_checkable
class IDirectoryService(Protocol):
    """Interface for the supervisor -> operator roster."""

    async def register_operator(
        self,
        nome: str,
        email: str,
        senha: str,
        supervisor_id: str,
    ) -> str:
        """
        Register an operator under a supervisor.

        Returns:
            The new operator's ID

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        ...

    async def list_operators(self, supervisor_id: str) -> list[OperatorSummary]:
        """List the supervisor's operators with their online flag."""
        ...

    async def get_supervised_operator(
        self,
        supervisor_id: str,
        operator_id: str,
    ) -> OperatorRef:
        """
        Resolve an operator the supervisor owns.

        Raises:
            OperatorNotFoundError: If absent or owned by someone else
        """
        ...
