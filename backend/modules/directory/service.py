"""
Directory service implementation.

Owns operator registration and the supervisor's roster. Status data is
read and initialized through the monitoring module's interface.
"""

import logging
import uuid

from modules.auth.passwords import hash_password
from modules.auth.repository import UserRepository
from modules.monitoring.interfaces import IMonitoringService
from modules.monitoring.models import OperatorRef
from shared.models import AccessLevel

from .exceptions import DuplicateEmailError, OperatorNotFoundError
from .interfaces import IDirectoryService
from .models import OperatorSummary

logger = logging.getLogger(__name__)


def _is_uuid(value: str) -> bool:
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True


class DirectoryService(IDirectoryService):
    """Directory service backed by the usuarios table."""

    def __init__(self, users: UserRepository, monitoring: IMonitoringService):
        self._users = users
        self._monitoring = monitoring

    async def register_operator(
        self,
        nome: str,
        email: str,
        senha: str,
        supervisor_id: str,
    ) -> str:
        # Checked before insert; two concurrent registrations of one email
        # are left to the unique index.
        if self._users.email_exists(email):
            raise DuplicateEmailError(email)

        operator = self._users.create(
            nome=nome,
            email=email,
            password_hash=hash_password(senha),
            access_level=AccessLevel.OPERADOR,
            supervisor_id=supervisor_id,
        )
        await self._monitoring.initialize(operator.id)

        logger.info("Supervisor %s registered operator %s", supervisor_id, operator.id)
        return operator.id

    async def list_operators(self, supervisor_id: str) -> list[OperatorSummary]:
        operators = self._users.list_by_supervisor(supervisor_id)
        online = await self._monitoring.get_online_flags([op.id for op in operators])
        return [
            OperatorSummary(
                id=op.id,
                nome=op.nome,
                email=op.email,
                nivel_acesso=op.nivel_acesso,
                online=online.get(op.id, False),
            )
            for op in operators
        ]

    async def get_supervised_operator(
        self,
        supervisor_id: str,
        operator_id: str,
    ) -> OperatorRef:
        if not _is_uuid(operator_id):
            raise OperatorNotFoundError(operator_id)

        operator = self._users.get_by_id_for_supervisor(operator_id, supervisor_id)
        if operator is None:
            raise OperatorNotFoundError(operator_id)
        return OperatorRef(id=operator.id, nome=operator.nome)
