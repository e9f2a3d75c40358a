"""Tests for modules/directory/service.py."""

import pytest

from modules.auth.passwords import verify_password
from modules.directory.exceptions import DuplicateEmailError, OperatorNotFoundError
from modules.directory.service import DirectoryService
from modules.monitoring.service import MonitoringService
from shared.models import AccessLevel

from tests.conftest import OPERATOR_ID, SUPERVISOR_ID
from tests.fakes import InMemoryStatusRepository, InMemoryUserRepository

OTHER_SUPERVISOR_ID = "0b7e2c1d-3f4a-4b5c-8d6e-7f8091a2b3c4"


class TestDirectoryService:
    @pytest.fixture
    def users(self):
        repo = InMemoryUserRepository()
        repo.add("Sara", "sara@example.com", "digest", AccessLevel.SUPERVISOR, user_id=SUPERVISOR_ID)
        repo.add(
            "Rui", "rui@example.com", "digest", AccessLevel.SUPERVISOR, user_id=OTHER_SUPERVISOR_ID
        )
        return repo

    @pytest.fixture
    def statuses(self):
        return InMemoryStatusRepository()

    @pytest.fixture
    def service(self, users, statuses):
        return DirectoryService(users, MonitoringService(statuses))

    @pytest.mark.asyncio
    async def test_register_operator(self, service, users, statuses):
        """A new operator belongs to the caller and starts offline."""
        operator_id = await service.register_operator(
            "Otto", "otto@example.com", "senha-op", SUPERVISOR_ID
        )

        created = users.rows[operator_id]
        assert created.nivel_acesso is AccessLevel.OPERADOR
        assert created.supervisor_id == SUPERVISOR_ID
        assert verify_password("senha-op", created.senha)
        assert statuses.rows[operator_id]["status_online"] is False

    @pytest.mark.asyncio
    async def test_register_then_list(self, service):
        operator_id = await service.register_operator(
            "Otto", "otto@example.com", "senha-op", SUPERVISOR_ID
        )

        roster = await service.list_operators(SUPERVISOR_ID)

        assert len(roster) == 1
        assert roster[0].id == operator_id
        assert roster[0].email == "otto@example.com"
        assert roster[0].nivel_acesso is AccessLevel.OPERADOR
        assert roster[0].online is False

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self, service, statuses):
        with pytest.raises(DuplicateEmailError):
            await service.register_operator("X", "sara@example.com", "x", SUPERVISOR_ID)
        assert statuses.writes == []

    @pytest.mark.asyncio
    async def test_list_only_own_operators(self, service):
        await service.register_operator("Otto", "otto@example.com", "x", SUPERVISOR_ID)
        await service.register_operator("Bia", "bia@example.com", "x", OTHER_SUPERVISOR_ID)

        roster = await service.list_operators(SUPERVISOR_ID)

        assert [op.nome for op in roster] == ["Otto"]

    @pytest.mark.asyncio
    async def test_list_reflects_online_flag(self, service, statuses):
        operator_id = await service.register_operator("Otto", "otto@example.com", "x", SUPERVISOR_ID)
        statuses.upsert(operator_id, {"status_online": True})

        roster = await service.list_operators(SUPERVISOR_ID)

        assert roster[0].online is True

    @pytest.mark.asyncio
    async def test_list_without_status_row_is_offline(self, service, users):
        users.add(
            "Otto", "otto@example.com", "digest", AccessLevel.OPERADOR,
            supervisor_id=SUPERVISOR_ID, user_id=OPERATOR_ID,
        )
        roster = await service.list_operators(SUPERVISOR_ID)
        assert roster[0].online is False

    @pytest.mark.asyncio
    async def test_get_supervised_operator(self, service):
        operator_id = await service.register_operator("Otto", "otto@example.com", "x", SUPERVISOR_ID)

        ref = await service.get_supervised_operator(SUPERVISOR_ID, operator_id)

        assert ref.id == operator_id
        assert ref.nome == "Otto"

    @pytest.mark.asyncio
    async def test_operator_of_other_supervisor_not_found(self, service):
        operator_id = await service.register_operator("Bia", "bia@example.com", "x", OTHER_SUPERVISOR_ID)

        with pytest.raises(OperatorNotFoundError):
            await service.get_supervised_operator(SUPERVISOR_ID, operator_id)

    @pytest.mark.asyncio
    async def test_unknown_operator_not_found(self, service):
        with pytest.raises(OperatorNotFoundError):
            await service.get_supervised_operator(SUPERVISOR_ID, OPERATOR_ID)

    @pytest.mark.asyncio
    async def test_non_uuid_id_not_found(self, service):
        with pytest.raises(OperatorNotFoundError):
            await service.get_supervised_operator(SUPERVISOR_ID, "abc")

    @pytest.mark.asyncio
    async def test_supervisor_is_not_an_operator(self, service):
        with pytest.raises(OperatorNotFoundError):
            await service.get_supervised_operator(SUPERVISOR_ID, SUPERVISOR_ID)
