"""
In-memory stand-ins for the Supabase repositories.

They implement the same methods as UserRepository and StatusRepository so
services and routes can be exercised end to end without a store. The status
fake keeps the upsert contract: one row per operator, only the given columns
change.
"""

import uuid
from datetime import datetime
from typing import Any, Optional

from modules.auth.models import User
from modules.monitoring.models import StatusRecord
from shared.models import AccessLevel


class InMemoryUserRepository:
    def __init__(self) -> None:
        self.rows: dict[str, User] = {}

    def add(
        self,
        nome: str,
        email: str,
        password_hash: str,
        access_level: AccessLevel,
        supervisor_id: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> User:
        user = User(
            id=user_id or str(uuid.uuid4()),
            nome=nome,
            email=email,
            senha=password_hash,
            nivel_acesso=access_level,
            supervisor_id=supervisor_id,
        )
        self.rows[user.id] = user
        return user

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.rows.values() if u.email == email), None)

    def email_exists(self, email: str) -> bool:
        return self.get_by_email(email) is not None

    def get_by_id_for_supervisor(self, user_id: str, supervisor_id: str) -> Optional[User]:
        user = self.rows.get(user_id)
        if user is None or user.supervisor_id != supervisor_id:
            return None
        if user.nivel_acesso != AccessLevel.OPERADOR:
            return None
        return user

    def list_by_supervisor(self, supervisor_id: str) -> list[User]:
        return [
            u for u in self.rows.values()
            if u.supervisor_id == supervisor_id and u.nivel_acesso == AccessLevel.OPERADOR
        ]

    def create(
        self,
        nome: str,
        email: str,
        password_hash: str,
        access_level: AccessLevel,
        supervisor_id: Optional[str] = None,
    ) -> User:
        return self.add(nome, email, password_hash, access_level, supervisor_id)

    def ping(self) -> None:
        return None


class InMemoryStatusRepository:
    def __init__(self) -> None:
        self.rows: dict[str, dict[str, Any]] = {}
        self.writes: list[dict[str, Any]] = []

    def upsert(
        self,
        operator_id: str,
        fields: dict[str, Any],
        ignore_duplicates: bool = False,
    ) -> None:
        self.writes.append({"operador_id": operator_id, **fields})
        if operator_id in self.rows:
            if not ignore_duplicates:
                self.rows[operator_id].update(fields)
            return
        self.rows[operator_id] = {"operador_id": operator_id, "status_online": False, **fields}

    def get(self, operator_id: str) -> Optional[StatusRecord]:
        row = self.rows.get(operator_id)
        return StatusRecord(**row) if row else None

    def get_many(self, operator_ids: list[str]) -> dict[str, StatusRecord]:
        return {
            operator_id: StatusRecord(**self.rows[operator_id])
            for operator_id in operator_ids
            if operator_id in self.rows
        }


def parse_time(value: Any) -> datetime:
    """Timestamps are stored as ISO strings."""
    return datetime.fromisoformat(value) if isinstance(value, str) else value
