"""
User repository for database access.

Encapsulates all Supabase queries against the usuarios table.
"""

from typing import Any, Optional

from shared.models import AccessLevel
from shared.repository import BaseRepository

from .models import User

USERS_TABLE = "usuarios"


class UserRepository(BaseRepository[User]):
    """
    Repository for user rows.

    Note: This repository does NOT perform authorization checks.
    Callers are responsible for scoping queries to the right supervisor.
    """

    def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email, or None."""
        result = self._execute(
            self._db.table(USERS_TABLE).select("*").eq("email", email).limit(1),
            "get user by email",
        )
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def email_exists(self, email: str) -> bool:
        """Check whether any user already has this email."""
        result = self._execute(
            self._db.table(USERS_TABLE).select("id").eq("email", email).limit(1),
            "check email",
        )
        return bool(result.data)

    def get_by_id_for_supervisor(
        self,
        user_id: str,
        supervisor_id: str,
    ) -> Optional[User]:
        """Get an operator only if it is supervised by supervisor_id."""
        result = self._execute(
            self._db.table(USERS_TABLE)
            .select("*")
            .eq("id", user_id)
            .eq("supervisor_id", supervisor_id)
            .eq("nivel_acesso", AccessLevel.OPERADOR.value)
            .limit(1),
            "get supervised operator",
        )
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def list_by_supervisor(self, supervisor_id: str) -> list[User]:
        """List the operators supervised by supervisor_id."""
        result = self._execute(
            self._db.table(USERS_TABLE)
            .select("*")
            .eq("supervisor_id", supervisor_id)
            .eq("nivel_acesso", AccessLevel.OPERADOR.value)
            .order("nome"),
            "list operators",
        )
        return [self._map_to_user(row) for row in result.data]

    def create(
        self,
        nome: str,
        email: str,
        password_hash: str,
        access_level: AccessLevel,
        supervisor_id: Optional[str] = None,
    ) -> User:
        """
        Insert a user row.

        Returns:
            Created User with the generated ID.
        """
        data: dict[str, Any] = {
            "nome": nome,
            "email": email,
            "senha": password_hash,
            "nivel_acesso": access_level.value,
            "supervisor_id": supervisor_id,
        }
        result = self._execute(
            self._db.table(USERS_TABLE).insert(data),
            "insert user",
        )
        return self._map_to_user(result.data[0])

    def ping(self) -> None:
        """Run the cheapest query on the table; raises UpstreamFailure if it fails."""
        self._execute(
            self._db.table(USERS_TABLE).select("id").limit(1),
            "probe store",
        )

    def _map_to_user(self, data: dict[str, Any]) -> User:
        """Map database row to User model."""
        supervisor_id = data.get("supervisor_id")
        return User(
            id=str(data["id"]),
            nome=data.get("nome"),
            email=data["email"],
            senha=data.get("senha") or "",
            nivel_acesso=AccessLevel(data["nivel_acesso"]),
            supervisor_id=str(supervisor_id) if supervisor_id is not None else None,
        )
