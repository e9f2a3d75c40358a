"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the translation of store failures into
UpstreamFailure.
"""

import logging
from typing import Any, TypeVar, Generic

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import UpstreamFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - _execute() to run a query once and surface failures as UpstreamFailure

    Subclasses implement domain-specific data access methods and handle
    dict-to-Pydantic model mapping internally.

    Example:
        class UserRepository(BaseRepository[User]):
            def get_by_id(self, user_id: str) -> Optional[User]:
                result = self._execute(
                    self._db.table("usuarios").select("*").eq("id", user_id),
                    "get user",
                )
                if not result.data:
                    return None
                return self._map_to_user(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(self, query: Any, operation: str) -> Any:
        """
        Execute a PostgREST query builder exactly once.

        Args:
            query: A query builder with an execute() method.
            operation: Short description used in logs and error details.

        Returns:
            The PostgREST response (with .data).

        Raises:
            UpstreamFailure: If the store rejected the query or was unreachable.
        """
        try:
            return query.execute()
        except (APIError, httpx.HTTPError) as e:
            logger.exception("Store operation failed: %s", operation)
            raise UpstreamFailure(operation, str(e)) from e
