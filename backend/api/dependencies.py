"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. The signing secret and the store client are process-wide
and are handed to each component at construction; route handlers only ever
receive services through Depends().
"""

from datetime import timedelta
from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.auth.repository import UserRepository
    from modules.auth.tokens import TokenCodec
    from modules.directory.interfaces import IDirectoryService
    from modules.monitoring.interfaces import IMonitoringService
    from modules.monitoring.repository import StatusRepository


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. The token codec needs no store access, so the
    access gate works without Supabase configuration.

    Use reset_container() to clear all cached services for testing.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        self._token_codec: "TokenCodec | None" = None
        self._user_repository: "UserRepository | None" = None
        self._status_repository: "StatusRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._monitoring_service: "IMonitoringService | None" = None
        self._directory_service: "IDirectoryService | None" = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def token_codec(self) -> "TokenCodec":
        """Get the session token codec."""
        if self._token_codec is None:
            from modules.auth.tokens import TokenCodec
            self._token_codec = TokenCodec(
                self._settings.jwt_secret,
                ttl=timedelta(hours=self._settings.token_ttl_hours),
            )
        return self._token_codec

    @property
    def users(self) -> "UserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.auth.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client())
        return self._user_repository

    @property
    def statuses(self) -> "StatusRepository":
        """Get the status repository instance."""
        if self._status_repository is None:
            from modules.monitoring.repository import StatusRepository
            from shared.database import get_supabase_client
            self._status_repository = StatusRepository(get_supabase_client())
        return self._status_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(self.users, self.token_codec)
        return self._auth_service

    @property
    def monitoring(self) -> "IMonitoringService":
        """Get the status ledger instance."""
        if self._monitoring_service is None:
            from modules.monitoring.service import MonitoringService
            self._monitoring_service = MonitoringService(self.statuses)
        return self._monitoring_service

    @property
    def directory(self) -> "IDirectoryService":
        """Get the directory service instance."""
        if self._directory_service is None:
            from modules.directory.service import DirectoryService
            self._directory_service = DirectoryService(self.users, self.monitoring)
        return self._directory_service


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() builds a fresh container (and reads
    settings again). Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_token_codec() -> "TokenCodec":
    """FastAPI dependency for the session token codec."""
    return get_container().token_codec


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_monitoring_service() -> "IMonitoringService":
    """FastAPI dependency for the status ledger."""
    return get_container().monitoring


def get_directory_service() -> "IDirectoryService":
    """FastAPI dependency for directory service."""
    return get_container().directory
