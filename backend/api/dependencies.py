"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. The container owns the in-memory store and the directory
mirror; every service receives them explicitly.

Tests replace the whole container through
``app.dependency_overrides[get_container]``.
"""

from typing import TYPE_CHECKING, Optional

from fastapi import Depends

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.exports.service import ExportService
    from modules.mirror.interfaces import IDirectoryMirror
    from modules.mirror.service import DirectoryService
    from modules.moderation.interfaces import IModerationService
    from modules.stats.interfaces import IStatsService
    from modules.store import DataStore
    from modules.users.service import UserService
    from modules.verifications.interfaces import IVerificationService


class ServiceContainer:
    """
    Container for the store, the mirror and all service instances.

    Everything is created lazily on first access and cached for the
    lifetime of the container. Pass ``store`` or ``mirror`` to wire in
    prepared instances (tests).
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: "DataStore | None" = None,
        mirror: "IDirectoryMirror | None" = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._store = store
        self._mirror = mirror
        self._stats_service: "IStatsService | None" = None
        self._moderation_service: "IModerationService | None" = None
        self._verification_service: "IVerificationService | None" = None
        self._user_service: "UserService | None" = None
        self._directory_service: "DirectoryService | None" = None
        self._export_service: "ExportService | None" = None

    @property
    def store(self) -> "DataStore":
        """Get the in-memory store."""
        if self._store is None:
            from modules.store import build_store
            self._store = build_store(seed=self.settings.seed_sample_data)
        return self._store

    @property
    def mirror(self) -> "IDirectoryMirror":
        """Get the directory mirror (connected or demo)."""
        if self._mirror is None:
            from modules.mirror.factory import create_directory_mirror
            self._mirror = create_directory_mirror(self.settings)
        return self._mirror

    @property
    def stats(self) -> "IStatsService":
        """Get the stats service instance."""
        if self._stats_service is None:
            from modules.stats.service import StatsService
            self._stats_service = StatsService(self.store.stats, self.mirror)
        return self._stats_service

    @property
    def moderation(self) -> "IModerationService":
        """Get the moderation service instance."""
        if self._moderation_service is None:
            from modules.moderation.service import ModerationService
            self._moderation_service = ModerationService(
                posts=self.store.posts,
                logs=self.store.moderation_logs,
                mirror=self.mirror,
                admin_identity=self.settings.admin_identity,
            )
        return self._moderation_service

    @property
    def verifications(self) -> "IVerificationService":
        """Get the verification service instance."""
        if self._verification_service is None:
            from modules.verifications.service import VerificationService
            self._verification_service = VerificationService(
                repository=self.store.verifications,
                logs=self.store.moderation_logs,
                stats=self.stats,
                mirror=self.mirror,
                users=self.store.users,
                admin_identity=self.settings.admin_identity,
            )
        return self._verification_service

    @property
    def users(self) -> "UserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(self.store.users)
        return self._user_service

    @property
    def directory(self) -> "DirectoryService":
        """Get the directory service instance."""
        if self._directory_service is None:
            from modules.mirror.service import DirectoryService
            self._directory_service = DirectoryService(
                self.mirror,
                self.settings,
                users=self.users,
            )
        return self._directory_service

    @property
    def exports(self) -> "ExportService":
        """Get the export service instance."""
        if self._export_service is None:
            from modules.exports.service import ExportService
            self._export_service = ExportService(self.store)
        return self._export_service

    def reset(self) -> None:
        """
        Reset all cached services.

        The store and mirror are dropped too, so the next access starts
        from a fresh (re-seeded) store.
        """
        self._store = None
        self._mirror = None
        self._stats_service = None
        self._moderation_service = None
        self._verification_service = None
        self._user_service = None
        self._directory_service = None
        self._export_service = None


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

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_stats_service(container: ServiceContainer = Depends(get_container)) -> "IStatsService":
    """FastAPI dependency for stats service."""
    return container.stats


def get_moderation_service(
    container: ServiceContainer = Depends(get_container),
) -> "IModerationService":
    """FastAPI dependency for moderation service."""
    return container.moderation


def get_verification_service(
    container: ServiceContainer = Depends(get_container),
) -> "IVerificationService":
    """FastAPI dependency for verification service."""
    return container.verifications


def get_user_service(container: ServiceContainer = Depends(get_container)) -> "UserService":
    """FastAPI dependency for user service."""
    return container.users


def get_directory_service(
    container: ServiceContainer = Depends(get_container),
) -> "DirectoryService":
    """FastAPI dependency for directory service."""
    return container.directory


def get_export_service(container: ServiceContainer = Depends(get_container)) -> "ExportService":
    """FastAPI dependency for export service."""
    return container.exports
