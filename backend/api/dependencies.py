"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

The container is built once in the application lifespan around the
process-wide Supabase client and stored on app.state. Tests replace
the dependency functions below with app.dependency_overrides.
"""

from typing import TYPE_CHECKING, Optional

from fastapi import Depends, Request
from supabase import AsyncClient

from shared.config import Settings
from shared.models import Identity
from modules.auth.exceptions import NotAuthenticatedError, ProfileUnavailableError
from modules.auth.models import Profile

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.session import SessionStore
    from modules.auth.repository import ProfileRepository
    from modules.notifications.feed import NotificationFeed
    from modules.audits.interfaces import IAuditService
    from modules.audits.repository import AuditRepository
    from modules.reports.interfaces import IReportService
    from modules.stores.interfaces import IStoreService
    from modules.stores.repository import StoreRepository
    from modules.users.interfaces import IUserService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self, client: AsyncClient, settings: Settings) -> None:
        self._client = client
        self._settings = settings
        self._profile_repository: "ProfileRepository | None" = None
        self._session: "SessionStore | None" = None
        self._feed: "NotificationFeed | None" = None
        self._audit_repository: "AuditRepository | None" = None
        self._store_repository: "StoreRepository | None" = None
        self._audit_service: "IAuditService | None" = None
        self._report_service: "IReportService | None" = None
        self._store_service: "IStoreService | None" = None
        self._user_service: "IUserService | None" = None

    @property
    def client(self) -> AsyncClient:
        return self._client

    @property
    def profile_repository(self) -> "ProfileRepository":
        if self._profile_repository is None:
            from modules.auth.repository import ProfileRepository
            self._profile_repository = ProfileRepository(self._client)
        return self._profile_repository

    @property
    def session(self) -> "SessionStore":
        """Get the session store instance."""
        if self._session is None:
            from modules.auth.session import SessionStore
            self._session = SessionStore(self._client, self.profile_repository)
        return self._session

    @property
    def feed(self) -> "NotificationFeed":
        """Get the notification feed instance."""
        if self._feed is None:
            from modules.notifications.feed import NotificationFeed
            from modules.notifications.repository import NotificationRepository
            self._feed = NotificationFeed(
                self._client,
                NotificationRepository(self._client),
                page_size=self._settings.notifications_page_size,
            )
        return self._feed

    @property
    def audit_repository(self) -> "AuditRepository":
        if self._audit_repository is None:
            from modules.audits.repository import AuditRepository
            self._audit_repository = AuditRepository(
                self._client,
                photos_bucket=self._settings.photos_bucket,
            )
        return self._audit_repository

    @property
    def store_repository(self) -> "StoreRepository":
        if self._store_repository is None:
            from modules.stores.repository import StoreRepository
            self._store_repository = StoreRepository(self._client)
        return self._store_repository

    @property
    def audits(self) -> "IAuditService":
        """Get the audit service instance."""
        if self._audit_service is None:
            from modules.audits.service import AuditService
            self._audit_service = AuditService(self.audit_repository)
        return self._audit_service

    @property
    def reports(self) -> "IReportService":
        """Get the report service instance."""
        if self._report_service is None:
            from modules.reports.service import ReportService
            self._report_service = ReportService(self.audit_repository, self.store_repository)
        return self._report_service

    @property
    def stores(self) -> "IStoreService":
        """Get the store service instance."""
        if self._store_service is None:
            from modules.stores.service import StoreService
            self._store_service = StoreService(self.store_repository)
        return self._store_service

    @property
    def users(self) -> "IUserService":
        """Get the user management service instance."""
        if self._user_service is None:
            from modules.users.repository import UserRepository
            from modules.users.service import UserService
            self._user_service = UserService(UserRepository(self._client))
        return self._user_service

    async def start(self) -> None:
        """
        Wire the feed to identity changes and restore the persisted session.

        The listener is registered first so the initial session already
        activates the feed.
        """
        self.session.add_identity_listener(self.feed.on_identity_change)
        await self.session.initialize()

    async def close(self) -> None:
        """Tear down the realtime channel and stop listening to auth events."""
        if self._feed is not None:
            await self._feed.close()
        if self._session is not None:
            await self._session.close()

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._profile_repository = None
        self._session = None
        self._feed = None
        self._audit_repository = None
        self._store_repository = None
        self._audit_service = None
        self._report_service = None
        self._store_service = None
        self._user_service = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency for the container built at startup."""
    return request.app.state.container


def get_session_store(container: ServiceContainer = Depends(get_container)) -> "SessionStore":
    """FastAPI dependency for the session store."""
    return container.session


def get_notification_feed(container: ServiceContainer = Depends(get_container)) -> "NotificationFeed":
    """FastAPI dependency for the notification feed."""
    return container.feed


def get_audit_service(container: ServiceContainer = Depends(get_container)) -> "IAuditService":
    """FastAPI dependency for audit service."""
    return container.audits


def get_report_service(container: ServiceContainer = Depends(get_container)) -> "IReportService":
    """FastAPI dependency for report service."""
    return container.reports


def get_store_service(container: ServiceContainer = Depends(get_container)) -> "IStoreService":
    """FastAPI dependency for store service."""
    return container.stores


def get_user_service(container: ServiceContainer = Depends(get_container)) -> "IUserService":
    """FastAPI dependency for user management service."""
    return container.users


async def get_current_identity(session: "SessionStore" = Depends(get_session_store)) -> Identity:
    """
    Get the signed-in identity, waiting for any in-flight profile load.

    Raises:
        NotAuthenticatedError: If nobody is signed in
    """
    if session.loading:
        await session.settle()
    identity: Optional[Identity] = session.identity
    if identity is None:
        raise NotAuthenticatedError()
    return identity


async def get_current_profile(
    identity: Identity = Depends(get_current_identity),
    session: "SessionStore" = Depends(get_session_store),
) -> Profile:
    """
    Get the signed-in user's profile.

    Raises:
        ProfileUnavailableError: If the profile could not be loaded
    """
    profile = session.profile
    if profile is None:
        raise ProfileUnavailableError(identity.id)
    return profile
