"""
Session store backed by Supabase Auth.

Holds the signed-in identity and the cached profile, and reacts to the
provider's auth-state events rather than only to local calls. Sign-in,
sign-out, token refresh and expiry all arrive through the same
callback, so there is a single path that fetches or clears the profile.
"""

import asyncio
import logging
from typing import Any, Coroutine, Optional

from supabase import AsyncClient, AuthError

from shared.exceptions import DataAccessError
from shared.models import Identity

from .exceptions import (
    InvalidCredentialsError,
    NotAuthenticatedError,
    ProfileUnavailableError,
    SignOutError,
)
from .interfaces import ISessionStore, IdentityListener
from .models import Profile, ProfileUpdate, SessionSnapshot, SessionState
from .repository import ProfileRepository

logger = logging.getLogger(__name__)


class SessionStore(ISessionStore):
    """
    Single source of truth for who is signed in and what their profile is.

    State machine:
        UNINITIALIZED -> LOADING -> AUTHENTICATED | UNAUTHENTICATED

    Every provider event that carries a user re-enters LOADING until the
    profile fetch for that event resolves. A failed fetch is logged and
    leaves the profile empty so loading always completes.

    Each event bumps a generation counter. A profile response that lands
    after a newer event is dropped instead of overwriting fresher state.
    """

    def __init__(self, client: AsyncClient, profiles: ProfileRepository):
        self._client = client
        self._profiles = profiles
        self._state = SessionState.UNINITIALIZED
        self._identity: Optional[Identity] = None
        self._profile: Optional[Profile] = None
        self._generation = 0
        self._pending: set[asyncio.Task] = set()
        self._listeners: list[IdentityListener] = []
        self._subscription: Any = None

    # -------------------------------------------------------------------------
    # Read accessors
    # -------------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def loading(self) -> bool:
        return self._state in (SessionState.UNINITIALIZED, SessionState.LOADING)

    @property
    def identity(self) -> Optional[Identity]:
        return self._identity

    @property
    def profile(self) -> Optional[Profile]:
        return self._profile

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            state=self._state,
            loading=self.loading,
            identity=self._identity,
            profile=self._profile,
        )

    def add_identity_listener(self, listener: IdentityListener) -> None:
        self._listeners.append(listener)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def initialize(self) -> SessionSnapshot:
        """
        Start listening to provider events and apply the persisted session.

        Safe to call more than once; the provider callback is only
        registered the first time.
        """
        if self._subscription is None:
            self._subscription = self._client.auth.on_auth_state_change(
                self._on_auth_state_change
            )

        try:
            session = await self._client.auth.get_session()
        except AuthError as e:
            logger.warning(f"Could not restore session: {e.message}")
            session = None

        self._on_auth_state_change("INITIAL_SESSION", session)
        await self.settle()
        return self.snapshot()

    async def close(self) -> None:
        """Stop listening to provider events and cancel outstanding work."""
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

        for task in list(self._pending):
            task.cancel()
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)
        self._pending.clear()

    async def settle(self) -> None:
        """Wait until every profile fetch and listener call scheduled so far is done."""
        while True:
            pending = [task for task in self._pending if not task.done()]
            if not pending:
                return
            await asyncio.gather(*pending)

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    async def sign_in(self, email: str, password: str) -> SessionSnapshot:
        """
        Delegate the credential check to Supabase Auth.

        The provider emits SIGNED_IN while the call is in flight, which
        schedules the profile fetch; this waits for it before returning.
        """
        try:
            await self._client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except AuthError as e:
            logger.info(f"Sign-in rejected for {email}: {e.message}")
            raise InvalidCredentialsError(e.message) from e

        await self.settle()
        return self.snapshot()

    async def sign_out(self) -> None:
        """
        Invalidate the remote session, then clear the local pair.

        With no active session the provider call is a no-op and the local
        clear is idempotent.
        """
        try:
            await self._client.auth.sign_out()
        except AuthError as e:
            logger.error(f"Sign-out failed: {e.message}")
            raise SignOutError(e.message) from e

        self._apply_identity(None)
        await self.settle()

    async def update_profile(self, changes: ProfileUpdate) -> Profile:
        identity = self._identity
        if identity is None:
            raise NotAuthenticatedError()

        payload = changes.model_dump(exclude_none=True, mode="json")
        profile = await self._profiles.update_profile(identity.id, payload)
        if profile is None:
            raise ProfileUnavailableError(identity.id)
        if identity == self._identity:
            self._profile = profile
        return profile

    # -------------------------------------------------------------------------
    # Provider event handling
    # -------------------------------------------------------------------------

    def _on_auth_state_change(self, event: str, session: Any) -> None:
        """Callback registered with Supabase Auth; runs on the event loop."""
        user = getattr(session, "user", None) if session is not None else None
        identity = Identity(id=user.id, email=user.email) if user is not None else None
        logger.debug(f"Auth event {event} (user={identity.id if identity else None})")
        self._apply_identity(identity)

    def _apply_identity(self, identity: Optional[Identity]) -> None:
        self._generation += 1
        generation = self._generation

        previous = self._identity
        changed = (previous.id if previous else None) != (identity.id if identity else None)
        self._identity = identity

        if identity is None:
            self._profile = None
            self._state = SessionState.UNAUTHENTICATED
        else:
            if changed:
                self._profile = None
            self._state = SessionState.LOADING
            self._schedule(self._load_profile(identity.id, generation))

        if changed:
            self._schedule(self._notify_listeners(identity))

    async def _load_profile(self, user_id: str, generation: int) -> None:
        try:
            profile = await self._profiles.get_profile(user_id)
        except DataAccessError as e:
            logger.error(f"Error fetching profile for {user_id}: {e.message}")
            profile = None

        if generation != self._generation:
            logger.debug(f"Discarding stale profile response for {user_id}")
            return

        if profile is None:
            logger.warning(f"No profile available for {user_id}")

        self._profile = profile
        self._state = SessionState.AUTHENTICATED

    async def _notify_listeners(self, identity: Optional[Identity]) -> None:
        for listener in list(self._listeners):
            await listener(identity)

    def _schedule(self, coro: Coroutine[Any, Any, None]) -> None:
        task = asyncio.get_running_loop().create_task(coro)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
