"""
Authentication module interface.

Other modules should depend on ISessionStore, not the concrete implementation.
This enables testing with mocks and keeps the provider wiring in one place.
"""

from typing import Awaitable, Callable, Optional, Protocol, runtime_checkable

from shared.models import Identity

from .models import Profile, ProfileUpdate, SessionSnapshot, SessionState

IdentityListener = Callable[[Optional[Identity]], Awaitable[None]]


@runtime_checkable
class ISessionStore(Protocol):
    """
    Interface for the process-wide session.

    Exactly one writer (the store reacting to provider events) mutates
    the identity and profile; everything else reads.
    """

    @property
    def state(self) -> SessionState:
        ...

    @property
    def loading(self) -> bool:
        ...

    @property
    def identity(self) -> Optional[Identity]:
        ...

    @property
    def profile(self) -> Optional[Profile]:
        ...

    def snapshot(self) -> SessionSnapshot:
        ...

    def add_identity_listener(self, listener: IdentityListener) -> None:
        """Register a coroutine called whenever the signed-in identity changes."""
        ...

    async def sign_in(self, email: str, password: str) -> SessionSnapshot:
        """
        Sign in with email and password.

        Returns:
            Snapshot once the resulting profile fetch has settled

        Raises:
            AuthenticationError: If the provider rejects the credentials
        """
        ...

    async def sign_out(self) -> None:
        """
        End the session remotely, then clear local state.

        Raises:
            AuthenticationError: If the provider fails to end the session
        """
        ...

    async def update_profile(self, changes: ProfileUpdate) -> Profile:
        """
        Update the signed-in user's own profile.

        Raises:
            NotAuthenticatedError: If nobody is signed in
            DataAccessError: If the backend rejects the update
        """
        ...
