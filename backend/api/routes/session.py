"""
Session endpoints.

Sign-in and sign-out for the console operator, plus the current session
state and profile edits.
"""

from fastapi import APIRouter, Depends

from modules.auth.models import Profile, ProfileUpdate, SessionSnapshot, SignInRequest
from modules.auth.session import SessionStore
from ..dependencies import get_current_identity, get_session_store
from ..models import ErrorResponse

router = APIRouter(responses={401: {"model": ErrorResponse}})


@router.get("", response_model=SessionSnapshot)
async def get_session(session: SessionStore = Depends(get_session_store)) -> SessionSnapshot:
    """
    Current session state.

    While a profile load is in flight the snapshot reports loading=true.
    """
    return session.snapshot()


@router.post("/login", response_model=SessionSnapshot)
async def login(
    request: SignInRequest,
    session: SessionStore = Depends(get_session_store),
) -> SessionSnapshot:
    """
    Sign in with email and password.

    A missing or unreadable profile still signs in; the snapshot then
    carries profile=null.
    """
    return await session.sign_in(request.email, request.password)


@router.post("/logout", status_code=204)
async def logout(session: SessionStore = Depends(get_session_store)) -> None:
    await session.sign_out()


@router.patch(
    "/profile",
    response_model=Profile,
    dependencies=[Depends(get_current_identity)],
)
async def update_profile(
    changes: ProfileUpdate,
    session: SessionStore = Depends(get_session_store),
) -> Profile:
    """Update the signed-in user's own name or email."""
    return await session.update_profile(changes)
