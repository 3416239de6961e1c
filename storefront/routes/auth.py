"""Mock authentication routes"""

from typing import Optional
from fastapi import APIRouter, Depends

from ..models.auth import LoginRequest, SessionInfo
from ..security.client_context import ClientSession, client_reader, client_session
from ..services import auth

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def session_info(session: ClientSession, redirect_to: Optional[str] = None) -> SessionInfo:
    context = session.context
    return SessionInfo(
        client_id=session.client_id,
        is_logged_in=auth.is_logged_in(context),
        username=auth.current_username(context),
        role_id=auth.role_id(context),
        redirect_to=redirect_to,
    )


@router.post("/login", response_model=SessionInfo)
async def login(
    request: LoginRequest,
    session: ClientSession = Depends(client_session),
):
    """Sign in (demo only: any non-empty credentials are accepted)"""
    auth.login(session.context, request.username)
    return session_info(session, redirect_to="/")


@router.post("/logout", response_model=SessionInfo)
async def logout(session: ClientSession = Depends(client_session)):
    """Sign out and clear everything this client stored"""
    auth.logout(session.context)
    return session_info(session, redirect_to="/")


@router.get("/session", response_model=SessionInfo)
async def get_session(session: ClientSession = Depends(client_reader)):
    """Current sign-in state"""
    return session_info(session)
