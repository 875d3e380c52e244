# inventory_app/api/deps.py
"""
Request-scoped dependencies. Everything stateful (settings, stores, sessions)
is created once in `create_app` and hung off `app.state`; handlers receive it
through these functions rather than importing module globals.
"""
from typing import Optional

from fastapi import Depends, Request

from inventory_app.config import Settings
from inventory_app.core.errors import Forbidden, NotAuthenticated
from inventory_app.core.sessions import SessionData, SessionManager
from inventory_app.models.user import Role
from inventory_app.services.credentials import CredentialStore
from inventory_app.services.inventory import InventoryStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_credential_store(request: Request) -> CredentialStore:
    return request.app.state.credentials


def get_inventory_store(request: Request) -> InventoryStore:
    return request.app.state.inventory


def get_session_manager(request: Request) -> SessionManager:
    return request.app.state.sessions


def get_session_token(request: Request, settings: Settings = Depends(get_settings)) -> Optional[str]:
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def get_optional_session(
    token: Optional[str] = Depends(get_session_token),
    sessions: SessionManager = Depends(get_session_manager),
) -> Optional[SessionData]:
    return sessions.get(token)


def require_auth(session: Optional[SessionData] = Depends(get_optional_session)) -> SessionData:
    """
    Gate for logged-in clients. Anonymous requests are sent to the login page
    (NotAuthenticated is turned into a redirect by the app's exception handler).
    """
    if session is None:
        raise NotAuthenticated()
    return session


def require_admin(session: SessionData = Depends(require_auth)) -> SessionData:
    """
    Gate for destructive operations. Raises Forbidden (403, no redirect) for
    members.
    """
    if session.role is Role.ADMIN:
        return session
    if session.role is Role.MEMBER:
        raise Forbidden("Access denied")
    raise AssertionError(f"unhandled role: {session.role!r}")
