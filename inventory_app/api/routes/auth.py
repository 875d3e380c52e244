# inventory_app/api/routes/auth.py
import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

from inventory_app.api.deps import (
    get_credential_store,
    get_session_manager,
    get_session_token,
    get_settings,
)
from inventory_app.api.schemas.user import LoginForm, RegisterForm
from inventory_app.config import TEMPLATE_DIR, Settings
from inventory_app.core.errors import DuplicateUsername, InvalidCredentials, StorageFailure
from inventory_app.core.security import hash_password
from inventory_app.core.sessions import SessionManager
from inventory_app.models.user import Role
from inventory_app.services.credentials import CredentialStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])
templates = Jinja2Templates(directory=str(TEMPLATE_DIR))


def _form_page(request: Request, name: str, error: Optional[str] = None, status_code: int = 200):
    return templates.TemplateResponse(request, name, {"error": error}, status_code=status_code)


@router.get("/login")
def login_page(request: Request):
    return _form_page(request, "login.html")


@router.post("/login")
def login(
    request: Request,
    form: Annotated[LoginForm, Form()],
    credentials: CredentialStore = Depends(get_credential_store),
    sessions: SessionManager = Depends(get_session_manager),
    settings: Settings = Depends(get_settings),
):
    """
    Check the submitted password against the stored bcrypt hash. On success
    start a server-side session and hand the client its token in a cookie.
    """
    try:
        user = credentials.authenticate(form.username, form.password)
    except InvalidCredentials:
        logger.info("Failed login for %s", form.username)
        return _form_page(request, "login.html", "Invalid credentials", status.HTTP_401_UNAUTHORIZED)
    except StorageFailure:
        return _form_page(request, "login.html", "Login is temporarily unavailable", 500)

    token = sessions.create(user)
    response = RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_MAX_AGE_MINUTES * 60,
        httponly=True,
        samesite="lax",
        secure=settings.COOKIE_SECURE,
    )
    return response


@router.get("/logout")
def logout(
    token: Optional[str] = Depends(get_session_token),
    sessions: SessionManager = Depends(get_session_manager),
    settings: Settings = Depends(get_settings),
):
    sessions.destroy(token)
    response = RedirectResponse(url="/login", status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return response


@router.get("/register")
def register_page(request: Request):
    return _form_page(request, "register.html")


@router.post("/register")
def register(
    request: Request,
    form: Annotated[RegisterForm, Form()],
    credentials: CredentialStore = Depends(get_credential_store),
):
    username = form.username.strip()
    if not username or not form.password:
        return _form_page(request, "register.html", "Username and password are required", 400)
    try:
        role = Role(form.role) if form.role else Role.MEMBER
    except ValueError:
        return _form_page(request, "register.html", f"Unknown role: {form.role}", 400)

    try:
        credentials.insert(username, hash_password(form.password), role)
    except DuplicateUsername:
        return _form_page(request, "register.html", "Username already exists", status.HTTP_409_CONFLICT)
    except StorageFailure:
        return _form_page(request, "register.html", "Registration is temporarily unavailable", 500)
    return RedirectResponse(url="/login", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/password")
def password_page(request: Request):
    return _form_page(request, "password.html")
