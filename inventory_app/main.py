# inventory_app/main.py
import logging
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles

from inventory_app import __version__
from inventory_app.api.routes import auth as auth_routes
from inventory_app.api.routes import inventory as inventory_routes
from inventory_app.api.routes import pages as page_routes
from inventory_app.config import Settings, get_settings
from inventory_app.core.errors import Forbidden, NotAuthenticated, NotFound, StorageFailure
from inventory_app.core.sessions import SessionManager
from inventory_app.database import JsonFileDB
from inventory_app.middleware.cors_config import configure_cors
from inventory_app.middleware.security_headers import add_security_headers
from inventory_app.services.credentials import CredentialStore
from inventory_app.services.inventory import InventoryStore

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Make sure the data file exists and holds at least one admin before the
    app starts serving.
    """
    settings: Settings = app.state.settings
    try:
        if app.state.credentials.bootstrap(settings.DEFAULT_ADMIN_USERNAME, settings.DEFAULT_ADMIN_PASSWORD):
            logger.info(
                "Database initialized at %s with default admin user %s",
                app.state.db.path,
                settings.DEFAULT_ADMIN_USERNAME,
            )
        else:
            logger.info("Using existing database file: %s", app.state.db.path)
    except StorageFailure as e:
        # keep serving; requests touching storage will answer 500 until it is fixed
        logger.error("Could not bootstrap database at %s: %s", app.state.db.path, e)

    yield
    logger.info("Shutting down Inventory Tracker")


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotAuthenticated)
    async def not_authenticated_handler(request: Request, exc: NotAuthenticated):
        return RedirectResponse(url="/login", status_code=status.HTTP_303_SEE_OTHER)

    @app.exception_handler(Forbidden)
    async def forbidden_handler(request: Request, exc: Forbidden):
        return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"error": str(exc) or "Access denied"})

    @app.exception_handler(NotFound)
    async def not_found_handler(request: Request, exc: NotFound):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc) or "Not found"})

    @app.exception_handler(StorageFailure)
    async def storage_failure_handler(request: Request, exc: StorageFailure):
        logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": "Storage failure"})

    @app.exception_handler(RequestValidationError)
    async def validation_handler(request: Request, exc: RequestValidationError):
        fields = [
            {"field": ".".join(str(p) for p in err.get("loc", ()) if p != "body"), "message": err.get("msg", "")}
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request", "fields": fields},
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    db = JsonFileDB(settings.data_file_path, lock_timeout=settings.LOCK_TIMEOUT_SECONDS)

    app = FastAPI(title="Inventory Tracker", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.db = db
    app.state.credentials = CredentialStore(db)
    app.state.inventory = InventoryStore(db)
    app.state.sessions = SessionManager(max_age=timedelta(minutes=settings.SESSION_MAX_AGE_MINUTES))

    configure_cors(app, settings)
    add_security_headers(app)
    register_exception_handlers(app)

    # Mount a static directory if present (css / js for the pages)
    if settings.STATIC_DIR.is_dir():
        app.mount("/static", StaticFiles(directory=str(settings.STATIC_DIR)), name="static")

    app.include_router(auth_routes.router)
    app.include_router(page_routes.router)
    app.include_router(inventory_routes.router)
    return app


app = create_app()
