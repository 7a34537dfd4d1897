"""FastAPI application for the Lime Tools console"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from limetools import __version__
from limetools.auth.gate import AuthGate
from limetools.auth.sessions import SessionStore
from limetools.services.user_store import UserStore
from limetools.utils.config import Settings, load_settings
from limetools.utils.logger import get_logger
from .admin_routes import router as admin_router
from .auth_deps import LoginRequired
from .pages import router as pages_router

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    The user store, session table and auth gate are created here once and
    shared with every request through app.state.
    """
    settings = settings or load_settings()

    app = FastAPI(
        title=settings.app_title,
        description="Internal console for managing the user roster",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    user_store = UserStore(settings.users_file)
    user_store.ensure_seed_admin(settings.seed_admin_email, settings.seed_admin_password)
    sessions = SessionStore()

    app.state.settings = settings
    app.state.user_store = user_store
    app.state.sessions = sessions
    app.state.gate = AuthGate(sessions, user_store)

    @app.exception_handler(LoginRequired)
    async def login_required_handler(request: Request, exc: LoginRequired):
        return RedirectResponse(url="/login", status_code=302)

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException):
        # Known path with the wrong method is reported like an unknown path
        if exc.status_code in (404, 405):
            return PlainTextResponse("Not found", status_code=404)
        return await http_exception_handler(request, exc)

    app.include_router(pages_router)
    app.include_router(admin_router)

    logger.info("Application created", users_file=str(settings.users_file))
    return app
