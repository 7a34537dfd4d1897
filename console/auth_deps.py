"""
FastAPI dependencies for authentication and authorization.
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.concurrency import run_in_threadpool

from limetools.auth.gate import AuthGate
from limetools.models.user import User
from limetools.utils.logger import get_logger

logger = get_logger(__name__)


class LoginRequired(Exception):
    """Raised by require_admin; the app turns it into a redirect to /login"""
    pass


def get_gate(request: Request) -> AuthGate:
    return request.app.state.gate


def get_session_token(request: Request) -> Optional[str]:
    """Extract session token from the session cookie"""
    return request.cookies.get(request.app.state.settings.session_cookie)


async def get_current_user(request: Request) -> Optional[User]:
    """Dependency returning the signed-in user, or None for anonymous callers"""
    token = get_session_token(request)
    if not token:
        return None
    return await run_in_threadpool(get_gate(request).current_user, token)


async def require_admin(
    request: Request,
    current_user: Optional[User] = Depends(get_current_user),
) -> User:
    """Dependency for admin-only routes"""
    if not AuthGate.require_admin(current_user):
        logger.info(
            "Admin access refused",
            path=request.url.path,
            email=current_user.email if current_user else None,
        )
        raise LoginRequired()
    return current_user
