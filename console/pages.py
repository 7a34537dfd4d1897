"""
Public pages, login/logout and the admin connections page.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse, RedirectResponse

from limetools.models.user import User
from .auth_deps import get_current_user, get_gate, get_session_token, require_admin
from .templating import render_page

router = APIRouter(tags=["pages"])

# Placeholder integrations; none of them is wired to anything yet
CONNECTIONS = ["Hubspot", "Linear", "Slack"]


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, current_user: Optional[User] = Depends(get_current_user)):
    """Landing page"""
    return await render_page(request, "index.html", request.app.state.settings.app_title, current_user)


@router.get("/login", response_class=HTMLResponse)
async def login_page(request: Request, current_user: Optional[User] = Depends(get_current_user)):
    """Login page"""
    return await render_page(request, "login.html", "Login", current_user)


@router.post("/login")
async def login(
    request: Request,
    mail: str = Form(""),
    password: str = Form(""),
):
    """Check credentials; on success set the session cookie and go home"""
    token = await run_in_threadpool(get_gate(request).login, mail, password)

    if not token:
        return await render_page(request, "login.html", "Login", None, error="Invalid credentials")

    response = RedirectResponse(url="/", status_code=302)
    response.set_cookie(
        key=request.app.state.settings.session_cookie,
        value=token,
        httponly=True,
        samesite=None,
    )
    return response


@router.get("/logout")
async def logout(request: Request):
    """Logout and clear session"""
    get_gate(request).logout(get_session_token(request))

    response = RedirectResponse(url="/", status_code=302)
    response.delete_cookie(key=request.app.state.settings.session_cookie, samesite=None)
    return response


@router.get("/connections", response_class=HTMLResponse)
async def connections_page(request: Request, current_user: User = Depends(require_admin)):
    """Third-party connections (admin only)"""
    return await render_page(request, "connections.html", "Connections", current_user, connections=CONNECTIONS)
