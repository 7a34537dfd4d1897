"""
User management routes (admin only).

Every mutation is a full read-modify-write of the roster file.
"""

from fastapi import APIRouter, Depends, Form, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from limetools.models.user import User
from limetools.services.user_store import UserStore
from limetools.utils.exceptions import DuplicateEmailError, UserNotFoundError
from limetools.utils.logger import get_logger
from .auth_deps import require_admin
from .templating import render_error, render_page

logger = get_logger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

ROLES = ["user", "admin"]


def _store(request: Request) -> UserStore:
    return request.app.state.user_store


def _users_redirect() -> RedirectResponse:
    return RedirectResponse(url="/users", status_code=302)


@router.get("", response_class=HTMLResponse)
async def users_page(request: Request, current_user: User = Depends(require_admin)):
    """Roster table plus the add-user form"""
    users = await run_in_threadpool(_store(request).load_users)
    return await render_page(request, "users.html", "User Management", current_user, users=users, roles=ROLES)


@router.post("/add")
async def add_user(
    request: Request,
    name: str = Form(""),
    surname: str = Form(""),
    mail: str = Form(""),
    password: str = Form(""),
    role: str = Form("user", alias="type"),
    current_user: User = Depends(require_admin),
):
    try:
        new_user = User(name=name, surname=surname, email=mail, password=password, role=role)
    except ValidationError as e:
        logger.info("Rejected user record", email=mail, error=str(e))
        return await render_error(request, "Invalid user record.", current_user)

    try:
        await run_in_threadpool(_store(request).create_user, new_user)
    except DuplicateEmailError:
        return await render_error(request, "User already exists.", current_user)

    return _users_redirect()


@router.post("/delete")
async def delete_user(
    request: Request,
    mail: str = Form(""),
    current_user: User = Depends(require_admin),
):
    await run_in_threadpool(_store(request).delete_user, mail)
    return _users_redirect()


@router.post("/edit", response_class=HTMLResponse)
async def edit_user_page(
    request: Request,
    orig_mail: str = Form("", alias="origMail"),
    current_user: User = Depends(require_admin),
):
    """Edit form pre-filled with the stored record, password included"""
    user_to_edit = await run_in_threadpool(_store(request).find_by_email, orig_mail)
    if not user_to_edit:
        return await render_error(request, "User not found.", current_user)

    return await render_page(
        request, "edit_user.html", "Edit User", current_user, edited=user_to_edit, roles=ROLES
    )


@router.post("/update")
async def update_user(
    request: Request,
    orig_mail: str = Form("", alias="origMail"),
    name: str = Form(""),
    surname: str = Form(""),
    mail: str = Form(""),
    password: str = Form(""),
    role: str = Form("user", alias="type"),
    current_user: User = Depends(require_admin),
):
    try:
        replacement = User(name=name, surname=surname, email=mail, password=password, role=role)
    except ValidationError as e:
        logger.info("Rejected user record", email=mail, error=str(e))
        return await render_error(request, "Invalid user record.", current_user)

    try:
        await run_in_threadpool(_store(request).update_user, orig_mail, replacement)
    except UserNotFoundError:
        return await render_error(request, "User not found.", current_user)

    return _users_redirect()
