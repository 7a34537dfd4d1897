"""Jinja2 page rendering shared by all routers"""

from pathlib import Path
from typing import Any, Optional

from fastapi import Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse
from jinja2 import Environment, FileSystemLoader, select_autoescape

from limetools.models.user import User

templates_path = Path(__file__).parent / "templates"
jinja_env = Environment(
    loader=FileSystemLoader(templates_path),
    autoescape=select_autoescape(["html"]),
)


def _render_template_sync(template_name: str, context: dict) -> str:
    """Sync Jinja2 render (used from threadpool to avoid blocking event loop)."""
    template = jinja_env.get_template(template_name)
    return template.render(**context)


async def render_template_async(template_name: str, context: dict) -> str:
    """Render Jinja2 template in threadpool so the event loop is not blocked."""
    return await run_in_threadpool(_render_template_sync, template_name, context)


async def render_page(
    request: Request,
    template_name: str,
    title: str,
    user: Optional[User] = None,
    **context: Any,
) -> HTMLResponse:
    """Render a full HTML document with the shared layout and nav bar"""
    content = await render_template_async(
        template_name,
        {
            "request": request,
            "title": title,
            "app_title": request.app.state.settings.app_title,
            "user": user,
            **context,
        },
    )
    return HTMLResponse(content=content)


async def render_error(request: Request, message: str, user: Optional[User] = None) -> HTMLResponse:
    """Generic error page; always HTTP 200"""
    return await render_page(request, "error.html", "Error", user, message=message)
