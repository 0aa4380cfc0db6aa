# =============================================================================
# app/templating.py - Jinja2 View Rendering
# =============================================================================
# Wraps FastAPI's Jinja2Templates so every rendered page receives the
# pending flash messages as `success` and `error`.
# =============================================================================

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.flash import consume_flashes

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(
    request: Request,
    name: str,
    context: dict[str, Any] | None = None,
    status_code: int = 200,
) -> HTMLResponse:
    """
    Render a template with flash messages merged into its context.

    Reading the flashes clears them, so they appear on this page only.
    """
    page_context = {**consume_flashes(request), **(context or {})}
    return templates.TemplateResponse(
        request,
        name,
        page_context,
        status_code=status_code,
    )
