# =============================================================================
# app/flash.py - Session Flash Messages
# =============================================================================
# One-time status messages stored in the signed session cookie.
# A message flashed before a redirect is shown on the next rendered page
# and then discarded.
#
# Usage:
#   from app.flash import flash
#   flash(request, "success", "New hotel created!")
# =============================================================================

from typing import Literal

from starlette.requests import Request

FlashCategory = Literal["success", "error"]

FLASH_CATEGORIES: tuple[FlashCategory, ...] = ("success", "error")

_SESSION_KEY = "_flashes"


def _has_session(request: Request) -> bool:
    # Errors handled outside SessionMiddleware have no session attached
    return "session" in request.scope


def flash(request: Request, category: FlashCategory, message: str) -> None:
    """
    Queue a message under a category for the current session.

    Args:
        request: Incoming request (must pass through SessionMiddleware)
        category: "success" or "error"
        message: Text to show on the next rendered page
    """
    flashes = dict(request.session.get(_SESSION_KEY, {}))
    flashes[category] = [*flashes.get(category, []), message]
    request.session[_SESSION_KEY] = flashes


def get_flashed_messages(request: Request, category: FlashCategory) -> list[str]:
    """
    Return and clear all messages queued under a category.

    Returns an empty list when nothing was flashed or there is no session.
    """
    if not _has_session(request):
        return []

    flashes = dict(request.session.get(_SESSION_KEY, {}))
    messages = flashes.pop(category, [])

    if flashes:
        request.session[_SESSION_KEY] = flashes
    else:
        request.session.pop(_SESSION_KEY, None)

    return list(messages)


def consume_flashes(request: Request) -> dict[str, list[str]]:
    """Drain every category at once, for the template context."""
    return {category: get_flashed_messages(request, category) for category in FLASH_CATEGORIES}
