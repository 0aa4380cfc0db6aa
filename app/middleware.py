# =============================================================================
# app/middleware.py - HTTP Method Override
# =============================================================================
# HTML forms can only send GET and POST. Edit and delete forms post to
# e.g. /hotels/{id}?_method=DELETE and this middleware rewrites the method
# before routing, so the app can expose real PUT/DELETE routes.
# =============================================================================

import logging
from urllib.parse import parse_qs

from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)

OVERRIDE_PARAM = "_method"
ALLOWED_OVERRIDES = frozenset({"PUT", "PATCH", "DELETE"})


class MethodOverrideMiddleware:
    """Pure ASGI middleware that honours `?_method=` on POST requests."""

    def __init__(self, app: ASGIApp, param: str = OVERRIDE_PARAM) -> None:
        self.app = app
        self.param = param

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["method"] == "POST":
            query = parse_qs(scope.get("query_string", b"").decode("latin-1"))
            override = query.get(self.param, [""])[0].upper()

            if override in ALLOWED_OVERRIDES:
                logger.debug(f"Method override POST -> {override} for {scope['path']}")
                scope = {**scope, "method": override}

        await self.app(scope, receive, send)
