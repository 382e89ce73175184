"""Request ID middleware for per-request tracking.

This middleware:
1. Takes the request ID from the X-Request-ID header if present and sane
2. Generates a new UUID otherwise
3. Stores the ID in request.state.request_id
4. Adds the ID to the logging context for the duration of the request
5. Echoes X-Request-ID in the response headers
"""

from __future__ import annotations

import re
import uuid
from typing import TYPE_CHECKING

from starlette.datastructures import MutableHeaders

from skyvault.infra.logging.context import clear_log_context, set_log_context

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Message, Receive, Scope, Send

_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")


class RequestIDMiddleware:
    """Attach a request ID to every HTTP request.

    Pure ASGI implementation; non-HTTP scopes pass through untouched.

    Usage:
        app = FastAPI()
        app.add_middleware(RequestIDMiddleware)
    """

    header_name = "x-request-id"
    state_key = "request_id"

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = self._extract(scope) or str(uuid.uuid4())
        scope.setdefault("state", {})[self.state_key] = request_id
        set_log_context(request_id=request_id)

        async def send_with_header(message: Message) -> None:
            if message["type"] == "http.response.start":
                MutableHeaders(scope=message).append(self.header_name, request_id)
            await send(message)

        try:
            await self.app(scope, receive, send_with_header)
        finally:
            clear_log_context()

    def _extract(self, scope: Scope) -> str | None:
        for name, value in scope.get("headers", []):
            if name == self.header_name.encode("latin-1"):
                candidate = value.decode("latin-1")
                # Untrusted IDs end up in logs verbatim
                return candidate if _VALID_REQUEST_ID.match(candidate) else None
        return None
