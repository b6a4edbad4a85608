"""Request ID middleware.

Forwards a safe client X-Request-ID or generates one, exposes it as
request.state.request_id and via pinboard.shared.context for log lines,
and echoes it on the response. Raw ASGI so streaming is untouched.
"""

import re
import uuid
from typing import Callable

from pinboard.shared.context import reset_request_id, set_request_id

REQUEST_ID_MAX_LENGTH = 64
# Alphanumeric, hyphen, underscore only: the value ends up in log lines.
_SAFE_REQUEST_ID = re.compile(r"[a-zA-Z0-9_-]{1,%d}" % REQUEST_ID_MAX_LENGTH)


def resolve_request_id(raw: str | None) -> str:
    """Return raw (trimmed) when it is safe to log, otherwise a fresh UUID4."""
    candidate = (raw or "").strip()
    if _SAFE_REQUEST_ID.fullmatch(candidate):
        return candidate
    return str(uuid.uuid4())


class RequestIDMiddleware:
    """Attach a request id to every HTTP exchange."""

    def __init__(self, app: Callable, header_name: str = "X-Request-ID") -> None:
        self.app = app
        self.header_name = header_name
        self._header_key = header_name.lower().encode()

    def _incoming(self, scope: dict) -> str | None:
        for key, value in scope.get("headers", []):
            if key.lower() == self._header_key:
                return value.decode("utf-8", errors="replace")
        return None

    async def __call__(self, scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = resolve_request_id(self._incoming(scope))
        scope.setdefault("state", {})["request_id"] = request_id
        response_header = (self.header_name.encode(), request_id.encode())

        async def send_with_id(message: dict) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [*message.get("headers", []), response_header]
            await send(message)

        token = set_request_id(request_id)
        try:
            await self.app(scope, receive, send_with_id)
        finally:
            reset_request_id(token)
