"""Request ID middleware.

Forwards a client X-Request-ID (sanitized) or generates one, echoes it on the
response, and binds it to request_id_var for the duration of the request so
log lines can be correlated. Raw ASGI (no BaseHTTPMiddleware).
"""

import re
import uuid
from typing import Callable

from guardian_gate.shared.telemetry.logging import request_id_var

# Alphanumeric, hyphen, underscore only: values end up in log lines.
REQUEST_ID_MAX_LENGTH = 64
REQUEST_ID_ALLOWED_PATTERN = re.compile(
    r"^[a-zA-Z0-9_-]{1," + str(REQUEST_ID_MAX_LENGTH) + r"}$"
)


def _get_header(scope: dict, name: str) -> str | None:
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def sanitize_request_id(raw: str | None) -> str:
    """Return raw (stripped) if it is a safe id; otherwise a new UUID4 string."""
    if raw is None:
        return str(uuid.uuid4())
    candidate = raw.strip()
    if not REQUEST_ID_ALLOWED_PATTERN.match(candidate):
        return str(uuid.uuid4())
    return candidate


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Add or forward the request id header on each HTTP request and response."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = sanitize_request_id(_get_header(scope, header_name))
        scope.setdefault("state", {})["request_id"] = request_id
        token = request_id_var.set(request_id)

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                headers.append((header_name.lower().encode(), request_id.encode()))
                message["headers"] = headers
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        finally:
            request_id_var.reset(token)

    return asgi_app
