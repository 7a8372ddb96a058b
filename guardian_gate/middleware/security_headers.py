"""Security headers middleware for a JSON-only API.

HSTS is only sent when the app is not in development, matching the Secure
flag on the session cookie. Raw ASGI (no BaseHTTPMiddleware).
"""

from typing import Callable

BASE_HEADERS = {
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Cache-Control": "no-store",
}
HSTS_VALUE = "max-age=31536000; includeSubDomains"


def security_headers(include_hsts: bool) -> dict[str, str]:
    headers = dict(BASE_HEADERS)
    if include_hsts:
        headers["Strict-Transport-Security"] = HSTS_VALUE
    return headers


def SecurityHeadersMiddleware(app: Callable, include_hsts: bool = True) -> Callable:
    """Set security headers on every HTTP response unless the route already set them."""
    header_list = [
        (k.lower().encode(), v.encode()) for k, v in security_headers(include_hsts).items()
    ]

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                seen = {h[0].lower() for h in headers}
                headers.extend(h for h in header_list if h[0] not in seen)
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
