"""HTTP middleware: request ID and security headers.

Applied in create_app(); first added = outermost.
"""

from guardian_gate.middleware.request_id import RequestIDMiddleware
from guardian_gate.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
]
