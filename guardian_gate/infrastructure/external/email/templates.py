"""Email templates: kind -> subject/HTML body (Jinja)."""

from __future__ import annotations

from typing import Any

from jinja2 import Environment, Template

_CODE_BLOCK = (
    '<div style="background:#f4f4f4;padding:20px;text-align:center;margin:20px 0">'
    '<h1 style="color:#333;letter-spacing:5px;margin:0">{{ code }}</h1></div>'
)

# kind -> (subject_template, body_template)
# Context: name, code (code emails only), ttl_minutes
_DEFAULT_TEMPLATES: dict[str, tuple[str, str]] = {
    "verification": (
        "Verify Your Email Address",
        '<div style="font-family:Arial,sans-serif;max-width:600px;margin:0 auto">'
        "<h2>Welcome, {{ name }}!</h2>"
        "<p>Your verification code is:</p>"
        + _CODE_BLOCK
        + "<p>This code expires in {{ ttl_minutes }} minutes.</p>"
        "<p>If you did not request this, please ignore this email.</p></div>",
    ),
    "welcome": (
        "Welcome to Our App!",
        '<div style="font-family:Arial,sans-serif;max-width:600px;margin:0 auto">'
        "<h2>Welcome, {{ name }}!</h2>"
        "<p>Your account has been successfully verified.</p>"
        "<p>You can now sign in and start using the app.</p></div>",
    ),
    "password_reset": (
        "Password Reset Request",
        '<div style="font-family:Arial,sans-serif;max-width:600px;margin:0 auto">'
        "<h2>Password Reset Request</h2>"
        "<p>Hello {{ name }}, use this code to reset your password:</p>"
        + _CODE_BLOCK
        + "<p>This code expires in {{ ttl_minutes }} minutes.</p>"
        "<p>If you did not request a password reset, you can ignore this email.</p></div>",
    ),
}


class EmailTemplateRenderer:
    """Renders subject and HTML body for an email kind. User values are HTML-escaped."""

    def __init__(
        self,
        templates: dict[str, tuple[str, str]] | None = None,
    ) -> None:
        self._templates = templates or _DEFAULT_TEMPLATES
        self._env = Environment(autoescape=True)
        self._compiled: dict[str, tuple[Template, Template]] = {}
        for key, (sub_str, body_str) in self._templates.items():
            self._compiled[key] = (
                self._env.from_string(sub_str),
                self._env.from_string(body_str),
            )

    def render(self, kind: str, **context: Any) -> tuple[str, str]:
        """Render (subject, html) for kind. Raises KeyError if kind unknown."""
        if kind not in self._compiled:
            raise KeyError(f"Unknown email template: {kind}")
        subject_tpl, body_tpl = self._compiled[kind]
        return subject_tpl.render(**context), body_tpl.render(**context)
