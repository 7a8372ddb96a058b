"""Core: config, exception handlers, and application bootstrap."""

from guardian_gate.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
