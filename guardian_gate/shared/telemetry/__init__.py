"""Logging setup for the application."""

from guardian_gate.shared.telemetry.logging import (
    get_logger,
    request_id_var,
    setup_logging,
)

__all__ = ["get_logger", "request_id_var", "setup_logging"]
