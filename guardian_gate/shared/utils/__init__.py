"""Shared utilities: datetime and generators."""

from guardian_gate.shared.utils.datetime import ensure_utc, utc_now
from guardian_gate.shared.utils.generators import generate_cuid, generate_numeric_code

__all__ = [
    "ensure_utc",
    "generate_cuid",
    "generate_numeric_code",
    "utc_now",
]
