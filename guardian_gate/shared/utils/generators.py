"""ID and code generators (CUID2 identifiers, numeric one-time codes)."""

import secrets

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2).

    Returns:
        A new CUID string.
    """
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def generate_numeric_code(digits: int = 6) -> str:
    """Return a fixed-width numeric code drawn uniformly from [10**(digits-1), 10**digits - 1].

    The lower bound keeps the first digit non-zero, so the string is always
    exactly `digits` characters. Uses the secrets CSPRNG.

    Args:
        digits: Number of digits (at least 1).

    Returns:
        Decimal string of length `digits`.
    """
    if digits < 1:
        raise ValueError("digits must be at least 1")
    low = 10 ** (digits - 1)
    high = 10**digits - 1
    return str(low + secrets.randbelow(high - low + 1))
