"""Password hashing: bcrypt over a SHA-256 pre-hash.

bcrypt only reads the first 72 bytes of its input. Hashing the password
with SHA-256 first (base64, 44 bytes) means two long passwords that share a
72-byte prefix still get different hashes.
"""

import base64
import hashlib

import bcrypt

DEFAULT_ROUNDS = 12


def _prehash(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def get_password_hash(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Return the bcrypt hash string ($2b$...) for password."""
    return bcrypt.hashpw(_prehash(password), bcrypt.gensalt(rounds=rounds)).decode(
        "utf-8"
    )


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if plain_password matches hashed_password.

    A stored value that is not a bcrypt hash counts as a mismatch rather
    than an error. The work factor is read from the hash itself.
    """
    try:
        return bcrypt.checkpw(
            _prehash(plain_password), hashed_password.encode("utf-8")
        )
    except (ValueError, TypeError):
        return False


class AuthSecurity:
    """IAuthSecurity backed by bcrypt. Both calls block; run them in a thread."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        self._rounds = rounds

    def hash_password(self, password: str) -> str:
        return get_password_hash(password, self._rounds)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        return verify_password(plain_password, hashed_password)
