"""guardian-gate: email/password authentication with one-time passcodes."""

__version__ = "1.0.0"
