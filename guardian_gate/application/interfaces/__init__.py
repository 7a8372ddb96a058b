"""Ports (Protocols) implemented by infrastructure."""

from guardian_gate.application.interfaces.repositories import ICredentialStore
from guardian_gate.application.interfaces.services import (
    IAuthSecurity,
    IEmailNotifier,
    ISessionIssuer,
)

__all__ = [
    "IAuthSecurity",
    "ICredentialStore",
    "IEmailNotifier",
    "ISessionIssuer",
]
