"""Domain entities."""

from guardian_gate.domain.entities.user import UserEntity

__all__ = ["UserEntity"]
