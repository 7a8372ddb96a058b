"""Shared helpers used across layers (time, identifiers, logging)."""
