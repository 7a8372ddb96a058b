"""Persistence: SQL credential store (SQLAlchemy async) and in-memory store."""
