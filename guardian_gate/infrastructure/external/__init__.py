"""External services: outbound email."""
