"""Infrastructure: persistence, security, and external email adapters."""
