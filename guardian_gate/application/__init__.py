"""Application layer: use cases (OTP engine, auth flows), DTOs, and ports."""
