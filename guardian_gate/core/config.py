"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Required fields (SECRET_KEY, and DATABASE_URL or mail
credentials depending on the selected backends) are validated at load time.
"""

from datetime import timedelta
from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults except those checked in
    validate_required_and_backends (secret_key, database_url for postgres,
    Gmail credentials for the gmail email backend).
    """

    # App
    app_name: str = "guardian-gate"
    app_version: str = "1.0.0"
    debug: bool = False
    # "development" disables the Secure flag on the session cookie.
    environment: str = "development"
    api_prefix: str = "/api"

    # Credential store: "postgres" (SQLAlchemy + Alembic) or "memory" (single process)
    database_backend: str = "postgres"
    database_url: str = ""
    database_echo: bool = False
    db_pool_size: int = 10
    db_max_overflow: int = 20
    db_command_timeout: int = 30

    # Session (JWT)
    secret_key: SecretStr = SecretStr("")
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 7 * 24 * 60
    session_cookie_name: str = "token"

    # Password hashing (bcrypt work factor, 4..31)
    bcrypt_rounds: int = 12

    # One-time passcodes
    otp_digits: int = 6
    otp_verify_email_ttl_seconds: int = 120
    otp_login_ttl_seconds: int = 120
    otp_reset_password_ttl_seconds: int = 600

    # Email: "log" (write to the application log) or "gmail" (Gmail API, OAuth2 refresh token)
    email_backend: str = "log"
    email_sender: str = ""
    gmail_client_id: str = ""
    gmail_client_secret: SecretStr | None = None
    gmail_refresh_token: SecretStr | None = None
    gmail_token_uri: str = "https://oauth2.googleapis.com/token"

    # CORS
    allowed_origins: str = "http://localhost:5173"

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_required_and_backends(self) -> "Settings":
        """Validate required env and backend selection.

        - Postgres: DATABASE_URL required.
        - Gmail: EMAIL_SENDER, GMAIL_CLIENT_ID, GMAIL_CLIENT_SECRET and
          GMAIL_REFRESH_TOKEN required.
        """
        if self.database_backend == "postgres":
            if not self.database_url:
                raise ValueError(
                    "DATABASE_URL is required when database_backend is 'postgres'. "
                    "Set in environment or .env file."
                )
        elif self.database_backend != "memory":
            raise ValueError(
                f"database_backend must be 'postgres' or 'memory', got: {self.database_backend!r}"
            )
        if not self.secret_key.get_secret_value():
            raise ValueError(
                "SECRET_KEY is required. Generate with: openssl rand -hex 32."
            )
        if self.email_backend == "gmail":
            missing = [
                name
                for name, value in (
                    ("EMAIL_SENDER", self.email_sender),
                    ("GMAIL_CLIENT_ID", self.gmail_client_id),
                    ("GMAIL_CLIENT_SECRET", self.gmail_client_secret),
                    ("GMAIL_REFRESH_TOKEN", self.gmail_refresh_token),
                )
                if not value
            ]
            if missing:
                raise ValueError(
                    "email_backend 'gmail' requires: " + ", ".join(missing)
                )
        elif self.email_backend != "log":
            raise ValueError(
                f"Invalid email_backend '{self.email_backend}'. Must be one of: 'log', 'gmail'"
            )
        if not 4 <= self.bcrypt_rounds <= 31:
            raise ValueError("bcrypt_rounds must be between 4 and 31")
        if self.otp_digits < 4:
            raise ValueError("otp_digits must be at least 4")
        return self

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    @property
    def access_token_lifetime(self) -> timedelta:
        return timedelta(minutes=self.access_token_expire_minutes)


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
