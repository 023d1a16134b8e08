"""Application settings loaded from environment variables.

OS environment variables always win. Otherwise values come from the first
existing file among ``$OMI_ENV_FILE``, ``config/.env.dev`` and
``config/.env``, resolved against the repository root.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# src/omi_config/settings.py -> repository root
_REPO_ROOT = Path(__file__).resolve().parents[2]
_ENV_FILE_CANDIDATES = ("config/.env.dev", "config/.env")


def _resolve_env_file_path() -> Path | None:
    override = os.environ.get("OMI_ENV_FILE")
    candidates = [override] if override else []
    candidates.extend(_ENV_FILE_CANDIDATES)

    for candidate in candidates:
        path = Path(candidate)
        if not path.is_absolute():
            path = _REPO_ROOT / path
        if path.is_file():
            return path
    return None


class Settings(BaseSettings):
    """OMI configuration. Field names map to upper-case env vars."""

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Security (MUST be set - app fails without these)
    jwt_secret_key: SecretStr  # Secret for signing JWT tokens
    postgres_password: SecretStr  # Database password

    # Application
    app_name: str = "OMI"
    environment: Literal["development", "test", "production"] = "development"

    # Database (POSTGRES_ prefix)
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_db: str = "omi"
    # Full SQLAlchemy URL, e.g. sqlite+aiosqlite:///./data/omi.db for local runs
    database_url_override: str | None = None

    # API (API_ prefix)
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: str = "http://localhost:3000"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _validate_cors_origins(cls, v: Any) -> str:
        """Ensure cors_origins is stored as comma-separated string."""
        if isinstance(v, list):
            return ",".join(v)
        return str(v) if v else ""

    # JWT
    jwt_access_token_expire_hours: int = 24

    # Password hashing (bcrypt work factor, fixed per deployment)
    password_hash_rounds: int = Field(default=12, ge=4, le=31)

    # Password reset
    reset_password_token_ttl_minutes: int = Field(default=60, gt=0)
    reset_password_url: str = "http://localhost:3000/reset-password"

    @field_validator("reset_password_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        """Drop trailing slashes; the token is appended as ``?token=``."""
        return v.rstrip("/")

    # SMTP (SMTP_ prefix)
    smtp_enabled: bool = False
    smtp_host: str = ""
    smtp_port: int = 587
    smtp_user: str = ""
    smtp_password: SecretStr | None = None
    smtp_from_email: str = ""
    smtp_from_name: str = "OMI"
    smtp_use_tls: bool = True
    smtp_starttls: bool = True
    smtp_timeout_seconds: float = 10.0

    # Logging (LOG_ prefix)
    log_level: str = "INFO"

    # Computed properties
    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """Construct the database URL from components."""
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.postgres_user}:"
            f"{self.postgres_password.get_secret_value()}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings.

    Required fields (jwt_secret_key, postgres_password) must be provided
    via environment variables or .env file.
    """
    return Settings()  # type: ignore[call-arg]  # pydantic-settings loads from env


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
