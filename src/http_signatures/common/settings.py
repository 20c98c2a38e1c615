"""Configuration management using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HTTPSIG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Signing
    algorithm: str = Field(
        default="hmac-sha256",
        description="Algorithm used when signing outgoing messages",
    )
    signing_key_id: str | None = Field(
        default=None,
        description="Key id used for signing (defaults to the only key in the store)",
    )
    signed_headers: tuple[str, ...] = Field(
        default=("(request-target)", "host", "date"),
        description="Headers covered by outgoing signatures",
    )
    implicit_headers: tuple[str, ...] = Field(
        default=("date",),
        description="Header list assumed when a signature omits the headers parameter",
    )

    # Verification middleware
    auth_enabled: bool = Field(
        default=True,
        description="Require a valid HTTP signature on incoming requests",
    )
    auth_exempt_paths: tuple[str, ...] = Field(
        default=("/health", "/ready"),
        description="Paths exempt from signature verification",
    )
    required_headers: tuple[str, ...] = Field(
        default=(),
        description="Headers every accepted signature must cover",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Log level name",
    )
    log_json: bool = Field(
        default=False,
        description="Emit JSON log lines",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings."""
    return Settings()
