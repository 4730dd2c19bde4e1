"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - port always ends up in 1-65535: unset, non-numeric or out-of-range PORT
      falls back to DEFAULT_PORT instead of failing startup

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: the service runs with no environment at all
"""

from functools import lru_cache
from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORT = 3333


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    @field_validator("port", mode="before")
    @classmethod
    def fallback_port(cls, v: Any) -> int:
        """PORT=abc or PORT=0 serve on the default port rather than crash."""
        try:
            port = int(str(v).strip())
        except (TypeError, ValueError):
            return DEFAULT_PORT
        if not 1 <= port <= 65535:
            return DEFAULT_PORT
        return port

    # API
    cors_origins: list[str] = ["*"]
    docs_url: str = "/api-docs"

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "text"


@lru_cache
def get_settings() -> Settings:
    return Settings()
