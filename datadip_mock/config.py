"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - PORT selects the listen port; defaults to 8080 when unset
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
      (ADR: developer UX)
    - Defaults provided for every setting: the mock runs with no environment at all
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = Field(8080, ge=1, le=65535)

    @field_validator("port", mode="before")
    @classmethod
    def default_blank_port(cls, v):
        """An exported-but-empty PORT falls back to the default."""
        if isinstance(v, str) and not v.strip():
            return 8080
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
