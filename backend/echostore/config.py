"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Every setting has a default: the API runs with an empty environment

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - log_format derived from release_mode when unset: JSON in release, text otherwise
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from echostore.core.domain_types import IdStrategy


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    release_mode: bool = False

    # API
    app_version: str = "1.0.0"
    api_prefixes: list[str] = ["", "/api/v1"]
    enable_readiness: bool = True
    cors_allow_origin: str = "*"

    # Store
    id_strategy: IdStrategy = IdStrategy.UUID

    # Observability
    log_level: str = "INFO"
    log_format: str | None = None

    @field_validator("api_prefixes")
    @classmethod
    def normalize_prefixes(cls, v: list[str]) -> list[str]:
        """'/api/v1/' and 'api/v1' both become '/api/v1'; '/' becomes ''."""
        seen: list[str] = []
        for prefix in v:
            p = prefix.strip().strip("/")
            p = f"/{p}" if p else ""
            if p not in seen:
                seen.append(p)
        return seen

    @model_validator(mode="after")
    def default_log_format(self) -> "Settings":
        if self.log_format is None:
            self.log_format = "json" if self.release_mode else "text"
        return self

    @property
    def versioned_prefix(self) -> str:
        """Prefix advertised by the welcome endpoint (last non-root one)."""
        versioned = [p for p in self.api_prefixes if p]
        return versioned[-1] if versioned else ""


@lru_cache
def get_settings() -> Settings:
    return Settings()
