"""Tally settings, read from the environment by pydantic-settings.

OS environment variables always win. Below them, the first existing file of

1. ``$TALLY_ENV_FILE`` (absolute, or relative to the project root)
2. ``config/.env.dev``
3. ``config/.env``

is loaded, then field defaults apply.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "TALLY_ENV_FILE"


def _find_project_root() -> Path:
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / "config").is_dir() or (candidate / "pyproject.toml").is_file():
            return candidate
    return here.parents[1]


def get_config_dir() -> Path:
    return _find_project_root() / "config"


def _env_file_candidates() -> list[Path]:
    candidates: list[Path] = []
    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        candidates.append(path if path.is_absolute() else _find_project_root() / path)
    config_dir = get_config_dir()
    candidates += [config_dir / ".env.dev", config_dir / ".env"]
    return candidates


def _resolve_env_file_path() -> Path | None:
    return next((p for p in _env_file_candidates() if p.is_file()), None)


class Settings(BaseSettings):
    """Settings for the API, the CLI and the report cache."""

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Tally"
    debug: bool = False
    log_level: str = "INFO"

    # Ledger database; ``database_url_override`` takes precedence over the
    # postgres_* parts (e.g. sqlite+aiosqlite:///data/tally.db)
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr = SecretStr("")
    postgres_db: str = "tally"
    database_url_override: str | None = None

    # HTTP API; no CORS origins means no CORS middleware
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: str = ""

    # Report results cache; a TTL of 0 keeps entries for the process lifetime
    report_cache_enabled: bool = True
    report_cache_ttl_seconds: int = 3600
    report_currency: str = "EUR"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, value: Any) -> str:
        if isinstance(value, (list, tuple)):
            return ",".join(value)
        return str(value) if value else ""

    @field_validator("report_cache_ttl_seconds")
    @classmethod
    def _check_cache_ttl(cls, value: int) -> int:
        if value < 0:
            msg = "report_cache_ttl_seconds cannot be negative"
            raise ValueError(msg)
        return value

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        password = self.postgres_password.get_secret_value()
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


def clear_settings_cache() -> None:
    """Forget cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
