"""Centralized application configuration.

Settings are read from ATTACKVIZ_* environment variables or a .env.attackviz
file. Only the CLI and the HTTP app read them; the coverage functions take
everything they need as arguments.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ATTACKVIZ_", env_file=".env.attackviz", env_file_encoding="utf-8",
    )

    # Coverage depth used when a request does not ask for one
    default_depth: int = 1

    log_level: str = "INFO"

    # Browser origins allowed to call the HTTP API (empty = no CORS headers)
    cors_origins: list[str] = []

    @field_validator("default_depth")
    @classmethod
    def _check_depth(cls, v: int) -> int:
        if not 1 <= v <= 3:
            raise ValueError("default_depth must be 1, 2 or 3")
        return v

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper()
