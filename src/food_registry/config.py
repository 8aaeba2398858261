"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_backend: str = "sqlite"
    sqlite_path: str = "data/food_registry.db"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    api_tokens: str | None = None
    allow_non_positive_quantity_update: bool = True
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_api_tokens(raw: str | None) -> dict[str, str]:
    """Parse ``token:caller`` pairs into a token to caller identity map."""
    if raw is None:
        return {}
    tokens: dict[str, str] = {}
    for chunk in raw.split(","):
        token, sep, caller = chunk.strip().partition(":")
        token = token.strip()
        caller = caller.strip()
        if not sep or not token or not caller:
            continue
        tokens[token] = caller
    return tokens
