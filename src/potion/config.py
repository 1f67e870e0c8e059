"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from POTION_* environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_prefix="POTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App
    environment: str = "development"
    log_level: str = "INFO"
    json_logs: bool = True

    # Identifiers
    slug_max_length: int = 24
    generated_id_length: int = 21


@lru_cache
def get_settings() -> Settings:
    """Return cached settings. Lazy initialization to avoid import-time errors."""
    return Settings()
