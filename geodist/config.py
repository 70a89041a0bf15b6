"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Airport dataset (read-only SQLite file)
    database_url: str = "sqlite+aiosqlite:///./global_airports_database.sqlite"

    # Lookup caches
    airports_cache_size: int = 9300  # roughly one entry per airport row
    codes_cache_size: int = 1  # single "all codes" entry
    cache_shards: int = 16

    # HTTP basic auth; requests are rejected until both are set
    api_username: str = ""
    api_password: str = ""

    rate_limit: str = "100/minute"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
