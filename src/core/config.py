"""Centralized application configuration.

Settings are read from environment variables prefixed with CHESS_ (or a .env.chess file).
Everything has a default, so the engine can be used without any configuration.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CHESS_",
        env_file=".env.chess",
        env_file_encoding="utf-8",
    )

    # Persistence
    database_url: str = "sqlite:///chess.db"
    database_echo: bool = False

    # Moves submitted through the service must be among the generated candidates
    enforce_legality: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@lru_cache
def get_settings() -> Settings:
    return Settings()
