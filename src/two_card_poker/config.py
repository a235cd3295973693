"""Configuration management for the two-card poker simulator."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Game defaults for the CLI
    default_rounds: int = Field(default=3, alias="POKER_ROUNDS")
    default_players: int = Field(default=5, alias="POKER_PLAYERS")
    max_shuffle_times: int = Field(default=9, ge=1, alias="POKER_MAX_SHUFFLE_TIMES")
    seed: int | None = Field(default=None, alias="POKER_SEED")

    # Logging
    log_level: str = Field(default="WARNING", alias="POKER_LOG_LEVEL")
    log_format: str = Field(default="structured", alias="POKER_LOG_FORMAT")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }


# Singleton settings instance
settings = Settings()
