"""Settings for d20roll, read from ``D20ROLL_*`` environment variables or a ``.env`` file."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="D20ROLL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    # JSON lines when true, human-readable console output otherwise
    log_json: bool = True
    # Largest number of dice a single roll may ask for
    max_dice: int = Field(default=1000, ge=1)
    # Fixed seed for the server's random source; unset means system randomness
    seed: int | None = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
