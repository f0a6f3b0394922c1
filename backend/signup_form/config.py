"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Sign-up form settings loaded from environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Password rules
    PASSWORD_MIN_LENGTH: int = 8
    BANNED_PASSWORD: str = "password"

    # Event bus
    EVENT_HISTORY_SIZE: int = 100

    model_config = {"env_prefix": "SIGNUP_", "env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
