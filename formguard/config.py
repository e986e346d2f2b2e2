"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Redis
    REDIS_URL: str = "redis://localhost:6379/0"
    SUBMISSION_TTL_SECONDS: int = 604800

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "info"
    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    # Rate Limiting
    RATE_LIMIT_MAX_SUBMISSIONS: int = 30
    RATE_LIMIT_WINDOW_SECONDS: int = 3600

    # Validation
    EMAIL_ALLOW_SMTPUTF8: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
