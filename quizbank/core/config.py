"""Application configuration from environment."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    # Environment flag: "development", "production" or anything else.
    # Unset and empty both count as non-production.
    app_env: str = ""

    # Database (async driver); pool tuning goes in the URL query string
    database_url: str = "sqlite+aiosqlite:///./quizbank.db"

    log_level: str = "info"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()
