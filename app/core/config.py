"""Application configuration from environment."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "Personal Tracker"
    debug: bool = False
    log_level: str = "INFO"

    # Database (async driver; alembic converts to a sync one)
    database_url: str = "sqlite+aiosqlite:///./tracker.db"

    # JWT
    secret_key: str = "change-me-in-production-use-env"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 30  # 30 days

    # Seeded account
    default_username: str = "default_user"
    default_password: str = "change-me"

    # Number of most recent streak rows considered by the streak summary
    streak_window: int = 100

    # Gemini; the key is only a fallback for requests that don't send one
    gemini_model: str = "gemini-2.5-flash"
    gemini_api_key: str | None = None

    cors_origins: list[str] = ["*"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()
