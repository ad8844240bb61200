from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Storefront Customer Controllers"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./storefront.db"

    # Decorators wrapped around the customer controller, innermost first
    customer_controller_decorators: list[str] = []

    # List types seeded on startup: domain → type codes
    customer_list_types: dict[str, list[str]] = {
        "product": ["default", "favorite", "watch"],
    }

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine: SQL queries
    log_level_controller: str = "INFO"       # Frontend controllers and decorators
    log_level_persistence: str = "INFO"      # SQLAlchemy managers

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()
