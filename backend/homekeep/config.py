from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "HomeKeep API"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # Empty → process-local in-memory store; otherwise any async-capable
    # SQLAlchemy URL (postgresql://..., sqlite:///...).
    database_url: str = ""
    cors_origins: list[str] = ["http://localhost:5173"]

    # Photo uploads
    upload_dir: str = "uploads"
    max_upload_size_mb: int = 5

    # Dashboard / derived queries
    upcoming_window_days: int = 30
    recent_limit: int = 3

    # Create Plumbing / Electrical / HVAC / Appliances / Garden on startup
    seed_default_categories: bool = False

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine: SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_storage: str = "INFO"          # photo file storage adapter

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024

    @property
    def uses_database(self) -> bool:
        return bool(self.database_url.strip())


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()
