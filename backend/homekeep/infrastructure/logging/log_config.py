"""Centralized logging configuration.

Root level, a stderr handler for runs without one (tests, scripts), and
per-category levels read from Settings, so that SQL echo or access logs
can be turned down while the application itself stays at INFO.

Usage:
    from homekeep.infrastructure.logging.log_config import setup_logging
    setup_logging(settings)   # once, from the lifespan
"""

import logging
import sys

from homekeep.config import Settings, get_settings

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Settings field → loggers whose level it controls
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncpg"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_storage": ("homekeep.infrastructure.storage",),
}


def setup_logging(settings: Settings | None = None) -> None:
    """Configure Python logging levels from application settings."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    applied = {"root": settings.log_level}
    for settings_field, logger_names in _CATEGORY_MAP.items():
        raw_level = getattr(settings, settings_field, "INFO")
        for name in logger_names:
            logging.getLogger(name).setLevel(_parse_level(raw_level))
        applied[settings_field.removeprefix("log_level_")] = raw_level

    logging.getLogger(__name__).debug(
        "Logging configured: %s",
        ", ".join(f"{category}={level}" for category, level in applied.items()),
    )


def _parse_level(raw: str) -> int:
    """Level name → logging constant; unknown names fall back to INFO."""
    numeric = logging.getLevelName(raw.strip().upper())
    return numeric if isinstance(numeric, int) else logging.INFO
