"""Unit tests for application settings configuration."""

import logging
from pathlib import Path

from homekeep.config import Settings
from homekeep.infrastructure.logging.log_config import setup_logging


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_defaults_select_in_memory_storage(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    settings = Settings(_env_file=None)

    assert settings.uses_database is False
    assert settings.max_upload_size_mb == 5
    assert settings.max_upload_size_bytes == 5 * 1024 * 1024
    assert settings.upcoming_window_days == 30
    assert settings.seed_default_categories is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./homekeep.db")
    monkeypatch.setenv("MAX_UPLOAD_SIZE_MB", "2")
    settings = Settings(_env_file=None)

    assert settings.uses_database is True
    assert settings.max_upload_size_bytes == 2 * 1024 * 1024


def test_setup_logging_applies_category_levels():
    settings = Settings(_env_file=None, log_level_sql="ERROR", log_level_storage="DEBUG")
    setup_logging(settings)

    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    assert logging.getLogger("homekeep.infrastructure.storage").level == logging.DEBUG


def test_setup_logging_falls_back_to_info_for_unknown_level():
    settings = Settings(_env_file=None, log_level_uvicorn="LOUD")
    setup_logging(settings)

    assert logging.getLogger("uvicorn").level == logging.INFO
