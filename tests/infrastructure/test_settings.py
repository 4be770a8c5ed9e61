"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

import pytest

from gestion_dj.infrastructure import settings as settings_module
from gestion_dj.infrastructure.settings import AppSettings


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch) -> None:
    monkeypatch.setattr(
        settings_module.dotenv,
        "load_dotenv",
        lambda: None,
    )
    for name in (
        "GESTION_STORE_BACKEND",
        "GESTION_DB_URL",
        "GESTION_ADMIN_PASSWORD",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_defaults() -> None:
    settings = AppSettings.from_env()

    assert settings.store_backend == "sqlalchemy"
    assert settings.db_url is None
    assert settings.admin_password is None


def test_from_env_reads_values(monkeypatch) -> None:
    monkeypatch.setenv("GESTION_STORE_BACKEND", " Memory ")
    monkeypatch.setenv("GESTION_DB_URL", "sqlite:///gestion.db")
    monkeypatch.setenv("GESTION_ADMIN_PASSWORD", "cambiar")

    settings = AppSettings.from_env()

    assert settings.store_backend == "memory"
    assert settings.db_url == "sqlite:///gestion.db"
    assert settings.admin_password == "cambiar"


def test_unknown_backend_falls_back_to_sqlalchemy(monkeypatch) -> None:
    logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    monkeypatch.setenv("GESTION_STORE_BACKEND", "mongo")

    settings = AppSettings.from_env()

    assert settings.store_backend == "sqlalchemy"
    logger.warning.assert_called_once()
