from __future__ import annotations

import logging
from dataclasses import dataclass

import structlog

from healthz.shared.consts import EnumLogLevel
from healthz.shared.logging import (
    _select_renderer,
    configure_logging,
    get_logger,
    update_logging_from_settings,
)


def test_configure_logging_sets_root_handlers(tmp_path) -> None:
    log_file = tmp_path / "healthz.log"
    configure_logging(level="DEBUG", file_path=str(log_file), environment="development")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(handler, logging.FileHandler) for handler in root.handlers)

    logger = get_logger(__name__)
    logger.info("health.logging.test", check="db")


def test_configure_logging_reads_level_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.delenv("LOG_FILE_PATH", raising=False)

    configure_logging()

    assert logging.getLogger().level == logging.WARNING


def test_production_renders_json() -> None:
    assert isinstance(_select_renderer("production"), structlog.processors.JSONRenderer)
    assert isinstance(_select_renderer("development"), structlog.dev.ConsoleRenderer)


@dataclass
class _LoggingSettings:
    level: EnumLogLevel = EnumLogLevel.WARNING
    format: str = "%(message)s"
    file_path: str | None = None


@dataclass
class _Settings:
    logging: _LoggingSettings
    environment: str = "production"


def test_update_logging_from_settings_applies_configuration() -> None:
    settings = _Settings(logging=_LoggingSettings(level=EnumLogLevel.ERROR))

    update_logging_from_settings(settings)

    assert logging.getLogger().level == logging.ERROR


def test_update_logging_from_incomplete_settings_keeps_configuration() -> None:
    configure_logging(level="INFO")

    update_logging_from_settings(object())

    assert logging.getLogger().level == logging.INFO
