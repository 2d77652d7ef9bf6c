"""Test the package logger."""
import logging

import pytest

from arithmetic_engine.common.logger import LOG_LEVEL_ENV, LOGGER_NAME, _build_logger, logger, set_log_level


@pytest.fixture
def restore_level():
    """Restore the logger level after the test."""
    level = logger.level
    yield
    logger.setLevel(level)


def test_logger_is_package_logger() -> None:
    """The shared logger is the named package logger with one handler."""
    assert logger is logging.getLogger(LOGGER_NAME)
    assert len(logger.handlers) == 1


@pytest.mark.parametrize("level,expected", [
    ("debug", logging.DEBUG),
    ("INFO", logging.INFO),
    (logging.ERROR, logging.ERROR),
])
def test_set_log_level(restore_level, level, expected: int) -> None:
    """set_log_level accepts level names in any case and numeric levels."""
    set_log_level(level)
    assert logger.level == expected


def test_unknown_level_in_environment_falls_back_to_warning(
    restore_level, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """An unknown level name in the environment is reported and replaced by WARNING."""
    monkeypatch.setenv(LOG_LEVEL_ENV, "verbose")
    rebuilt = _build_logger()
    assert rebuilt is logger
    assert logger.level == logging.WARNING
    assert "Unknown log level 'verbose'" in caplog.text
    assert len(logger.handlers) == 1


def test_level_in_environment(restore_level, monkeypatch: pytest.MonkeyPatch) -> None:
    """A known level name in the environment is applied in any case."""
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    _build_logger()
    assert logger.level == logging.DEBUG
