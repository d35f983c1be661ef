"""Tests for the package logging setup."""

import logging
from collections.abc import Iterator
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from revault_client.log import setup_logging


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """Package logger with no handlers; previous state restored afterwards."""
    logger = logging.getLogger("revault_client")
    saved_handlers, saved_level = logger.handlers[:], logger.level
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


class TestSetupLogging:
    """Rotating file handler on the package logger."""

    def test_debug_records_written(self, tmp_path: Path, package_logger: logging.Logger) -> None:
        """Debug messages from package modules reach the log file."""
        log_path = tmp_path / "nested" / "revault-client.log"
        setup_logging(log_path)
        assert package_logger.level == logging.DEBUG
        logging.getLogger("revault_client.daemon.client").debug("probe reply")
        for handler in package_logger.handlers:
            handler.flush()
        assert "probe reply" in log_path.read_text()

    def test_idempotent(self, tmp_path: Path, package_logger: logging.Logger) -> None:
        """Second call does not attach another handler."""
        setup_logging(tmp_path / "a.log")
        setup_logging(tmp_path / "b.log")
        assert len(package_logger.handlers) == 1
        assert isinstance(package_logger.handlers[0], RotatingFileHandler)
        assert not (tmp_path / "b.log").exists()
