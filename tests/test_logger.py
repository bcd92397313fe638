"""Tests for logging configuration."""

import io
import logging
from collections.abc import Iterator

import pytest

from csquares.codec import encode
from csquares.logger import PACKAGE_LOGGER, configure_logging


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Put the root and package loggers back after each test."""
    root = logging.getLogger()
    package = logging.getLogger(PACKAGE_LOGGER)
    handlers, root_level, package_level = root.handlers[:], root.level, package.level
    yield
    root.handlers[:] = handlers
    root.setLevel(root_level)
    package.setLevel(package_level)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_level_applies_to_package_only(self) -> None:
        """Test that the requested level is set on the package logger, not the root."""
        configure_logging(level="DEBUG", stream=io.StringIO())
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_records_go_to_stream(self) -> None:
        """Test that codec records are written to the configured stream."""
        stream = io.StringIO()
        configure_logging(level="DEBUG", format_string="%(name)s %(message)s", stream=stream)
        encode("-42.8", "147.3", 1)
        assert "csquares.codec Encoded" in stream.getvalue()

    def test_unknown_level_falls_back_to_info(self) -> None:
        """Test that an unknown level name is read as INFO."""
        configure_logging(level="chatty", stream=io.StringIO())
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.INFO
