"""Logging configuration for the csquares command line tools and map viewer."""

import logging
import sys
from typing import TextIO

from .config import get_settings

PACKAGE_LOGGER = "csquares"


def configure_logging(
    level: str | None = None,
    format_string: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure logging for the command line tools and the map viewer.

    Records are written to stderr unless another stream is given, so command
    output on stdout (e.g. ``csquares encode --json``) stays machine readable.
    The requested level applies to the ``csquares`` loggers only; everything
    else, Streamlit and its dependencies included, stays at WARNING.

    Args:
        level: Optional logging level (e.g., "DEBUG", "INFO"). Falls back to settings.
        format_string: Optional logging format string. Falls back to settings.
        stream: Optional stream for log records. Defaults to stderr.
    """
    settings = get_settings()

    log_level = level or settings.logging.level
    log_format = format_string or settings.logging.format

    logging.basicConfig(
        level=logging.WARNING,
        format=log_format,
        handlers=[logging.StreamHandler(stream or sys.stderr)],
        force=True,  # Ensure configuration is applied even if basicConfig was called before
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(getattr(logging, log_level.upper(), logging.INFO))

    logging.getLogger(__name__).debug("Logging configured with level: %s", log_level)
