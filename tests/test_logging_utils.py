"""Mini README: Tests for the logging helpers.

The launcher applies the configured level after modules have already
obtained loggers, so an explicit level must still reach the root logger.
"""

from __future__ import annotations

import logging

from fintrack.logging_utils import configure_root_logger, get_logger


def test_explicit_level_applies_after_initialisation() -> None:
    root_logger = logging.getLogger()
    original_level = root_logger.level
    get_logger(__name__)
    try:
        configure_root_logger("DEBUG")
        assert root_logger.level == logging.DEBUG
        configure_root_logger(logging.WARNING)
        assert root_logger.level == logging.WARNING
        configure_root_logger()
        assert root_logger.level == logging.WARNING
    finally:
        root_logger.setLevel(original_level)
