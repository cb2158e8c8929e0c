"""
Тесты для logging setup
"""

import logging

import pytest

from src.infrastructure import get_logger, setup_logging


class TestLogging:
    def test_get_logger_returns_named_logger(self) -> None:
        logger = get_logger("src.numeric_backend.adapter")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "src.numeric_backend.adapter"

    def test_setup_logging_accepts_known_level(self) -> None:
        setup_logging("debug")

    def test_setup_logging_rejects_unknown_level(self) -> None:
        with pytest.raises(ValueError, match="Unknown logging level"):
            setup_logging("LOUD")
