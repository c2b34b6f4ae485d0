"""
Tests for settings and logger setup.
"""

import io
import logging
import pytest
from pydantic import ValidationError

from poletrack.config import Settings
from poletrack.models.meet import TrendRange
from poletrack.utils.logging import setup_logger


class TestSettings:
    """Tests for the Settings model."""

    def test_trend_range_is_normalized(self):
        assert Settings(default_trend_range=" ALL ").default_trend_range == "all"
        assert Settings(default_trend_range=TrendRange.LAST_30).default_trend_range == "30"

    def test_unknown_trend_range(self):
        with pytest.raises(ValidationError):
            Settings(default_trend_range="7")

    def test_pole_length_step_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(pole_length_step_ft=0)

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("POLE_LENGTH_STEP_FT", "0.25")
        assert Settings().pole_length_step_ft == 0.25


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_level_and_single_handler(self):
        logger = setup_logger("poletrack.tests.logger", level="debug")
        setup_logger("poletrack.tests.logger", level="debug")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_second_call_relevels_handler(self):
        logger = setup_logger("poletrack.tests.relevel", level="INFO")
        setup_logger("poletrack.tests.relevel", level="WARNING")
        assert logger.level == logging.WARNING
        assert logger.handlers[0].level == logging.WARNING

    def test_writes_to_given_stream(self):
        stream = io.StringIO()
        logger = setup_logger("poletrack.tests.stream", level="INFO", stream=stream)
        logger.info("cleared 4.60m")
        assert "poletrack.tests.stream - INFO - cleared 4.60m" in stream.getvalue()

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            setup_logger("poletrack.tests.bad", level="LOUD")
