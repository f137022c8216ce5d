"""Tests for the package logger helpers."""

import logging

import pytest

from nodelight.logging import log_operation


class TestLogOperation:
    """Tests for the operation timing context manager."""

    def test_logs_start_and_completion(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="nodelight"):
            with log_operation("highlight", {"seed": "A", "depth": 2}):
                pass

        assert "Starting highlight seed=A depth=2" in caplog.text
        assert "Completed highlight in" in caplog.text

    def test_logs_failure_and_reraises(self, caplog: pytest.LogCaptureFixture) -> None:
        """Errors are logged at ERROR level and propagate unchanged."""
        with caplog.at_level(logging.INFO, logger="nodelight"):
            with pytest.raises(KeyError):
                with log_operation("match"):
                    raise KeyError("type")

        assert "match failed after" in caplog.text
        assert "Completed match" not in caplog.text
        assert any(r.levelno == logging.ERROR for r in caplog.records)
