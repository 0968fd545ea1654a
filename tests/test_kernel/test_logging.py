"""
Test structured logging configuration and LogOperation.

Log lines are written to an in-memory stream so the assertions can read
exactly what an application would see on stderr.
"""

import io
import json
from datetime import date

import pytest

from semcmp.kernel.errors import CmpTypeError
from semcmp.kernel.logging import (
    LogOperation,
    configure_from_settings,
    configure_logging,
    get_logger,
)
from semcmp.kernel.registry import ComparatorRegistry
from semcmp.kernel.settings import Settings
from semcmp.kernel.terms import compare_terms


class TestLoggingConfiguration:
    """Test logging configuration."""

    def test_json_output_is_one_object_per_line(self) -> None:
        stream = io.StringIO()
        configure_logging(json_output=True, log_level="INFO", stream=stream)

        get_logger("semcmp.test").info("Sorted", count=3)

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["event"] == "Sorted"
        assert record["count"] == 3
        assert record["level"] == "info"

    def test_console_output(self) -> None:
        stream = io.StringIO()
        configure_logging(json_output=False, log_level="INFO", stream=stream)

        get_logger("semcmp.test").info("Sorted", count=3)

        assert "Sorted" in stream.getvalue()
        assert "count=3" in stream.getvalue()

    def test_level_filters_lower_records(self) -> None:
        stream = io.StringIO()
        configure_logging(json_output=True, log_level="WARNING", stream=stream)

        logger = get_logger("semcmp.test")
        logger.info("hidden")
        logger.warning("shown")

        assert "hidden" not in stream.getvalue()
        assert "shown" in stream.getvalue()

    def test_configure_from_settings(self) -> None:
        stream = io.StringIO()
        configure_from_settings(Settings(log_level="DEBUG", json_logs=True), stream=stream)

        get_logger("semcmp.test").debug("debug line")

        assert json.loads(stream.getvalue().strip())["event"] == "debug line"


class TestLogOperation:
    """Test LogOperation context manager."""

    def setup_method(self) -> None:
        """Capture DEBUG and up as JSON for each test."""
        self.stream = io.StringIO()
        configure_logging(json_output=True, log_level="DEBUG", stream=self.stream)

    def records(self) -> list[dict]:
        return [json.loads(line) for line in self.stream.getvalue().splitlines()]

    def test_success_logs_start_and_completion(self) -> None:
        logger = get_logger("semcmp.test")

        with LogOperation(logger, "sort", count=3):
            pass

        started, completed = self.records()
        assert started["event"] == "sort started"
        assert completed["event"] == "sort completed"
        assert completed["count"] == 3
        assert completed["duration_ms"] >= 0

    def test_failure_logs_error_and_propagates(self) -> None:
        logger = get_logger("semcmp.test")

        with pytest.raises(ValueError):
            with LogOperation(logger, "max"):
                raise ValueError("boom")

        failed = self.records()[-1]
        assert failed["event"] == "max failed"
        assert failed["level"] == "error"
        assert failed["error_type"] == "ValueError"
        assert failed["error"] == "boom"

    def test_incompatible_pair_logs_operand_types(self) -> None:
        logger = get_logger("semcmp.test")

        with pytest.raises(CmpTypeError):
            with LogOperation(logger, "sort", count=3):
                raise CmpTypeError(date(2020, 1, 1), None)

        failed = self.records()[-1]
        assert failed["error_type"] == "CmpTypeError"
        assert failed["left_type"] == "date"
        assert failed["right_type"] == "NoneType"
        assert failed["count"] == 3

    def test_registration_is_logged(self) -> None:
        registry = ComparatorRegistry()

        registry.register(int, compare_terms, name="integer")

        registered = self.records()[-1]
        assert registered["event"] == "Comparator registered"
        assert registered["comparable"] == "integer"
        assert registered["types"] == ["int"]
