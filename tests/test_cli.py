"""
CLI integration tests

Tests every semcmp command through Typer's CliRunner.
Values are parsed according to --kind, sorted or reduced by the library,
and library errors come back as exit code 1 with the message on stderr.
"""

import json

import pytest
from typer.testing import CliRunner

from semcmp.cli.main import app
from semcmp.kernel.logging import configure_logging
from semcmp.kernel.settings import get_settings


@pytest.fixture
def runner():
    """Typer CLI test runner"""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """The CLI points logging at the runner's stderr; point it back afterwards"""
    yield
    configure_logging(log_level="WARNING")


def lines(output: str) -> list[str]:
    return output.strip().splitlines()


# =============================================================================
# sort
# =============================================================================


def test_sort_numbers(runner):
    result = runner.invoke(app, ["sort", "3", "1", "2.5"])

    assert result.exit_code == 0
    assert lines(result.stdout) == ["1", "2.5", "3"]


def test_sort_desc(runner):
    result = runner.invoke(app, ["sort", "--desc", "3", "1", "2"])

    assert result.exit_code == 0
    assert lines(result.stdout) == ["3", "2", "1"]


def test_sort_versions(runner):
    result = runner.invoke(app, ["sort", "--kind", "version", "1.10.0", "1.9.0", "1.0.0-rc.1", "1.0.0"])

    assert result.exit_code == 0
    assert lines(result.stdout) == ["1.0.0-rc.1", "1.0.0", "1.9.0", "1.10.0"]


def test_sort_dates_auto_detected(runner):
    result = runner.invoke(app, ["sort", "2020-03-02", "2019-06-06", "2020-01-12"])

    assert result.exit_code == 0
    assert lines(result.stdout) == ["2019-06-06", "2020-01-12", "2020-03-02"]


def test_sort_reads_stdin(runner):
    result = runner.invoke(app, ["sort", "--kind", "date"], input="2020-03-02\n\n2019-06-06\n")

    assert result.exit_code == 0
    assert lines(result.stdout) == ["2019-06-06", "2020-03-02"]


def test_sort_text_kind_keeps_numbers_as_text(runner):
    result = runner.invoke(app, ["sort", "--kind", "text", "10", "9", "1"])

    assert result.exit_code == 0
    assert lines(result.stdout) == ["1", "10", "9"]


def test_sort_mixed_values_fails(runner):
    result = runner.invoke(app, ["sort", "2020-03-02", "banana", "2019-06-06"])

    assert result.exit_code == 1
    assert "Failed to compare incompatible types" in result.output


def test_sort_decimals(runner):
    result = runner.invoke(app, ["sort", "-k", "decimal", "--", "1.10", "1.9", "-1"])

    assert result.exit_code == 0
    assert lines(result.stdout) == ["-1", "1.10", "1.9"]


# =============================================================================
# max / min
# =============================================================================


def test_max_and_min(runner):
    assert lines(runner.invoke(app, ["max", "3", "1.5", "2"]).stdout) == ["3"]
    assert lines(runner.invoke(app, ["min", "3", "1.5", "2"]).stdout) == ["1.5"]


def test_max_versions(runner):
    result = runner.invoke(app, ["max", "-k", "version", "1.0.0-beta", "1.0.0-alpha"])

    assert result.exit_code == 0
    assert lines(result.stdout) == ["1.0.0-beta"]


def test_max_of_nothing_fails(runner):
    result = runner.invoke(app, ["max"], input="")

    assert result.exit_code == 1
    assert "max() arg is an empty collection" in result.output


# =============================================================================
# compare
# =============================================================================


@pytest.mark.parametrize(
    "left,right,expected",
    [("1", "1.0", "eq"), ("2019-06-06", "2020-03-02", "lt"), ("b", "a", "gt")],
)
def test_compare(runner, left, right, expected):
    result = runner.invoke(app, ["compare", left, right])

    assert result.exit_code == 0
    assert result.stdout.strip() == expected


def test_compare_incompatible(runner):
    result = runner.invoke(app, ["compare", "1", "2020-01-01"])

    assert result.exit_code == 1
    assert "Error:" in result.output


# =============================================================================
# parsing and options
# =============================================================================


def test_unparseable_value_exits_with_2(runner):
    result = runner.invoke(app, ["sort", "--kind", "date", "2020-13-45"])

    assert result.exit_code == 2
    assert "Error:" in result.output


def test_invalid_kind_is_rejected(runner):
    result = runner.invoke(app, ["sort", "--kind", "colour", "1"])

    assert result.exit_code != 0


def test_invalid_log_level_exits_with_2(runner):
    result = runner.invoke(app, ["--log-level", "loud", "kinds"])

    assert result.exit_code == 2
    assert "invalid settings" in result.output


def test_log_options_update_active_settings(runner):
    result = runner.invoke(app, ["--log-level", "debug", "--json-logs", "kinds"])

    assert result.exit_code == 0
    assert get_settings().log_level == "DEBUG"
    assert get_settings().json_logs is True


def test_settings_from_environment(runner):
    result = runner.invoke(app, ["kinds"], env={"SEMCMP_REPR_LIMIT": "25"})

    assert result.exit_code == 0
    assert get_settings().repr_limit == 25


def test_json_logs_report_the_operation(runner):
    result = runner.invoke(app, ["--log-level", "info", "--json-logs", "sort", "2", "1"])

    assert result.exit_code == 0
    records = [json.loads(line) for line in lines(result.output) if line.startswith("{")]
    values = [line for line in lines(result.output) if not line.startswith("{")]
    assert values == ["1", "2"]
    assert records[-1]["event"] == "sort completed"
    assert records[-1]["count"] == 2


# =============================================================================
# kinds
# =============================================================================


def test_kinds_lists_builtins(runner):
    result = runner.invoke(app, ["kinds"])

    assert result.exit_code == 0
    assert "number: int, float [builtin]" in result.stdout
    assert "date: date (+ subclasses) [builtin]" in result.stdout
    assert "Version: Version [delegate]" in result.stdout
