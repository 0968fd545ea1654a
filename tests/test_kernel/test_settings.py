"""Tests for Settings and the active-settings accessors"""

import pytest
from pydantic import ValidationError

from semcmp.kernel.settings import Settings, configure, default_settings, get_settings


def test_defaults() -> None:
    settings = Settings()

    assert settings.log_level == "WARNING"
    assert settings.json_logs is False
    assert settings.repr_limit == 80


def test_settings_are_frozen() -> None:
    with pytest.raises(ValidationError):
        default_settings.repr_limit = 10  # type: ignore[misc]


@pytest.mark.parametrize("limit", [0, 9, 10_001])
def test_repr_limit_bounds(limit: int) -> None:
    with pytest.raises(ValidationError):
        Settings(repr_limit=limit)


def test_from_env_reads_prefixed_variables() -> None:
    settings = Settings.from_env(
        {
            "SEMCMP_LOG_LEVEL": "debug",
            "SEMCMP_JSON_LOGS": "true",
            "SEMCMP_REPR_LIMIT": "200",
            "LOG_LEVEL": "ERROR",
        }
    )

    assert settings.log_level == "DEBUG"
    assert settings.json_logs is True
    assert settings.repr_limit == 200


def test_from_env_without_variables_gives_defaults() -> None:
    assert Settings.from_env({}) == Settings()


def test_from_env_rejects_invalid_values() -> None:
    with pytest.raises(ValidationError):
        Settings.from_env({"SEMCMP_LOG_LEVEL": "LOUD"})


def test_configure_returns_previous_settings() -> None:
    custom = Settings(repr_limit=40)
    previous = configure(custom)

    assert get_settings() is custom
    assert configure(previous) is custom
    assert get_settings() is previous
