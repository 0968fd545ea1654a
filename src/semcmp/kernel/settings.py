"""
Settings - runtime tunables for semcmp

Values come from code (Settings(...)) or from SEMCMP_* environment
variables via Settings.from_env(). The module keeps one active instance;
errors and the CLI read it through get_settings().
"""

import os
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, Field

ENV_PREFIX = "SEMCMP_"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    """
    Library-wide configuration

    None of these change comparison semantics: they only affect diagnostics
    (log output and how much of each operand an error message shows).
    """

    log_level: LogLevel = Field(
        default="WARNING",
        description="Log level applied by configure_logging() callers such as the CLI",
    )

    json_logs: bool = Field(
        default=False,
        description="Render logs as JSON instead of human-readable console lines",
    )

    repr_limit: int = Field(
        default=80,
        ge=10,
        le=10_000,
        description="Maximum characters of each operand shown in error messages",
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "description": "Diagnostic settings for semantic comparison"
        },
    }

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """
        Build settings from SEMCMP_* environment variables

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            Settings with every variable that is present applied on top of
            the defaults

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        for field_name in cls.model_fields:
            raw = env.get(f"{ENV_PREFIX}{field_name.upper()}")
            if raw is not None:
                values[field_name] = raw.upper() if field_name == "log_level" else raw
        return cls.model_validate(values)


# Default global settings instance
default_settings = Settings()

_active_settings: Settings = default_settings


def get_settings() -> Settings:
    """Return the active settings"""
    return _active_settings


def configure(settings: Settings) -> Settings:
    """
    Replace the active settings

    Returns the previous settings so callers (mostly tests) can restore them.
    """
    global _active_settings
    previous = _active_settings
    _active_settings = settings
    return previous
