"""
Value parsing for the CLI

Command-line values arrive as strings; each ValueKind turns them into the
Python type whose semantic order the user asked for. "auto" guesses per
value, so a mixed input list surfaces as a CmpTypeError from the library
rather than being coerced.
"""

from collections.abc import Callable, Iterable
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from semcmp.comparators.version import Version
from semcmp.kernel.errors import InvalidVersion


class ValueKind(str, Enum):
    """How CLI arguments are interpreted"""

    AUTO = "auto"
    NUMBER = "number"
    TEXT = "text"
    DECIMAL = "decimal"
    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"
    VERSION = "version"


def parse_number(text: str) -> int | float:
    """int when the text is integral, float otherwise"""
    try:
        return int(text)
    except ValueError:
        return float(text)


def parse_decimal(text: str) -> Decimal:
    try:
        return Decimal(text)
    except InvalidOperation:
        raise ValueError(f"invalid decimal {text!r}") from None


def parse_version(text: str) -> Version:
    try:
        return Version.parse(text)
    except InvalidVersion as e:
        raise ValueError(str(e)) from None


def parse_auto(text: str) -> Any:
    """
    Best guess: int, float, datetime, date, time, version, then text

    Datetimes are tried before dates so "2020-03-02T10:00" keeps its time.
    """
    candidates: list[Callable[[str], Any]] = [
        int,
        float,
        _parse_iso_datetime,
        date.fromisoformat,
        time.fromisoformat,
        Version.parse,
    ]
    for parse in candidates:
        try:
            return parse(text)
        except ValueError:
            continue
    return text


def _parse_iso_datetime(text: str) -> datetime:
    # date.fromisoformat would also accept a bare date; require a time part
    if "T" not in text and " " not in text.strip():
        raise ValueError(f"not a datetime: {text!r}")
    return datetime.fromisoformat(text)


_PARSERS: dict[ValueKind, Callable[[str], Any]] = {
    ValueKind.AUTO: parse_auto,
    ValueKind.NUMBER: parse_number,
    ValueKind.TEXT: str,
    ValueKind.DECIMAL: parse_decimal,
    ValueKind.DATE: date.fromisoformat,
    ValueKind.TIME: time.fromisoformat,
    ValueKind.DATETIME: datetime.fromisoformat,
    ValueKind.VERSION: parse_version,
}


def parse_value(text: str, kind: ValueKind) -> Any:
    """
    Parse one CLI value

    Raises:
        ValueError: If text is not a valid value of the requested kind
    """
    return _PARSERS[kind](text)


def parse_values(texts: Iterable[str], kind: ValueKind) -> list[Any]:
    """Parse many CLI values, preserving order"""
    return [parse_value(text, kind) for text in texts]


def render_value(value: Any) -> str:
    """Format a value for output (ISO for temporal values)"""
    if isinstance(value, (date, time)):
        return value.isoformat()
    return str(value)
