"""
Temporal comparators - date, time, datetime, timedelta

Python's datetime already orders these chronologically; what it gets wrong
is mixing them: a datetime IS a date (subclass), yet date == datetime is
quietly False while date < datetime raises, and naive vs aware values raise
"can't compare offset-naive and offset-aware datetimes". Each class is its
own comparable kind here, and naive vs aware is treated as two domains.

Subclasses resolve to their parent's kind, so third-party timestamp types
built on datetime sort with plain datetimes.
"""

from datetime import date, datetime, time, timedelta

from semcmp.kernel.errors import CmpTypeError
from semcmp.kernel.ordering import Ordering
from semcmp.kernel.registry import ComparatorRegistry
from semcmp.kernel.terms import compare_terms


def _is_aware(value: datetime | time) -> bool:
    return value.utcoffset() is not None


def compare_dates(left: date, right: date) -> Ordering:
    """Chronological order of calendar dates"""
    return compare_terms(left, right)


def compare_datetimes(left: datetime, right: datetime) -> Ordering:
    """
    Chronological order of datetimes

    Aware datetimes compare by instant, so 12:00+02:00 == 10:00+00:00.

    Raises:
        CmpTypeError: If one operand is naive and the other aware
    """
    if _is_aware(left) is not _is_aware(right):
        raise CmpTypeError(left, right)
    return compare_terms(left, right)


def compare_times(left: time, right: time) -> Ordering:
    """
    Order of times of day

    Raises:
        CmpTypeError: If one operand is naive and the other aware
    """
    if _is_aware(left) is not _is_aware(right):
        raise CmpTypeError(left, right)
    return compare_terms(left, right)


def compare_timedeltas(left: timedelta, right: timedelta) -> Ordering:
    """Order of durations"""
    return compare_terms(left, right)


def register_temporal_comparators(registry: ComparatorRegistry) -> None:
    """Register date, time, datetime and timedelta comparators"""
    registry.register(date, compare_dates, name="date", subclasses=True, origin="builtin")
    registry.register(
        datetime, compare_datetimes, name="datetime", subclasses=True, origin="builtin"
    )
    registry.register(time, compare_times, name="time", subclasses=True, origin="builtin")
    registry.register(
        timedelta, compare_timedeltas, name="timedelta", subclasses=True, origin="builtin"
    )
