"""
Built-in comparators

Registered into the default registry when semcmp is imported:
- number (int and float), str, bytes, Decimal
- date, time, datetime, timedelta
- tuple (any size, NamedTuples included)
- Version (semantic versions, derived like any user aggregate)

bool and Enum members are deliberately absent: symbolic constants have no
inherent order.
"""

from semcmp.comparators.scalars import compare_decimals, register_scalar_comparators
from semcmp.comparators.temporal import (
    compare_dates,
    compare_datetimes,
    compare_timedeltas,
    compare_times,
    register_temporal_comparators,
)
from semcmp.comparators.tuples import compare_tuples, register_tuple_comparator
from semcmp.comparators.version import Version
from semcmp.derive import derive_comparable
from semcmp.kernel.registry import ComparatorRegistry, default_registry


def register_builtin_comparators(registry: ComparatorRegistry) -> ComparatorRegistry:
    """
    Register every built-in comparable kind

    Args:
        registry: Registry to populate (must not contain any built-in yet)

    Returns:
        The same registry, for chaining
    """
    register_scalar_comparators(registry)
    register_temporal_comparators(registry)
    register_tuple_comparator(registry)
    derive_comparable(Version, using="compare", registry=registry)
    return registry


register_builtin_comparators(default_registry)

__all__ = [
    "Version",
    "compare_dates",
    "compare_datetimes",
    "compare_decimals",
    "compare_timedeltas",
    "compare_times",
    "compare_tuples",
    "register_builtin_comparators",
]
