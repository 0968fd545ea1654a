"""
semcmp - Semantic, type-checked comparison and sorting

Python's operators compare dates, versions and decimals structurally or
not at all, and happily mix types that have no common order
(Decimal("2") vs 1.5, date vs datetime, True vs 3). semcmp dispatches every
comparison to a per-type semantic comparator and raises CmpTypeError when
the operands are not mutually comparable.

Example:
    >>> import semcmp
    >>> from datetime import date
    >>> semcmp.sort([date(2019, 1, 1), date(2020, 3, 2), date(2019, 6, 6)])
    [datetime.date(2019, 1, 1), datetime.date(2019, 6, 6), datetime.date(2020, 3, 2)]
    >>> semcmp.max((12, date(2019, 6, 6)), (12, date(2020, 3, 2)))
    (12, datetime.date(2020, 3, 2))
    >>> semcmp.compare(1, 1.0)
    <Ordering.EQ: 'eq'>
"""

from semcmp.algorithms import max, max_by, min, min_by, sort, sort_by
from semcmp.api import compare, eq, gt, gte, lt, lte, max_pair, min_pair
from semcmp.comparators import Version, register_builtin_comparators
from semcmp.derive import comparable, derive_comparable
from semcmp.kernel.errors import (
    CmpError,
    CmpTypeError,
    ComparableNotImplemented,
    ComparatorAlreadyRegistered,
    ComparatorContractViolation,
    EmptyError,
    InvalidDerivation,
    InvalidSortOrder,
    InvalidVersion,
    UnorderedValue,
)
from semcmp.kernel.ordering import Ordering, SortOrder
from semcmp.kernel.registry import ComparatorRegistry, default_registry, register_comparator

__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Pairwise
    "compare",
    "eq",
    "lt",
    "gt",
    "lte",
    "gte",
    "max_pair",
    "min_pair",
    # Collections
    "sort",
    "sort_by",
    "max",
    "min",
    "max_by",
    "min_by",
    # Extension
    "comparable",
    "derive_comparable",
    "register_comparator",
    "register_builtin_comparators",
    "ComparatorRegistry",
    "default_registry",
    # Types
    "Ordering",
    "SortOrder",
    "Version",
    # Errors
    "CmpError",
    "CmpTypeError",
    "ComparableNotImplemented",
    "ComparatorAlreadyRegistered",
    "ComparatorContractViolation",
    "EmptyError",
    "InvalidDerivation",
    "InvalidSortOrder",
    "InvalidVersion",
    "UnorderedValue",
]
