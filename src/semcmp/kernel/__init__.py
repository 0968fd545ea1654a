"""
Kernel - orderings, errors, the scalar fast path and the comparator registry

Everything above the kernel (pairwise API, collection algorithms,
derivation, built-in comparators) is expressed in terms of these pieces.
"""

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
from semcmp.kernel.registry import (
    Comparator,
    ComparatorEntry,
    ComparatorRegistry,
    default_registry,
    register_comparator,
)
from semcmp.kernel.settings import Settings, configure, default_settings, get_settings
from semcmp.kernel.terms import (
    ScalarKind,
    check_ordered,
    compare_terms,
    is_base_type,
    is_same_base_type,
    scalar_kind,
)

__all__ = [
    # Ordering
    "Ordering",
    "SortOrder",
    # Fast path
    "ScalarKind",
    "check_ordered",
    "compare_terms",
    "is_base_type",
    "is_same_base_type",
    "scalar_kind",
    # Registry
    "Comparator",
    "ComparatorEntry",
    "ComparatorRegistry",
    "default_registry",
    "register_comparator",
    # Settings
    "Settings",
    "configure",
    "default_settings",
    "get_settings",
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
