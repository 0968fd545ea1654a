"""
Scalar comparators - numbers, text, bytes and Decimal

The registry entries for numbers, text and bytes exist so dispatch agrees
with the fast path: the kernel never consults them for same-kind pairs, but
they decide what happens for mixed pairs and for values coming through
tuples and derived fields.

Decimal is a separate domain on purpose. Decimal("2") vs 1.0 is a TypeError
here, because mixing exact and binary floating point silently is exactly the
kind of bug semantic comparison exists to catch.
"""

from decimal import Decimal

from semcmp.kernel.ordering import Ordering
from semcmp.kernel.registry import ComparatorRegistry
from semcmp.kernel.terms import compare_terms


def compare_decimals(left: Decimal, right: Decimal) -> Ordering:
    """
    Numeric comparison of two Decimals

    Precision is ignored (Decimal("1.0") == Decimal("1")). NaN operands
    raise decimal.InvalidOperation, as Decimal itself does for ordering.
    """
    return compare_terms(left, right)


def register_scalar_comparators(registry: ComparatorRegistry) -> None:
    """Register number, text, bytes and Decimal comparators"""
    # int and float share one entry so they are mutually comparable
    registry.register((int, float), compare_terms, name="number", origin="builtin")
    registry.register(str, compare_terms, name="str", origin="builtin")
    registry.register(bytes, compare_terms, name="bytes", origin="builtin")
    registry.register(Decimal, compare_decimals, name="Decimal", origin="builtin")
