"""
Composite comparator for tuples

Tuples of the same size compare element by element, first difference wins.
Unlike native tuple ordering, the remaining elements are still compared
after the result is decided, so (1, "a") vs (2, None) raises CmpTypeError
instead of quietly returning LT.
"""

from typing import Any

from semcmp.kernel.errors import CmpTypeError
from semcmp.kernel.ordering import Ordering
from semcmp.kernel.registry import Comparator, ComparatorRegistry, default_registry


def tuple_comparator(registry: ComparatorRegistry) -> Comparator:
    """Build a tuple comparator whose elements resolve in registry"""
    compare = registry.compare

    def compare_tuples(left: tuple[Any, ...], right: tuple[Any, ...]) -> Ordering:
        """
        Lexicographic comparison of two tuples of equal size

        Raises:
            CmpTypeError: With the whole tuples as payload if sizes differ,
                          or with the offending elements if any pair is
                          incompatible
        """
        if len(left) != len(right):
            raise CmpTypeError(left, right)

        result = Ordering.EQ
        for left_item, right_item in zip(left, right):
            if result is Ordering.EQ:
                result = compare(left_item, right_item)
            else:
                # Decided already - the remaining pairs must still be compatible
                compare(left_item, right_item)
        return result

    return compare_tuples


compare_tuples = tuple_comparator(default_registry)


def register_tuple_comparator(registry: ComparatorRegistry) -> None:
    """Register the tuple comparator (NamedTuples included)"""
    comparator = compare_tuples if registry is default_registry else tuple_comparator(registry)
    registry.register(tuple, comparator, name="tuple", subclasses=True, origin="builtin")
