"""
Fast-path scalar kernel

Numbers, text and bytes are the highest-traffic comparable kinds, and the
interpreter already orders them correctly. For same-kind operands we use the
native operators directly and skip the registry.

Kinds are matched on the exact type: bool and int/str enums are symbolic
constants, not numbers or text, so they never take the fast path.
"""

from enum import Enum
from typing import Any

from semcmp.kernel.errors import UnorderedValue
from semcmp.kernel.ordering import Ordering


class ScalarKind(str, Enum):
    """Primitive kinds eligible for the fast path"""

    NUMBER = "number"  # int and float compare by magnitude
    TEXT = "text"
    BYTES = "bytes"


_SCALAR_KINDS: dict[type, ScalarKind] = {
    int: ScalarKind.NUMBER,
    float: ScalarKind.NUMBER,
    str: ScalarKind.TEXT,
    bytes: ScalarKind.BYTES,
}


def scalar_kind(value: Any) -> ScalarKind | None:
    """Return the fast-path kind of value, or None if it must be dispatched"""
    return _SCALAR_KINDS.get(type(value))


def is_base_type(value: Any) -> bool:
    """True if value is a fast-path scalar"""
    return type(value) in _SCALAR_KINDS


def is_same_base_type(left: Any, right: Any) -> bool:
    """True if both operands are fast-path scalars of the same kind"""
    kind = _SCALAR_KINDS.get(type(left))
    return kind is not None and kind is _SCALAR_KINDS.get(type(right))


def compare_terms(left: Any, right: Any) -> Ordering:
    """
    Three-way comparison using native operators

    Only meaningful when both operands are of one kind whose native ordering
    is semantic (numbers, text, bytes, and the registered value types that
    reuse this for their comparator).

    Returns:
        EQ if left == right, LT if left < right, GT if left > right

    Raises:
        UnorderedValue: If the operands are none of the three (NaN)
    """
    if left == right:
        return Ordering.EQ
    if left < right:
        return Ordering.LT
    if left > right:
        return Ordering.GT
    raise UnorderedValue(left if left != left else right)


def check_ordered(*values: Any) -> None:
    """
    Raise UnorderedValue for the first value that is not equal to itself

    Guards the paths that use native operators directly, where NaN would
    otherwise answer False to every question.
    """
    for value in values:
        if value != value:
            raise UnorderedValue(value)
