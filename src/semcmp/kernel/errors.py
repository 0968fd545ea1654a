"""
Custom exceptions for semcmp

Well-defined error hierarchy enables precise error handling: callers can
tell an incompatible pair (CmpTypeError) from a missing comparator
(ComparableNotImplemented) from an empty reduction (EmptyError).

Fun fact: Python 2 happily evaluated 2 < "1" (numbers sorted before every
other type). Python 3 raises TypeError instead. We go one step further and
say which two operands were at fault.
"""

import reprlib
from typing import Any

from semcmp.kernel.settings import get_settings


def short_repr(value: Any) -> str:
    """repr() of an operand, truncated to the configured repr_limit"""
    limit = get_settings().repr_limit
    shortener = reprlib.Repr()
    shortener.maxstring = limit
    shortener.maxother = limit
    shortener.maxlong = limit
    text = shortener.repr(value)
    if len(text) > limit:
        text = text[: limit - 3] + "..."
    return text


class CmpError(Exception):
    """Base exception for all semcmp errors"""

    pass


class CmpTypeError(CmpError, TypeError):
    """
    Raised when two comparable values belong to incompatible types

    Covers different registered kinds, mismatched tuple sizes, different
    aggregate classes, and a registered value against an unregistered one.
    Both operands are kept for diagnostics.
    """

    def __init__(self, left: Any, right: Any) -> None:
        self.left = left
        self.right = right
        super().__init__(
            f"Failed to compare incompatible types - "
            f"left: {short_repr(left)}, right: {short_repr(right)}"
        )


class ComparableNotImplemented(CmpError, TypeError):
    """
    Raised when a value's type has no registered comparator at all

    This is an extension-point gap (a missing derivation or registration),
    not an incompatible pair. Only the left operand can trigger it.
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        self.value_type = type(value)
        super().__init__(
            f"Comparable not implemented for {short_repr(value)} "
            f"of type {self.value_type.__qualname__}"
        )


class EmptyError(CmpError, ValueError):
    """Raised when max/min/max_by/min_by receive an empty collection"""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}() arg is an empty collection")


class InvalidDerivation(CmpError, ValueError):
    """
    Raised at declaration time when a comparator cannot be derived

    The class is never registered when this is raised, so a bad declaration
    can't surface later as a confusing comparison failure.
    """

    def __init__(self, target: type, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(
            f"Cannot derive a comparator for {target.__qualname__}: {reason}\n\n"
            "Pass `using` as either:\n"
            '  - using="compare" (or a callable) to delegate to a three-way '
            "compare(left, right) function returning an Ordering\n"
            '  - using=["field1", "field2"] to compare the listed fields in order'
        )


class ComparatorContractViolation(CmpError):
    """Raised when a delegated compare function returns something other than an Ordering"""

    def __init__(self, target: type, result: Any) -> None:
        self.target = target
        self.result = result
        super().__init__(
            f"{target.__qualname__} compare function returned {short_repr(result)}, "
            "expected Ordering.LT, Ordering.EQ or Ordering.GT"
        )


class ComparatorAlreadyRegistered(CmpError):
    """
    Raised when registering a class that already has a comparator

    Registrations are append-only - an existing comparator is never
    replaced, so every comparison in the process sees the same order.
    """

    def __init__(self, cls: type, existing: str) -> None:
        self.cls = cls
        self.existing = existing
        super().__init__(
            f"{cls.__qualname__} already has a registered comparator ({existing})"
        )


class InvalidSortOrder(CmpError, ValueError):
    """Raised when a sort direction is neither 'asc' nor 'desc'"""

    def __init__(self, order: Any) -> None:
        self.order = order
        super().__init__(f"Invalid sort order {order!r}, expected 'asc' or 'desc'")


class InvalidVersion(CmpError, ValueError):
    """Raised when a string is not a valid semantic version"""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid semantic version {text!r}")


class UnorderedValue(CmpError, ValueError):
    """
    Raised when a value has no place in its kind's total order

    Float NaN is the case in practice: it is neither equal to, less than nor
    greater than anything, itself included, so no answer would be meaningful.
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Unordered value {short_repr(value)} cannot be compared")
