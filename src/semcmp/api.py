"""
Boolean and pairwise comparison API

Safe, semantic replacements for ==, <, >, <=, >=, min(a, b) and max(a, b):
- same-kind numbers, text and bytes use the native operators directly
- everything else goes through the comparator registry
- incompatible operands raise CmpTypeError instead of returning nonsense

Example:
    >>> from datetime import date
    >>> gt(date(2020, 3, 2), date(2019, 6, 6))
    True
    >>> lte(1, 1.0)
    True
    >>> lte(2, "1")
    Traceback (most recent call last):
    ...
    semcmp.kernel.errors.CmpTypeError: Failed to compare incompatible types - left: 2, right: '1'
"""

from typing import Any, TypeVar

from semcmp.kernel.ordering import Ordering
from semcmp.kernel.registry import default_registry
from semcmp.kernel.terms import check_ordered, compare_terms, is_same_base_type

T = TypeVar("T")

_dispatch = default_registry.dispatch


def compare(left: Any, right: Any) -> Ordering:
    """
    Three-way semantic comparison

    Returns:
        Ordering.LT, Ordering.EQ or Ordering.GT

    Raises:
        CmpTypeError: If the operands are of incompatible types
        ComparableNotImplemented: If left's type has no comparator
        UnorderedValue: If an operand is NaN
    """
    if is_same_base_type(left, right):
        return compare_terms(left, right)
    return _dispatch(left, right)


def eq(left: Any, right: Any) -> bool:
    """Semantic ==, only for compatible operands"""
    if is_same_base_type(left, right):
        check_ordered(left, right)
        return left == right
    return _dispatch(left, right) is Ordering.EQ


def lt(left: Any, right: Any) -> bool:
    """Semantic <, only for compatible operands"""
    if is_same_base_type(left, right):
        check_ordered(left, right)
        return left < right
    return _dispatch(left, right) is Ordering.LT


def gt(left: Any, right: Any) -> bool:
    """Semantic >, only for compatible operands"""
    if is_same_base_type(left, right):
        check_ordered(left, right)
        return left > right
    return _dispatch(left, right) is Ordering.GT


def lte(left: Any, right: Any) -> bool:
    """Semantic <=, only for compatible operands"""
    if is_same_base_type(left, right):
        check_ordered(left, right)
        return left <= right
    return _dispatch(left, right) is not Ordering.GT


def gte(left: Any, right: Any) -> bool:
    """Semantic >=, only for compatible operands"""
    if is_same_base_type(left, right):
        check_ordered(left, right)
        return left >= right
    return _dispatch(left, right) is not Ordering.LT


def max_pair(left: T, right: T) -> T:
    """
    Larger of two compatible values

    Ties return left, so max_pair(1, 1.0) is 1.
    """
    if is_same_base_type(left, right):
        check_ordered(left, right)
        return right if left < right else left
    return right if _dispatch(left, right) is Ordering.LT else left


def min_pair(left: T, right: T) -> T:
    """
    Smaller of two compatible values

    Ties return left, so min_pair(1, 1.0) is 1.
    """
    if is_same_base_type(left, right):
        check_ordered(left, right)
        return right if left > right else left
    return right if _dispatch(left, right) is Ordering.GT else left
