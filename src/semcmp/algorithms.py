"""
Collection algorithms - sort, sort_by, max, min, max_by, min_by

Safe equivalents of sorted(), max(), min() and their key= variants:
- collections whose first element (or key) is a number, str or bytes take
  a fast path: one linear homogeneity check, then native ordering
- anything else resolves the first element's comparator and checks every
  other element resolves to the same one before it is ordered
- a mixed collection raises CmpTypeError naming the first offending pair;
  nothing is ever returned partially sorted

Any finite iterable works (lists, tuples, sets, generators, dict views).
Results are always new lists; inputs are never modified.

Example:
    >>> sort([3, 1, 2])
    [1, 2, 3]
    >>> sort([3, 1, 2], "desc")
    [3, 2, 1]
    >>> max([1, None, 2])
    Traceback (most recent call last):
    ...
    semcmp.kernel.errors.CmpTypeError: Failed to compare incompatible types - left: 1, right: None
"""

from collections.abc import Callable, Iterable
from functools import cmp_to_key
from operator import itemgetter
from typing import Any, TypeVar

from semcmp.api import max_pair, min_pair
from semcmp.kernel.errors import CmpTypeError, EmptyError, InvalidSortOrder
from semcmp.kernel.ordering import Ordering, SortOrder
from semcmp.kernel.registry import Comparator, ComparatorEntry, default_registry
from semcmp.kernel.terms import ScalarKind, check_ordered, scalar_kind

T = TypeVar("T")

_registry = default_registry
_first_key = itemgetter(0)


def _coerce_order(order: SortOrder | str) -> SortOrder:
    try:
        return SortOrder(order)
    except ValueError:
        raise InvalidSortOrder(order) from None


def _check_callable(key: Any) -> None:
    if not callable(key):
        raise TypeError(f"key must be callable, got {type(key).__name__}")


def _check_scalar_run(values: Iterable[Any], first: Any, kind: ScalarKind) -> None:
    """
    Raise CmpTypeError at the first adjacent pair that leaves the scalar kind,
    or UnorderedValue at the first NaN
    """
    check_ordered(first)
    previous = first
    for value in values:
        if scalar_kind(value) is not kind:
            raise CmpTypeError(previous, value)
        check_ordered(value)
        previous = value


def _check_entry_run(values: Iterable[Any], first: Any, entry: ComparatorEntry) -> None:
    """Raise CmpTypeError at the first adjacent pair that leaves the comparator's kind"""
    resolve = _registry.resolve
    previous = first
    for value in values:
        if resolve(type(value)) is not entry:
            raise CmpTypeError(previous, value)
        previous = value


def _sort_key(entry: ComparatorEntry, order: SortOrder) -> Callable[[Any], Any]:
    compare: Comparator = entry.compare
    if order is SortOrder.ASC:
        return cmp_to_key(lambda left, right: compare(left, right).to_int())
    # Flip polarity rather than reversing an ascending result
    return cmp_to_key(lambda left, right: compare(left, right).reverse().to_int())


def sort(iterable: Iterable[T], order: SortOrder | str = SortOrder.ASC) -> list[T]:
    """
    Sort a homogeneous collection semantically

    Args:
        iterable: Values of one comparable kind
        order: "asc" (default) or "desc"

    Returns:
        A new sorted list

    Raises:
        CmpTypeError: At the first adjacent pair of incompatible values
        ComparableNotImplemented: If the first value has no comparator
        InvalidSortOrder: If order is neither "asc" nor "desc"
        UnorderedValue: If a value is NaN

    Example:
        >>> from datetime import date
        >>> sort([date(2019, 1, 1), date(2020, 3, 2), date(2019, 6, 6)])
        [datetime.date(2019, 1, 1), datetime.date(2019, 6, 6), datetime.date(2020, 3, 2)]
    """
    order = _coerce_order(order)
    items = list(iterable)
    if not items:
        return items

    head = items[0]
    kind = scalar_kind(head)
    if kind is not None:
        _check_scalar_run(items[1:], head, kind)
        return sorted(items, reverse=order is SortOrder.DESC)

    entry = _registry.impl_for(head)
    _check_entry_run(items[1:], head, entry)
    return sorted(items, key=_sort_key(entry, order))


def sort_by(
    iterable: Iterable[T],
    key: Callable[[T], Any],
    order: SortOrder | str = SortOrder.ASC,
) -> list[T]:
    """
    Sort a collection by a semantically comparable key

    key is called exactly once per element. Elements with equal keys keep
    their input order in both directions.

    Args:
        iterable: Elements of any type
        key: Maps an element to a comparable value
        order: "asc" (default) or "desc"

    Returns:
        A new list of the original elements

    Raises:
        CmpTypeError: At the first adjacent pair of incompatible keys
        ComparableNotImplemented: If the first key has no comparator

    Example:
        >>> sort_by([{"x": 3}, {"x": 1}, {"x": 2}], lambda item: item["x"])
        [{'x': 1}, {'x': 2}, {'x': 3}]
    """
    _check_callable(key)
    order = _coerce_order(order)
    keyed = [(key(item), item) for item in iterable]
    if not keyed:
        return []

    keys = [pair[0] for pair in keyed]
    first = keys[0]
    kind = scalar_kind(first)
    if kind is not None:
        _check_scalar_run(keys[1:], first, kind)
        keyed.sort(key=_first_key, reverse=order is SortOrder.DESC)
    else:
        entry = _registry.impl_for(first)
        _check_entry_run(keys[1:], first, entry)
        wrap = _sort_key(entry, order)
        keyed.sort(key=lambda pair: wrap(pair[0]))
    return [item for _, item in keyed]


def _reduce(iterable: Iterable[T], operation: str, keep: Ordering) -> T:
    """
    Linear reduction keeping the running best

    A later value replaces the best only when compare(best, value) is
    `keep` (LT for max, GT for min), so ties keep the earlier value.
    """
    iterator = iter(iterable)
    try:
        best = next(iterator)
    except StopIteration:
        raise EmptyError(operation) from None

    kind = scalar_kind(best)
    if kind is not None:
        check_ordered(best)
        replace_if_greater = keep is Ordering.LT
        for value in iterator:
            if scalar_kind(value) is not kind:
                raise CmpTypeError(best, value)
            check_ordered(value)
            if (value > best) if replace_if_greater else (value < best):
                best = value
        return best

    entry = _registry.impl_for(best)
    compare = entry.compare
    check = _registry.check_same_kind
    for value in iterator:
        check(entry, best, value)
        if compare(best, value) is keep:
            best = value
    return best


def _reduce_by(
    iterable: Iterable[T], key: Callable[[T], Any], operation: str, keep: Ordering
) -> T:
    """Keyed version of _reduce: compares keys, returns the element"""
    _check_callable(key)
    iterator = iter(iterable)
    try:
        best = next(iterator)
    except StopIteration:
        raise EmptyError(operation) from None
    best_key = key(best)

    kind = scalar_kind(best_key)
    if kind is not None:
        check_ordered(best_key)
        replace_if_greater = keep is Ordering.LT
        for item in iterator:
            item_key = key(item)
            if scalar_kind(item_key) is not kind:
                raise CmpTypeError(best_key, item_key)
            check_ordered(item_key)
            if (item_key > best_key) if replace_if_greater else (item_key < best_key):
                best, best_key = item, item_key
        return best

    entry = _registry.impl_for(best_key)
    compare = entry.compare
    check = _registry.check_same_kind
    for item in iterator:
        item_key = key(item)
        check(entry, best_key, item_key)
        if compare(best_key, item_key) is keep:
            best, best_key = item, item_key
    return best


def max(*args: Any) -> Any:
    """
    Largest value - of a collection, or of two values

    Like the builtin, max(iterable) reduces a collection and max(a, b)
    compares a pair. A single tuple argument is a collection.

    Raises:
        EmptyError: If the collection is empty
        CmpTypeError: At the first value incompatible with the running maximum
        ComparableNotImplemented: If the first value has no comparator

    Example:
        >>> max([1, 3, 2])
        3
        >>> max(1, 1.0)
        1
    """
    if len(args) == 2:
        return max_pair(args[0], args[1])
    if len(args) != 1:
        raise TypeError(f"max expected 1 or 2 arguments, got {len(args)}")
    return _reduce(args[0], "max", Ordering.LT)


def min(*args: Any) -> Any:
    """
    Smallest value - of a collection, or of two values

    Like the builtin, min(iterable) reduces a collection and min(a, b)
    compares a pair. A single tuple argument is a collection.

    Raises:
        EmptyError: If the collection is empty
        CmpTypeError: At the first value incompatible with the running minimum
        ComparableNotImplemented: If the first value has no comparator
    """
    if len(args) == 2:
        return min_pair(args[0], args[1])
    if len(args) != 1:
        raise TypeError(f"min expected 1 or 2 arguments, got {len(args)}")
    return _reduce(args[0], "min", Ordering.GT)


def max_by(iterable: Iterable[T], key: Callable[[T], Any]) -> T:
    """
    Element with the largest key; the first one wins on ties

    Raises:
        EmptyError: If the collection is empty
        CmpTypeError: At the first key incompatible with the running maximum
    """
    return _reduce_by(iterable, key, "max_by", Ordering.LT)


def min_by(iterable: Iterable[T], key: Callable[[T], Any]) -> T:
    """
    Element with the smallest key; the first one wins on ties

    Raises:
        EmptyError: If the collection is empty
        CmpTypeError: At the first key incompatible with the running minimum
    """
    return _reduce_by(iterable, key, "min_by", Ordering.GT)
