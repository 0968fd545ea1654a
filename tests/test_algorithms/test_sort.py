"""
Tests for sort()

Covers both paths: the scalar fast path (numbers, text, bytes) and the
dispatch path (everything else), plus atomic failure on mixed input.
"""

from datetime import date, time
from decimal import Decimal

import pytest

from semcmp.algorithms import sort
from semcmp.kernel.errors import (
    CmpTypeError,
    ComparableNotImplemented,
    InvalidSortOrder,
    UnorderedValue,
)
from semcmp.kernel.ordering import SortOrder


class TestFastPath:
    """Numbers, text and bytes"""

    def test_ascending_and_descending(self) -> None:
        assert sort([3, 1, 2]) == [1, 2, 3]
        assert sort([3, 1, 2], "desc") == [3, 2, 1]
        assert sort([3, 1, 2], SortOrder.DESC) == [3, 2, 1]

    def test_mixed_int_and_float(self) -> None:
        assert sort([2.5, 1, 3, -0.5]) == [-0.5, 1, 2.5, 3]

    def test_text_and_bytes(self) -> None:
        assert sort(["b", "C", "a"]) == ["C", "a", "b"]
        assert sort([b"b", b"a"]) == [b"a", b"b"]

    def test_equal_numbers_keep_input_order(self) -> None:
        result = sort([1.0, 0, 1], "desc")

        assert result == [1.0, 1, 0]
        assert [type(value) for value in result] == [float, int, int]

    def test_foreign_element_raises_with_adjacent_pair(self) -> None:
        with pytest.raises(CmpTypeError) as exc_info:
            sort([3, 1, "2", 4])

        assert exc_info.value.left == 1
        assert exc_info.value.right == "2"

    def test_text_then_bytes(self) -> None:
        with pytest.raises(CmpTypeError):
            sort(["a", b"a"])

    @pytest.mark.parametrize("order", ["asc", "desc"])
    @pytest.mark.parametrize(
        "values", [[1.0, float("nan")], [float("nan"), 1.0], [2, 1, float("nan"), 3]]
    )
    def test_nan_is_rejected_wherever_it_sits(self, values: list, order: str) -> None:
        with pytest.raises(UnorderedValue):
            sort(values, order)

    def test_nan_inside_tuples_is_rejected(self) -> None:
        with pytest.raises(UnorderedValue):
            sort([(1, 2.0), (1, float("nan"))])


class TestDispatchPath:
    """Registered non-scalar kinds"""

    def test_dates_sort_chronologically(self, chronological_dates: list[date]) -> None:
        shuffled = [chronological_dates[2], chronological_dates[0], chronological_dates[1]]

        assert sort(shuffled) == chronological_dates
        assert sort(shuffled, "desc") == chronological_dates[::-1]

    def test_tuples(self) -> None:
        assert sort([(2, "a"), (1, "b"), (1, "a")]) == [(1, "a"), (1, "b"), (2, "a")]

    def test_decimals(self) -> None:
        assert sort([Decimal("1.10"), Decimal("1.9"), Decimal("-1")]) == [
            Decimal("-1"),
            Decimal("1.10"),
            Decimal("1.9"),
        ]

    def test_nil_among_dates(self) -> None:
        first, second = date(2020, 3, 2), date(2019, 6, 6)

        with pytest.raises(CmpTypeError) as exc_info:
            sort([first, None, second])

        assert exc_info.value.left == first
        assert exc_info.value.right is None

    def test_descending_surfaces_the_same_error(self) -> None:
        values = [time(10), time(9), None]

        for order in ("asc", "desc"):
            with pytest.raises(CmpTypeError) as exc_info:
                sort(values, order)
            assert exc_info.value.left == time(9)
            assert exc_info.value.right is None

    def test_mismatched_tuple_sizes(self) -> None:
        with pytest.raises(CmpTypeError):
            sort([(1, 2), (1, 2, 3)])


class TestEdgeCases:
    """Empty, single-element and unusual inputs"""

    def test_empty(self) -> None:
        assert sort([]) == []
        assert sort([], "desc") == []

    def test_single_value(self) -> None:
        assert sort([date(2020, 1, 1)]) == [date(2020, 1, 1)]

    def test_single_unregistered_value(self) -> None:
        with pytest.raises(ComparableNotImplemented):
            sort([None])

    def test_unregistered_head(self) -> None:
        with pytest.raises(ComparableNotImplemented):
            sort([object(), 1])

    def test_accepts_sets_generators_and_views(self) -> None:
        assert sort({3, 1, 2}) == [1, 2, 3]
        assert sort(n * n for n in (3, -1, 2)) == [1, 4, 9]
        assert sort({"b": 1, "a": 2}.keys()) == ["a", "b"]
        assert sort(frozenset({date(2020, 1, 1), date(2019, 1, 1)})) == [
            date(2019, 1, 1),
            date(2020, 1, 1),
        ]

    def test_input_is_not_modified(self) -> None:
        values = [3, 1, 2]
        result = sort(values)

        assert values == [3, 1, 2]
        assert result is not values

    def test_invalid_order(self) -> None:
        with pytest.raises(InvalidSortOrder) as exc_info:
            sort([1, 2], "descending")

        assert exc_info.value.order == "descending"

    def test_invalid_order_checked_before_input_is_consumed(self) -> None:
        consumed: list[int] = []

        def values():
            for value in (1, 2):
                consumed.append(value)
                yield value

        with pytest.raises(InvalidSortOrder):
            sort(values(), "up")
        assert consumed == []
