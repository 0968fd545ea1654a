"""
Ordering primitives - the three-valued comparison result and sort direction

Every comparator in semcmp returns an Ordering. Sort functions take a
SortOrder (or its string value) to pick the direction.

Fun fact: C's strcmp returns "less than zero, zero, or greater than zero" -
not -1/0/1 - which is why so many hand-written comparators break when someone
tests for == -1. A closed enum removes that whole class of bug.
"""

from enum import Enum


class Ordering(str, Enum):
    """
    Result of a three-way comparison

    LT: left sorts before right
    EQ: left and right are semantically equal
    GT: left sorts after right
    """

    LT = "lt"
    EQ = "eq"
    GT = "gt"

    def reverse(self) -> "Ordering":
        """Flip polarity (LT <-> GT), EQ stays EQ"""
        if self is Ordering.LT:
            return Ordering.GT
        if self is Ordering.GT:
            return Ordering.LT
        return Ordering.EQ

    def to_int(self) -> int:
        """Map to -1/0/1 for functools.cmp_to_key"""
        return _TO_INT[self]


_TO_INT = {Ordering.LT: -1, Ordering.EQ: 0, Ordering.GT: 1}


class SortOrder(str, Enum):
    """Sort direction accepted by sort() and sort_by()"""

    ASC = "asc"
    DESC = "desc"
