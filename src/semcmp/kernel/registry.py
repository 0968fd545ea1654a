"""
Comparable dispatch protocol - the comparator registry

Every comparable kind has exactly one ComparatorEntry. Dispatch resolves
the entry of the LEFT operand, checks the right operand resolves to the same
entry, and only then calls the comparator. Comparators therefore never see a
cross-kind pair.

Registration happens once per class - built-ins when semcmp is imported,
aggregates when they are declared - and is append-only afterwards.

Fun fact: Python's own functools.singledispatch uses the same trick of
walking the MRO and memoising the answer per class. We don't use it directly
because a comparable kind has to be checked for BOTH operands, and not every
subclass is welcome (bool is an int, but True is not a number here).
"""

import threading
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any, Literal

from pydantic import BaseModel, Field

from semcmp.kernel.errors import (
    CmpTypeError,
    ComparableNotImplemented,
    ComparatorAlreadyRegistered,
)
from semcmp.kernel.logging import get_logger
from semcmp.kernel.ordering import Ordering
from semcmp.kernel.terms import compare_terms, is_same_base_type

logger = get_logger(__name__)

# Type aliases for clarity
Comparator = Callable[[Any, Any], Ordering]
EntryOrigin = Literal["builtin", "delegate", "fields", "custom"]


class ComparatorEntry(BaseModel):
    """
    One registered comparable kind

    Attributes:
        name: Display name of the kind (e.g. "number", "date", "Event")
        types: Classes bound to this entry
        compare: Three-way comparator, only ever called with two operands
                 that both resolve to this entry
        subclasses: Whether subclasses of the bound classes resolve here
        origin: How the comparator was produced
        field_names: Field list for fields-mode derivations
    """

    name: str
    types: tuple[type, ...]
    compare: Comparator
    subclasses: bool = False
    origin: EntryOrigin = "custom"
    field_names: tuple[str, ...] = Field(default=())

    model_config = {"frozen": True, "arbitrary_types_allowed": True}


class ComparatorRegistry:
    """
    Process-wide mapping from classes to comparators

    Lookups are lock-free; registration takes a lock and clears the
    resolution memo. Once start-up registration is over the registry is
    effectively read-only, so concurrent comparisons need no coordination.
    """

    def __init__(self) -> None:
        """Initialize an empty registry"""
        self._entries: dict[type, ComparatorEntry] = {}
        self._resolved: dict[type, ComparatorEntry | None] = {}
        self._lock = threading.Lock()

    def register(
        self,
        types: type | Iterable[type],
        compare: Comparator,
        *,
        name: str | None = None,
        subclasses: bool = False,
        origin: EntryOrigin = "custom",
        fields: Iterable[str] = (),
    ) -> ComparatorEntry:
        """
        Bind a comparator to one or more classes

        All classes passed in one call share a single entry, which makes
        them mutually comparable (int and float are registered this way).

        Args:
            types: Class or classes to bind
            compare: Three-way comparator returning an Ordering
            name: Display name (defaults to the first class's qualified name)
            subclasses: Resolve subclasses of the bound classes to this entry
            origin: How the comparator was produced
            fields: Field list for fields-mode derivations

        Returns:
            The new entry

        Raises:
            ComparatorAlreadyRegistered: If any class is already bound
        """
        classes = (types,) if isinstance(types, type) else tuple(types)
        if not classes:
            raise ValueError("register() needs at least one class")

        entry = ComparatorEntry(
            name=name or classes[0].__qualname__,
            types=classes,
            compare=compare,
            subclasses=subclasses,
            origin=origin,
            field_names=tuple(fields),
        )

        with self._lock:
            for cls in classes:
                existing = self._entries.get(cls)
                if existing is not None:
                    logger.error(
                        "Comparator registration failed - already registered",
                        comparable=cls.__qualname__,
                        existing=existing.name,
                    )
                    raise ComparatorAlreadyRegistered(cls, existing.name)
            for cls in classes:
                self._entries[cls] = entry
            self._resolved = {}

        logger.debug(
            "Comparator registered",
            comparable=entry.name,
            types=[cls.__qualname__ for cls in classes],
            origin=origin,
            subclasses=subclasses,
        )
        return entry

    def resolve(self, cls: type) -> ComparatorEntry | None:
        """
        Find the entry for a class

        Exact binding first, then the nearest ancestor whose entry accepts
        subclasses. Answers are memoised per class.
        """
        try:
            return self._resolved[cls]
        except KeyError:
            pass

        entry = self._entries.get(cls)
        if entry is None:
            for ancestor in cls.__mro__[1:]:
                candidate = self._entries.get(ancestor)
                if candidate is not None and candidate.subclasses:
                    entry = candidate
                    break

        self._resolved[cls] = entry
        return entry

    def resolve_value(self, value: Any) -> ComparatorEntry | None:
        """Find the entry for a value's class"""
        return self.resolve(type(value))

    def impl_for(self, value: Any) -> ComparatorEntry:
        """
        Find the entry for a value, failing if there is none

        Raises:
            ComparableNotImplemented: If the value's class has no comparator
        """
        entry = self.resolve(type(value))
        if entry is None:
            raise ComparableNotImplemented(value)
        return entry

    def is_registered(self, cls: type) -> bool:
        """True if values of cls resolve to a comparator"""
        return self.resolve(cls) is not None

    def entries(self) -> Mapping[type, ComparatorEntry]:
        """Read-only view of the explicit class bindings"""
        return MappingProxyType(self._entries)

    def kinds(self) -> list[ComparatorEntry]:
        """Distinct entries in registration order"""
        seen: dict[int, ComparatorEntry] = {}
        for entry in self._entries.values():
            seen.setdefault(id(entry), entry)
        return list(seen.values())

    def dispatch(self, left: Any, right: Any) -> Ordering:
        """
        Compare two values through their registered comparator

        The left operand drives resolution: an unregistered left value is
        ComparableNotImplemented, while an unregistered or different-kind
        right value is CmpTypeError.

        Raises:
            ComparableNotImplemented: If left has no comparator
            CmpTypeError: If right does not resolve to left's comparator
        """
        entry = self.impl_for(left)
        self.check_same_kind(entry, left, right)
        return entry.compare(left, right)

    def compare(self, left: Any, right: Any) -> Ordering:
        """
        Full comparison against this registry: scalar fast path, then dispatch

        Composite comparators (tuples, derived fields) use this for their
        elements so nested values resolve in the same registry.
        """
        if is_same_base_type(left, right):
            return compare_terms(left, right)
        return self.dispatch(left, right)

    def check_same_kind(self, entry: ComparatorEntry, left: Any, right: Any) -> None:
        """Raise CmpTypeError(left, right) unless right resolves to entry"""
        if self.resolve(type(right)) is not entry:
            raise CmpTypeError(left, right)


# Global default registry
default_registry = ComparatorRegistry()


def register_comparator(
    types: type | Iterable[type],
    compare: Comparator,
    *,
    name: str | None = None,
    subclasses: bool = False,
) -> ComparatorEntry:
    """
    Register a hand-written comparator in the default registry

    For existing classes you don't control. For your own classes prefer
    derive_comparable() / @comparable.
    """
    return default_registry.register(
        types, compare, name=name, subclasses=subclasses, origin="custom"
    )
