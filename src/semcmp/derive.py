"""
Derivation - opting aggregate classes into semantic comparison

Two strategies, chosen once when the class is declared:

1. Delegate: the class already knows how to compare itself
       @comparable(using="compare")
       class Version:
           def compare(self, other) -> Ordering: ...

2. Fields: compare the listed fields in order, first difference wins
       @comparable(using=["date", "id"])
       @dataclass
       class Event:
           id: int
           date: date

Declarations are validated immediately - an unknown field or a missing
compare function raises InvalidDerivation at class definition time, never
at the first comparison. A derived class only compares with instances of
exactly the same class.
"""

import dataclasses
import inspect
from collections.abc import Callable, Sequence
from operator import attrgetter
from typing import Any, TypeVar

from pydantic import BaseModel

from semcmp.kernel.errors import ComparatorContractViolation, InvalidDerivation
from semcmp.kernel.logging import get_logger
from semcmp.kernel.ordering import Ordering
from semcmp.kernel.registry import Comparator, ComparatorRegistry, default_registry

logger = get_logger(__name__)

C = TypeVar("C", bound=type)

# Delegate mode: method name or function; fields mode: ordered field names
Using = str | Callable[[Any, Any], Any] | Sequence[str]


def declared_fields(cls: type) -> tuple[str, ...]:
    """
    Field names declared by a class, in declaration order

    Understands dataclasses, pydantic models, NamedTuples and attrs classes,
    and falls back to annotations and __slots__ along the MRO. Returns an
    empty tuple when nothing is declared.
    """
    if dataclasses.is_dataclass(cls):
        return tuple(field.name for field in dataclasses.fields(cls))
    if issubclass(cls, BaseModel):
        return tuple(cls.model_fields)
    if issubclass(cls, tuple) and hasattr(cls, "_fields"):
        return tuple(cls._fields)
    attrs_fields = getattr(cls, "__attrs_attrs__", None)
    if attrs_fields is not None:
        return tuple(attribute.name for attribute in attrs_fields)

    names: list[str] = []
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        names.extend(inspect.get_annotations(klass))
        slots = klass.__dict__.get("__slots__", ())
        names.extend((slots,) if isinstance(slots, str) else slots)
    return tuple(dict.fromkeys(name for name in names if not name.startswith("__")))


def _reject(cls: type, reason: str) -> InvalidDerivation:
    logger.error("Comparator derivation rejected", comparable=cls.__qualname__, reason=reason)
    return InvalidDerivation(cls, reason)


def _delegate_comparator(cls: type, function: Callable[[Any, Any], Any]) -> Comparator:
    def compare_delegated(left: Any, right: Any) -> Ordering:
        result = function(left, right)
        if isinstance(result, Ordering):
            return result
        raise ComparatorContractViolation(cls, result)

    return compare_delegated


def _fields_comparator(fields: tuple[str, ...], registry: ComparatorRegistry) -> Comparator:
    compare = registry.compare
    getters = tuple(attrgetter(name) for name in fields)

    def compare_fields(left: Any, right: Any) -> Ordering:
        for get in getters:
            result = compare(get(left), get(right))
            if result is not Ordering.EQ:
                return result
        return Ordering.EQ

    return compare_fields


def _validate_fields(cls: type, using: Sequence[Any]) -> tuple[str, ...]:
    fields = tuple(using)
    if not fields:
        raise _reject(cls, "the field list is empty")
    for name in fields:
        if not isinstance(name, str):
            raise _reject(cls, f"field names must be strings, got {name!r}")
    duplicates = sorted({name for name in fields if fields.count(name) > 1})
    if duplicates:
        raise _reject(cls, f"duplicate fields {duplicates}")

    known = declared_fields(cls)
    if not known:
        raise _reject(cls, "no declared fields found (use a dataclass, pydantic model, "
                      "NamedTuple, attrs class or annotated attributes)")
    unknown = [name for name in fields if name not in known]
    if unknown:
        raise _reject(cls, f"unknown fields {unknown} (declared: {list(known)})")
    return fields


def derive_comparable(
    cls: C,
    *,
    using: Using | None = None,
    registry: ComparatorRegistry = default_registry,
) -> C:
    """
    Derive and register a comparator for an aggregate class

    Args:
        cls: The class to make comparable
        using: A method name (usually "compare") or a function taking
               (left, right) and returning an Ordering - delegate mode;
               or a list/tuple of field names - fields mode
        registry: Registry to register into

    Returns:
        cls, unchanged, so this can be used as a decorator body

    Raises:
        InvalidDerivation: If `using` is missing or invalid for cls
        ComparatorAlreadyRegistered: If cls already has a comparator
    """
    if not isinstance(cls, type):
        raise TypeError(f"derive_comparable() expects a class, got {cls!r}")

    if using is None:
        raise _reject(cls, "a `using` option is required")

    if isinstance(using, str):
        function = getattr(cls, using, None)
        if function is None or not callable(function):
            raise _reject(cls, f"{cls.__qualname__}.{using} is not a callable attribute")
        comparator = _delegate_comparator(cls, function)
        entry = registry.register(
            cls, comparator, name=cls.__qualname__, origin="delegate"
        )
    elif isinstance(using, (list, tuple)):
        fields = _validate_fields(cls, using)
        entry = registry.register(
            cls,
            _fields_comparator(fields, registry),
            name=cls.__qualname__,
            origin="fields",
            fields=fields,
        )
    elif callable(using):
        entry = registry.register(
            cls, _delegate_comparator(cls, using), name=cls.__qualname__, origin="delegate"
        )
    else:
        raise _reject(cls, f"unsupported using={using!r}")

    logger.debug(
        "Comparable derived",
        comparable=entry.name,
        origin=entry.origin,
        fields=list(entry.field_names),
    )
    return cls


def comparable(
    *, using: Using, registry: ComparatorRegistry = default_registry
) -> Callable[[C], C]:
    """
    Class decorator form of derive_comparable()

    Example:
        >>> @comparable(using=["date", "id"])
        ... @dataclass
        ... class Event:
        ...     id: int
        ...     date: date
    """

    def decorate(cls: C) -> C:
        return derive_comparable(cls, using=using, registry=registry)

    return decorate
