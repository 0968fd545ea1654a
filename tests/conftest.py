"""
Pytest configuration and shared fixtures

The default registry is process-wide and append-only, so tests that need
to register throwaway classes get a private registry from the fixtures here.
"""

import random
from datetime import date
from typing import Iterator

import pytest

from semcmp.comparators import register_builtin_comparators
from semcmp.kernel.registry import ComparatorRegistry
from semcmp.kernel.settings import configure, get_settings


@pytest.fixture(autouse=True)
def restore_settings() -> Iterator[None]:
    """Undo any configure() a test (or the CLI callback) performed"""
    previous = get_settings()
    yield
    configure(previous)


@pytest.fixture
def registry() -> ComparatorRegistry:
    """
    Provide a private registry with every built-in registered

    Tests that register their own classes use this so the process-wide
    default registry only ever holds built-ins and module-level test types.
    """
    return register_builtin_comparators(ComparatorRegistry())


@pytest.fixture
def empty_registry() -> ComparatorRegistry:
    """Provide a registry with nothing registered"""
    return ComparatorRegistry()


@pytest.fixture
def rng() -> random.Random:
    """Provide a seeded random generator for reproducible invariant checks"""
    return random.Random(20190606)


@pytest.fixture
def chronological_dates() -> list[date]:
    """Three dates in chronological (not textual) order"""
    return [date(2019, 6, 6), date(2020, 1, 12), date(2020, 3, 2)]
