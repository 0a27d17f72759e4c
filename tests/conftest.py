"""Shared pytest fixtures for instantiator tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from instantiator.factory import Instantiator
from instantiator.introspection import ReflectiveIntrospector
from tests.zoo import CONSTRUCTED


@pytest.fixture(autouse=True)
def _reset_construction_log() -> Generator[None]:
    """Empty the shared constructor-call log around each test."""
    CONSTRUCTED.clear()
    yield
    CONSTRUCTED.clear()


@pytest.fixture
def factory() -> Instantiator:
    """Instantiator over the default reflective introspector."""
    return Instantiator()


@pytest.fixture
def strict_factory() -> Instantiator:
    """Instantiator that ignores ABC-registered virtual subclasses."""
    return Instantiator(ReflectiveIntrospector(allow_virtual_subclasses=False))
