"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from random_oo.services.uniform_source import NumpyUniformSource, set_shared_source


class ScriptedUniformSource:
    """Uniform source that replays a fixed list of draws.

    Records every reseed value so tests can check which seed was used.
    """

    def __init__(self, values: list[float]):
        self.values = list(values)
        self.position = 0
        self.seeds: list[Any] = []

    def reseed(self, value: Any) -> None:
        self.seeds.append(value)
        self.position = 0

    def draw_uniform_01(self) -> float:
        value = self.values[self.position % len(self.values)]
        self.position += 1
        return value


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def scripted_source():
    """Factory for scripted uniform sources."""
    return ScriptedUniformSource


@pytest.fixture(autouse=True)
def fresh_shared_source():
    """Give every test its own shared source and restore the original after."""
    previous = set_shared_source(NumpyUniformSource(seed=12345))
    yield
    set_shared_source(previous)
