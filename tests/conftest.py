"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from cubemoves.core.random_source import SimpleSeededRandomSource, StandardRandomSource


class ScriptedSource:
    """Random source replaying fixed values and recording each bound."""

    def __init__(self, values: list[int]) -> None:
        self._values = list(values)
        self.bounds: list[int] = []

    def next(self, bound: int) -> int:
        self.bounds.append(bound)
        return self._values.pop(0)


@pytest.fixture
def seeded_rng() -> SimpleSeededRandomSource:
    return SimpleSeededRandomSource(0xC0FFEE)


@pytest.fixture
def standard_rng() -> StandardRandomSource:
    return StandardRandomSource(12345)


@pytest.fixture
def scripted_source() -> type[ScriptedSource]:
    return ScriptedSource
