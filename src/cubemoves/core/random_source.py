"""Random source capability consumed by :func:`random_move`."""

from __future__ import annotations

import logging
import random
from typing import Final, Protocol

from cubemoves.core.errors import InvalidArgumentError

_LOGGER = logging.getLogger(__name__)

_MASK_64: Final = 0xFFFFFFFFFFFFFFFF


class RandomSource(Protocol):
    """Anything that can draw an integer uniformly from ``[0, bound)``."""

    def next(self, bound: int) -> int: ...


def _check_bound(bound: int) -> None:
    if bound <= 0:
        raise InvalidArgumentError(f"Random bound must be positive, got {bound!r}")


class StandardRandomSource:
    """Source backed by :class:`random.Random`; unseeded uses OS entropy."""

    __slots__ = ("_rng",)

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        _LOGGER.debug("StandardRandomSource created (seed=%r)", seed)

    def next(self, bound: int) -> int:
        _check_bound(bound)
        return self._rng.randrange(bound)


class SimpleSeededRandomSource:
    """Small deterministic splitmix64 generator for reproducible scrambles."""

    __slots__ = ("_state",)

    def __init__(self, seed: int = 0) -> None:
        self._state = seed & _MASK_64
        _LOGGER.debug("SimpleSeededRandomSource created (seed=%#x)", self._state)

    def next_u64(self) -> int:
        self._state = (self._state + 0x9E3779B97F4A7C15) & _MASK_64
        z = self._state
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK_64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK_64
        return z ^ (z >> 31)

    def next(self, bound: int) -> int:
        _check_bound(bound)
        # Multiply-shift reduction of a 64-bit draw into [0, bound).
        return (self.next_u64() * bound) >> 64
