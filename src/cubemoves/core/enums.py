"""Core enumerations for the face-turn domain."""

from __future__ import annotations

from enum import IntEnum


class CubeFace(IntEnum):
    """Puzzle faces in move-alphabet order."""

    U = 0
    F = 1
    R = 2
    B = 3
    L = 4
    D = 5

    @property
    def letter(self) -> str:
        return self.name


class TurnAmount(IntEnum):
    """Rotation applied to a face by a single move."""

    CLOCKWISE = 0
    COUNTER_CLOCKWISE = 1
    HALF = 2

    @property
    def inverse(self) -> TurnAmount:
        if self is TurnAmount.HALF:
            return self
        return TurnAmount(1 - self.value)
