"""Move value type and the fixed move alphabet codec.

Alphabet layout (face-major, three turn amounts per face)::

    U=0  U'=1  U2=2
    F=3  F'=4  F2=5
    R=6  R'=7  R2=8
    B=9  B'=10 B2=11
    L=12 L'=13 L2=14
    D=15 D'=16 D2=17
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Final

from cubemoves.core.enums import CubeFace, TurnAmount
from cubemoves.core.errors import InvalidMoveError

if TYPE_CHECKING:
    from cubemoves.core.random_source import RandomSource

MOVE_COUNT: Final = 18


class Move(IntEnum):
    """One face turn out of the 18-symbol alphabet."""

    U = 0
    U_PRIME = 1
    U2 = 2
    F = 3
    F_PRIME = 4
    F2 = 5
    R = 6
    R_PRIME = 7
    R2 = 8
    B = 9
    B_PRIME = 10
    B2 = 11
    L = 12
    L_PRIME = 13
    L2 = 14
    D = 15
    D_PRIME = 16
    D2 = 17

    @classmethod
    def from_face(cls, face: CubeFace, turn: TurnAmount) -> Move:
        """Move turning *face* by *turn*, e.g. (R, HALF) → R2."""
        return cls(int(face) * len(TurnAmount) + int(turn))

    @property
    def face(self) -> CubeFace:
        return CubeFace(self.value // len(TurnAmount))

    @property
    def turn(self) -> TurnAmount:
        return TurnAmount(self.value % len(TurnAmount))

    @property
    def token(self) -> str:
        """Canonical text token, e.g. ``"R'"``."""
        return _TOKENS[self]

    @property
    def inverse(self) -> Move:
        return _INVERTED[self]

    def __str__(self) -> str:
        return _TOKENS[self]


# ── Lookup tables ────────────────────────────────────────────────────────────

_TOKENS: Final[dict[Move, str]] = {
    Move.U: "U",
    Move.U_PRIME: "U'",
    Move.U2: "U2",
    Move.F: "F",
    Move.F_PRIME: "F'",
    Move.F2: "F2",
    Move.R: "R",
    Move.R_PRIME: "R'",
    Move.R2: "R2",
    Move.B: "B",
    Move.B_PRIME: "B'",
    Move.B2: "B2",
    Move.L: "L",
    Move.L_PRIME: "L'",
    Move.L2: "L2",
    Move.D: "D",
    Move.D_PRIME: "D'",
    Move.D2: "D2",
}

# Indexed by ordinal.
_INVERTED: Final[tuple[Move, ...]] = (
    Move.U_PRIME,  # U
    Move.U,  # U'
    Move.U2,  # U2
    Move.F_PRIME,  # F
    Move.F,  # F'
    Move.F2,  # F2
    Move.R_PRIME,  # R
    Move.R,  # R'
    Move.R2,  # R2
    Move.B_PRIME,  # B
    Move.B,  # B'
    Move.B2,  # B2
    Move.L_PRIME,  # L
    Move.L,  # L'
    Move.L2,  # L2
    Move.D_PRIME,  # D
    Move.D,  # D'
    Move.D2,  # D2
)

if len(Move) != MOVE_COUNT or set(_TOKENS) != set(Move) or len(_INVERTED) != MOVE_COUNT:
    raise RuntimeError("Move tables do not cover the move alphabet")


# ── Codec ────────────────────────────────────────────────────────────────────


def as_move(value: Move | int) -> Move:
    """Validate an ordinal and return the matching :class:`Move`."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidMoveError(f"Not a move: {value!r}")
    if not 0 <= value < MOVE_COUNT:
        raise InvalidMoveError(f"Move ordinal out of range: {value!r}")
    return Move(value)


def move_to_string(move: Move | int) -> str:
    """Canonical token for *move*.

    Raises:
        InvalidMoveError: if the ordinal is outside the alphabet.
    """
    return _TOKENS[as_move(move)]


def inverted_move(move: Move | int) -> Move:
    """Move that undoes *move* on the same face."""
    return _INVERTED[as_move(move)]


def random_move(rng: RandomSource) -> Move:
    """Draw one move uniformly; performs exactly one ``rng.next`` call."""
    return as_move(rng.next(MOVE_COUNT))
