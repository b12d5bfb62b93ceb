"""Core domain layer — move alphabet, sequences and combinatorics.

Quick start::

    from cubemoves.core import Move, MoveSequence

    seq = MoveSequence([Move.U, Move.R, Move.F_PRIME])
    print(seq)             # U R F'
    print(seq.inverted())  # F R' U'
"""

from cubemoves.core.combinatorics import n_choose_k
from cubemoves.core.enums import CubeFace, TurnAmount
from cubemoves.core.errors import CubeMovesError, InvalidArgumentError, InvalidMoveError
from cubemoves.core.move import (
    MOVE_COUNT,
    Move,
    as_move,
    inverted_move,
    move_to_string,
    random_move,
)
from cubemoves.core.random_source import (
    RandomSource,
    SimpleSeededRandomSource,
    StandardRandomSource,
)
from cubemoves.core.sequence import MoveSequence

__all__ = [
    # Enums
    "CubeFace",
    "TurnAmount",
    # Errors
    "CubeMovesError",
    "InvalidArgumentError",
    "InvalidMoveError",
    # Moves
    "MOVE_COUNT",
    "Move",
    "MoveSequence",
    "as_move",
    "inverted_move",
    "move_to_string",
    "random_move",
    # Randomness
    "RandomSource",
    "SimpleSeededRandomSource",
    "StandardRandomSource",
    # Combinatorics
    "n_choose_k",
]
