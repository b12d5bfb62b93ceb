"""Ordered move sequence (scrambles, solutions, algorithms)."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from cubemoves.core.move import Move, as_move, inverted_move, move_to_string


@dataclass(slots=True)
class MoveSequence:
    """Mutable list of moves in the order they are performed.

    The sequence owns its list: the constructor copies whatever iterable it
    is given. No legality filtering is done, so repeated or cancelling
    moves are kept as-is.
    """

    moves: list[Move] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.moves = [as_move(mv) for mv in self.moves]

    # ── Mutation ─────────────────────────────────────────────────────────

    def append(self, move: Move | int) -> None:
        self.moves.append(as_move(move))

    def extend(self, moves: Iterable[Move | int]) -> None:
        self.moves.extend(as_move(mv) for mv in moves)

    # ── Container protocol ───────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self.moves)

    def __getitem__(self, index: int) -> Move:
        return self.moves[index]

    # ── Algebra ──────────────────────────────────────────────────────────

    def inverted(self) -> MoveSequence:
        """Sequence undoing this one: reversed order, each move inverted."""
        return MoveSequence([inverted_move(mv) for mv in reversed(self.moves)])

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return " ".join(move_to_string(mv) for mv in self.moves)
