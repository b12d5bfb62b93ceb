"""Exception types raised by the core layer."""

from __future__ import annotations


class CubeMovesError(Exception):
    """Base class for all cubemoves errors."""


class InvalidMoveError(CubeMovesError, ValueError):
    """A value does not name one of the 18 moves."""


class InvalidArgumentError(CubeMovesError, ValueError):
    """A numeric argument is outside the accepted domain."""
