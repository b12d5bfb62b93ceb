"""Combinatorial helpers for ranking piece-position subsets."""

from __future__ import annotations

from cubemoves.core.errors import InvalidArgumentError


def n_choose_k(n: int, k: int) -> int:
    """Binomial coefficient C(n, k); 0 when ``n < k``.

    Multiplies by ``n, n-1, …`` and divides by ``1, 2, …`` in lockstep so
    every partial result stays an exact integer.
    """
    if n < 0 or k < 0:
        raise InvalidArgumentError(
            f"n_choose_k needs non-negative arguments, got ({n!r}, {k!r})"
        )
    if n < k:
        return 0
    if k > n // 2:
        k = n - k

    result = 1
    denom = 1
    for i in range(n, n - k, -1):
        result *= i
        result //= denom
        denom += 1
    return result
