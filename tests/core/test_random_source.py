"""Tests for the concrete random sources."""

import logging

import pytest

from cubemoves.core.errors import InvalidArgumentError
from cubemoves.core.random_source import SimpleSeededRandomSource, StandardRandomSource


class TestSimpleSeededRandomSource:
    def test_reproducible(self) -> None:
        a = SimpleSeededRandomSource(42)
        b = SimpleSeededRandomSource(42)
        assert [a.next(1000) for _ in range(50)] == [b.next(1000) for _ in range(50)]

    def test_different_seeds_diverge(self) -> None:
        a = SimpleSeededRandomSource(1)
        b = SimpleSeededRandomSource(2)
        assert [a.next_u64() for _ in range(4)] != [b.next_u64() for _ in range(4)]

    def test_values_within_bound(self, seeded_rng) -> None:
        for bound in (1, 2, 18, 1000):
            for _ in range(200):
                assert 0 <= seeded_rng.next(bound) < bound

    def test_u64_range(self, seeded_rng) -> None:
        for _ in range(100):
            assert 0 <= seeded_rng.next_u64() < 2**64

    @pytest.mark.parametrize("bound", [0, -5])
    def test_bad_bound_raises(self, seeded_rng, bound: int) -> None:
        with pytest.raises(InvalidArgumentError, match="positive"):
            seeded_rng.next(bound)

    def test_logs_seed(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="cubemoves.core.random_source"):
            SimpleSeededRandomSource(255)
        assert "0xff" in caplog.text


class TestStandardRandomSource:
    def test_seeded_reproducible(self) -> None:
        a = StandardRandomSource(7)
        b = StandardRandomSource(7)
        assert [a.next(18) for _ in range(30)] == [b.next(18) for _ in range(30)]

    def test_values_within_bound(self, standard_rng) -> None:
        for _ in range(500):
            assert 0 <= standard_rng.next(18) < 18

    def test_unseeded(self) -> None:
        assert 0 <= StandardRandomSource().next(5) < 5

    def test_bad_bound_raises(self, standard_rng) -> None:
        with pytest.raises(InvalidArgumentError):
            standard_rng.next(0)
