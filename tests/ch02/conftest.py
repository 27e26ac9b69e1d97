"""Shared fixtures for estimator tests."""
from __future__ import annotations

import random

import pytest

from hll_lite.estimator.hyperloglog import HyperLogLog


SEED = 42


def _identity_hash(element: str) -> int:
    """Treat the element as the decimal form of its own hash."""
    return int(element)


@pytest.fixture
def engineered_hll():
    """Factory for estimators whose registers can be set exactly.

    Elements are decimal integers hashed to themselves, so
    str(j | (w << b)) lands in register j with rank(w).
    """
    def make(precision: int) -> HyperLogLog:
        return HyperLogLog(precision, hash_func=_identity_hash)
    return make


@pytest.fixture
def fill_registers():
    """Set register j to rank r for every (j, r) pair given."""
    def fill(hll: HyperLogLog, ranks: dict[int, int]) -> None:
        b = hll.precision
        for j, r in ranks.items():
            # w with exactly r - 1 trailing zeros; w = 0 gives the sentinel
            w = 0 if r == 33 else 1 << (r - 1)
            hll.add(str(j | (w << b)))
    return fill


@pytest.fixture
def rng():
    return random.Random(SEED)
