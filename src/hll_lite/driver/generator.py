"""Random lowercase string generation for exercising the estimator.

Strings of length n over a..z have 26^n possible values, so the length
controls how many duplicates a batch contains: length 1 saturates at
26 distinct values, length 3 at 17,576, and length 6 and up is
effectively all-distinct for a 100k batch.
"""
from __future__ import annotations

import random
import string
from collections.abc import Iterator

ALPHABET = string.ascii_lowercase


def random_string(length: int, rng: random.Random) -> str:
    """Return `length` letters drawn uniformly from a..z."""
    return "".join(rng.choice(ALPHABET) for _ in range(length))


class StringGenerator:
    """Generate batches of random lowercase strings.

    A fixed seed makes the batches reproducible; seed=None draws from
    system entropy.
    """

    __slots__ = ("_rng",)

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def generate(self, length: int, count: int) -> Iterator[str]:
        if length < 0:
            raise ValueError(f"length must be >= 0, got {length}")
        for _ in range(count):
            yield random_string(length, self._rng)
