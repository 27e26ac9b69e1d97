"""64-bit hashing of stream elements.

Every element goes through one fixed hash before it touches a register.
The only property the estimator needs is that equal strings hash to
equal values and that the output bits look uniformly random, so a
truncated SHA-256 is more than enough. It is also stable across
processes, unlike the builtin hash(), which makes test fixtures
reproducible.
"""

from __future__ import annotations

import hashlib
from typing import Callable

HashFunc = Callable[[str], int]

MASK_64 = (1 << 64) - 1


def hash64(element: str) -> int:
    """Map a stream element to an unsigned 64-bit register-and-rank source.

    Lone surrogates (undecodable input bytes read with surrogateescape)
    are encoded as-is, so every str has a distinct byte form.
    """
    digest = hashlib.sha256(element.encode("utf-8", "surrogatepass")).digest()
    return int.from_bytes(digest[:8], "big")
