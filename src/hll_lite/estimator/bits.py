"""Bit-layout helpers for HyperLogLog.

A 64-bit hash x is split in two:

    x = [ upper bits: w ][ lower b bits: j ]

j picks the register, w feeds the rank. The rank is the 1-based
position of the lowest set bit of w, so a value ending in k zero bits
has rank k + 1. Only the low RANK_SCAN_BITS bits of w are examined;
if they are all zero the rank is RANK_SENTINEL.
"""

from __future__ import annotations

from hll_lite.estimator.errors import InvalidPrecision

MIN_PRECISION = 4
MAX_PRECISION = 16

RANK_SCAN_BITS = 32
RANK_SENTINEL = RANK_SCAN_BITS + 1

_RANK_MASK = (1 << RANK_SCAN_BITS) - 1

# Bias-correction constants for small register counts (Flajolet et al.)
_SMALL_ALPHA: dict[int, float] = {
    16: 0.673,
    32: 0.697,
    64: 0.709,
}


def lower_bits(x: int, b: int) -> int:
    """Return the low b bits of x (the register index)."""
    return x & ((1 << b) - 1)


def upper_bits(x: int, b: int) -> int:
    """Return x shifted right by b bits (the rank input)."""
    return x >> b


def rank(w: int) -> int:
    """Trailing zero count of w plus one, bounded to the low 32 bits.

    Examples: 1 -> 1, 2 -> 2, 3 -> 1, 8 -> 4, 0 -> 33.
    """
    low = w & _RANK_MASK
    if low == 0:
        return RANK_SENTINEL
    # low & -low isolates the lowest set bit
    return (low & -low).bit_length()


def alpha(m: int) -> float:
    """Bias-correction constant for m registers.

    Raises InvalidPrecision when m is not a power of two >= 16.
    """
    if m in _SMALL_ALPHA:
        return _SMALL_ALPHA[m]
    if m >= 128 and m & (m - 1) == 0:
        return 0.7213 / (1.0 + 1.079 / m)
    raise InvalidPrecision(f"No alpha constant for {m} registers")
