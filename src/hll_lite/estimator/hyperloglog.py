"""HyperLogLog cardinality estimator.

Answers the question: "How many distinct strings went through this
stream?" without storing the strings. Memory is one byte per register
(1 KB at the default precision of 10) no matter how long the stream
runs, at the cost of roughly 1.04 / sqrt(m) relative standard error.

Each element is hashed to 64 bits. The low b bits pick one of m = 2^b
registers, and the register keeps the largest rank (position of the
lowest set bit) seen among the remaining bits. A rank of k is a
1-in-2^k event, so the registers together are a noisy record of
log2(distinct count). The harmonic mean across registers turns that
into an estimate, with linear counting taking over while many
registers are still empty.

References:
    Flajolet et al., "HyperLogLog: the analysis of a near-optimal
    cardinality estimation algorithm", 2007.
"""

from __future__ import annotations

import array
import logging
import math

from hll_lite.estimator.bits import (
    MAX_PRECISION,
    MIN_PRECISION,
    alpha,
    lower_bits,
    rank,
    upper_bits,
)
from hll_lite.estimator.errors import InvalidPrecision, NotConfigured
from hll_lite.estimator.hashing import MASK_64, HashFunc, hash64

log = logging.getLogger(__name__)

TWO_32 = float(1 << 32)
SMALL_RANGE_FACTOR = 2.5
LARGE_RANGE_THRESHOLD = TWO_32 / 30.0


class HyperLogLog:
    """HyperLogLog cardinality estimator.

    Parameters:
        precision: Optional precision b. When given, the estimator is
            configured immediately; otherwise call configure() before
            add() or estimate().
        track_exact: Keep an exact set of every element added. Only
            meant for validating the estimate; it grows with the
            stream and is never read by estimate().
        hash_func: Function mapping a string to an unsigned 64-bit int.
            Defaults to truncated SHA-256.

    Typical precision values:
        b=4:  16 registers, ~26% error
        b=10: 1024 registers, ~1 KB, ~3.25% error
        b=14: 16384 registers, ~16 KB, ~0.81% error
    """

    def __init__(
        self,
        precision: int | None = None,
        *,
        track_exact: bool = False,
        hash_func: HashFunc = hash64,
    ) -> None:
        self._b: int | None = None
        self._m = 0
        self._registers = array.array("B")
        self._hash = hash_func
        self._exact: set[str] | None = set() if track_exact else None
        self._added = 0
        if precision is not None:
            self.configure(precision)

    def configure(self, precision: int) -> None:
        """Allocate 2^precision zeroed registers, discarding prior state.

        Raises InvalidPrecision (and leaves the estimator untouched) if
        precision is not an int in 4..16.
        """
        if (
            isinstance(precision, bool)
            or not isinstance(precision, int)
            or not MIN_PRECISION <= precision <= MAX_PRECISION
        ):
            raise InvalidPrecision(
                f"Precision must be {MIN_PRECISION}..{MAX_PRECISION}, got {precision!r}"
            )
        self._b = precision
        self._m = 1 << precision
        self._registers = array.array("B", bytes(self._m))
        if self._exact is not None:
            self._exact.clear()
        self._added = 0
        log.debug("Configured HyperLogLog: b=%d, m=%d", self._b, self._m)

    @property
    def is_configured(self) -> bool:
        return self._b is not None

    @property
    def precision(self) -> int | None:
        return self._b

    @property
    def num_registers(self) -> int | None:
        return self._m if self._b is not None else None

    @property
    def elements_added(self) -> int:
        """Number of add() calls since the last configure(), duplicates included."""
        return self._added

    @property
    def registers(self) -> tuple[int, ...]:
        return tuple(self._registers)

    @property
    def exact_count(self) -> int | None:
        """True distinct count from the exact set, or None if not tracked."""
        if self._exact is None:
            return None
        return len(self._exact)

    def _require_configured(self) -> int:
        if self._b is None:
            raise NotConfigured("HyperLogLog used before configure()")
        return self._b

    def add(self, element: str) -> None:
        """Add an element to the counter."""
        b = self._require_configured()
        x = self._hash(element) & MASK_64
        j = lower_bits(x, b)
        r = rank(upper_bits(x, b))
        if r > self._registers[j]:
            self._registers[j] = r
        self._added += 1
        if self._exact is not None:
            self._exact.add(element)

    def harmonic_mean(self) -> float:
        """Indicator Z = 1 / sum(2^-register) over all m registers."""
        self._require_configured()
        return 1.0 / sum(2.0 ** -r for r in self._registers)

    def estimate(self) -> float:
        """Estimate the number of distinct elements added.

        Applies linear counting while some registers are still zero and
        the raw estimate is at most 2.5 * m, and the 32-bit large range
        correction above 2^32 / 30.
        """
        self._require_configured()
        m = self._m
        e = alpha(m) * m * m * self.harmonic_mean()

        if e <= SMALL_RANGE_FACTOR * m:
            zeros = self._registers.count(0)
            if zeros > 0:
                e = m * math.log(m / zeros)
                log.debug("Small range correction: V=%d, E=%f", zeros, e)

        if e > LARGE_RANGE_THRESHOLD:
            if e >= TWO_32:
                log.warning("Raw estimate %f exceeds 2^32, estimator saturated", e)
                e = math.inf
            else:
                e = -TWO_32 * math.log2(1.0 - e / TWO_32)
                log.debug("Large range correction: E=%f", e)

        if self._exact is not None:
            log.debug("real,estimate = %d,%f", len(self._exact), e)
        return e

    def count(self) -> int:
        """Estimate truncated to an int. A saturated estimator reports 2^32."""
        e = self.estimate()
        if math.isinf(e):
            return int(TWO_32)
        return int(e)

    def dump_registers(self) -> str:
        """Register values as one space-separated line, for debugging."""
        self._require_configured()
        return " ".join(str(r) for r in self._registers)

    def memory_bytes(self) -> int:
        """Bytes held by the register array, independent of stream length."""
        self._require_configured()
        return self._m

    def standard_error(self) -> float:
        """Expected relative error of estimate(), 1.04 / sqrt(m)."""
        self._require_configured()
        return 1.04 / math.sqrt(self._m)
