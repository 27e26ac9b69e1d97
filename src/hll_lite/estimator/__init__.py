"""Cardinality estimation core.

Public API:
    HyperLogLog: configure / add / estimate over one string stream
    hash64: the default 64-bit element hash
    InvalidPrecision, NotConfigured: errors raised by the estimator
"""
from hll_lite.estimator.bits import (
    MAX_PRECISION,
    MIN_PRECISION,
    RANK_SENTINEL,
    alpha,
    lower_bits,
    rank,
    upper_bits,
)
from hll_lite.estimator.errors import EstimatorError, InvalidPrecision, NotConfigured
from hll_lite.estimator.hashing import hash64
from hll_lite.estimator.hyperloglog import HyperLogLog

__all__ = [
    "HyperLogLog",
    "hash64",
    "alpha",
    "lower_bits",
    "upper_bits",
    "rank",
    "MIN_PRECISION",
    "MAX_PRECISION",
    "RANK_SENTINEL",
    "EstimatorError",
    "InvalidPrecision",
    "NotConfigured",
]
