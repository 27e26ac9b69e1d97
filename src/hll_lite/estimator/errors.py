"""Exceptions raised by the cardinality estimator."""
from __future__ import annotations


class EstimatorError(Exception):
    """Base class for estimator errors."""


class InvalidPrecision(EstimatorError, ValueError):
    """Raised when the precision (or register count) has no alpha constant."""


class NotConfigured(EstimatorError, RuntimeError):
    """Raised when add/estimate is called before configure()."""
