"""Console harness for the estimator.

Public API:
    StreamSession: reads length requests line by line, feeds random strings
    SessionConfig / SessionResult: session settings and outcome
    StringGenerator, random_string: random lowercase strings
"""
from hll_lite.driver.generator import StringGenerator, random_string
from hll_lite.driver.session import (
    SessionConfig,
    SessionResult,
    StreamSession,
    parse_length,
)

__all__ = [
    "StreamSession",
    "SessionConfig",
    "SessionResult",
    "parse_length",
    "StringGenerator",
    "random_string",
]
