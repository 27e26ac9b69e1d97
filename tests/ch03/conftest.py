"""Shared fixtures for driver and CLI tests."""
from __future__ import annotations

import io

import pytest

from hll_lite.driver.session import SessionConfig


SEED = 42


@pytest.fixture
def small_config():
    """A fast session: b=6, 1000 strings per batch, report every 100."""
    return SessionConfig(
        precision=6,
        batch_size=1000,
        report_every=100,
        seed=SEED,
    )


@pytest.fixture
def out():
    return io.StringIO()
