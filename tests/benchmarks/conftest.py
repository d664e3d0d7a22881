"""conftest.py for benchmarks.

Run with::

    PYTHONPATH=src pytest tests/benchmarks -o python_files='bench_*.py'

The ``event_loop`` fixture is session-scoped so the async benchmarks share
one loop and only measure the worker-thread hop.
"""

from __future__ import annotations

import asyncio

import pytest

from eksblowfish.config import HashingSettings
from eksblowfish.security.bcrypt import BcryptHasher


@pytest.fixture(scope="session")
def event_loop():
    """Session-scoped event loop shared by all async benchmark helpers."""
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture(scope="session")
def min_cost_hasher() -> BcryptHasher:
    return BcryptHasher(HashingSettings(default_rounds=4))
