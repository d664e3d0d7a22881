"""Shared fixtures for the eksblowfish test suite."""

from __future__ import annotations

import logging

import pytest
import structlog

from eksblowfish.api import reset_default_hasher
from eksblowfish.config import HashingSettings
from eksblowfish.security.bcrypt import BcryptHasher


@pytest.fixture(autouse=True)
def _isolate_global_state():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
    reset_default_hasher()


@pytest.fixture
def fast_hasher() -> BcryptHasher:
    """Hasher at the minimum cost so pure-Python hashing stays quick."""
    return BcryptHasher(HashingSettings(default_rounds=4))
