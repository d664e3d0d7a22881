"""Kernel security – PasswordHasher and RandomSource ports."""
from __future__ import annotations

import abc
from typing import Protocol, runtime_checkable


class PasswordHasher(abc.ABC):
    """Port: one-way password hashing."""

    @abc.abstractmethod
    def hash(self, password: str, salt: str | None = None) -> str: ...

    @abc.abstractmethod
    def verify(self, password: str, hashed: str) -> bool: ...


@runtime_checkable
class RandomSource(Protocol):
    """Port: cryptographically strong random bytes."""

    def token_bytes(self, nbytes: int) -> bytes: ...


__all__ = ["PasswordHasher", "RandomSource"]
