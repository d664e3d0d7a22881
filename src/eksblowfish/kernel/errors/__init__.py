"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── ValidationError
    │       ├── InvalidRoundsError
    │       ├── InvalidSaltError
    │       ├── InvalidHashError
    │       └── InvalidPasswordError
    ├── ApplicationError         (application.py)
    └── InfrastructureError      (infrastructure.py)
        └── RandomSourceError
"""

from eksblowfish.kernel.errors.application import ApplicationError
from eksblowfish.kernel.errors.base import BaseError
from eksblowfish.kernel.errors.domain import (
    DomainError,
    InvalidHashError,
    InvalidPasswordError,
    InvalidRoundsError,
    InvalidSaltError,
    ValidationError,
)
from eksblowfish.kernel.errors.infrastructure import InfrastructureError, RandomSourceError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "InvalidHashError",
    "InvalidPasswordError",
    "InvalidRoundsError",
    "InvalidSaltError",
    "RandomSourceError",
    "ValidationError",
]
