"""Security – password hashing."""
from eksblowfish.security.bcrypt import BcryptHasher, SystemRandomSource

__all__ = ["BcryptHasher", "SystemRandomSource"]
