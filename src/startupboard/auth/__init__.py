"""Password hashing and token signing for Startupboard."""

from .passwords import PASSWORD_HASH_ROUNDS, hash_password
from .tokens import AuthenticationError, TokenSigner

__all__ = [
    "PASSWORD_HASH_ROUNDS",
    "AuthenticationError",
    "TokenSigner",
    "hash_password",
]
