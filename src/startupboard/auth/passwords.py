"""Password hashing with bcrypt."""

import asyncio

import bcrypt

# bcrypt cost factor (2**10 key expansion rounds)
PASSWORD_HASH_ROUNDS = 10

# bcrypt only reads this many bytes of input
MAX_PASSWORD_BYTES = 72


def _hash(plaintext: str, rounds: int) -> str:
    secret = plaintext.encode()[:MAX_PASSWORD_BYTES]
    return bcrypt.hashpw(secret, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


async def hash_password(plaintext: str, rounds: int = PASSWORD_HASH_ROUNDS) -> str:
    """Hash a plaintext password with a fresh salt.

    Runs in a worker thread since bcrypt is CPU bound.
    """
    return await asyncio.to_thread(_hash, plaintext, rounds)
