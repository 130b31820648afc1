"""
Password hashing with bcrypt.

The cost factor is fixed when the hash is created and embedded in the
hash itself, so changing the configured rounds only affects new accounts.
"""

import bcrypt

DEFAULT_ROUNDS = 10

# bcrypt only reads the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


def _encode(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:MAX_PASSWORD_BYTES]


def hash_password(plaintext: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Derive a salted bcrypt hash from a plaintext password."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_encode(plaintext), salt).decode("utf-8")


def verify_password(plaintext: str, hashed: str) -> bool:
    """
    Compare a plaintext password against a stored hash.

    Returns False (instead of raising) when the stored hash is malformed.
    """
    try:
        return bcrypt.checkpw(_encode(plaintext), hashed.encode("utf-8"))
    except ValueError:
        return False
