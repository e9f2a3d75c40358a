"""
Credential verification with bcrypt.

bcrypt only reads the first 72 bytes of a password. Longer passwords are
cut to that length on both hashing and checking, so they hash and verify
consistently.
"""

import bcrypt

from shared.config import get_settings

BCRYPT_MAX_BYTES = 72


def _password_bytes(plain: str) -> bytes:
    return plain.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(plain: str, rounds: int | None = None) -> str:
    """Hash a password with a fresh salt."""
    salt = bcrypt.gensalt(rounds=rounds or get_settings().bcrypt_rounds)
    return bcrypt.hashpw(_password_bytes(plain), salt).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """
    Check a password against a stored digest.

    Returns False on mismatch and on digests bcrypt cannot parse.
    """
    if not plain or not hashed:
        return False
    try:
        return bcrypt.checkpw(_password_bytes(plain), hashed.encode("utf-8"))
    except ValueError:
        return False
