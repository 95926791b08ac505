"""
Security helpers for password hashing and secret comparison.

Passwords can be stored either as plain text or as a PBKDF2‑HMAC
digest with SHA‑256.  Hashed values use the format
``salthex$hashhex`` with a random 16‑byte salt.  Every comparison
goes through ``hmac.compare_digest`` so the time taken does not
depend on how many leading characters match.
"""

import hashlib
import hmac
import os

PBKDF2_ITERATIONS = 100_000


def _encode(value: str) -> bytes:
    return value.encode("utf-8", "surrogatepass")


def secrets_match(candidate: str, expected: str) -> bool:
    """Return True if both strings are exactly equal.

    Case sensitive and without trimming.  The strings are encoded to
    UTF‑8 first because ``compare_digest`` only accepts ASCII ``str``;
    lone surrogates (valid in JSON escapes) are kept as is.
    """
    return hmac.compare_digest(_encode(candidate), _encode(expected))


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    Parameters
    ----------
    password : str
        The plain text password to hash.

    Returns
    -------
    str
        Salt and hash in hex, concatenated with ``$``.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", _encode(password), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored salt+hash string.

    Returns False for a stored value that is not in the
    ``salthex$hashhex`` format instead of raising.
    """
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac("sha256", _encode(plain_password), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)
