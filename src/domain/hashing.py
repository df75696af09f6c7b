"""Password hashing."""

import hashlib


def digest(plaintext: str) -> str:
    """
    Hash a password into its stored digest.

    Lowercase hex SHA-256 of the UTF-8 encoded input. Deterministic, so the
    digest can be used directly as a lookup key at login.
    """
    return hashlib.sha256(plaintext.encode()).hexdigest()
