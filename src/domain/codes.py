"""Verification code generation."""

import secrets

CODE_DIGITS = 6


def generate_code() -> int:
    """
    Generate a 6-digit verification code.

    Each digit is drawn uniformly from 0-9. Leading zeros fold away in the
    integer value; use format_code() to render it for humans.
    """
    return int("".join(secrets.choice("0123456789") for _ in range(CODE_DIGITS)))


def format_code(code: int) -> str:
    """Render a code zero-padded to 6 digits."""
    return f"{code:0{CODE_DIGITS}d}"
