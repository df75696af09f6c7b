"""
Input validation - syntactic checks on identifiers, names, and passwords.

Historical note on length bounds
================================
The validators this service replaces checked lengths with
``len > min OR len <= max``, which holds for every length. Clients were
built against that behavior, so the default (lenient) mode keeps it and
only the character checks reject input. Pass ``strict_lengths=True``
(setting ``STRICT_LENGTH_CHECKS``) to enforce the intended bounds.

Lengths are measured in UTF-8 bytes, not characters, as the historical
validators did. This only matters for passwords; names are ASCII.
"""

import re
import string

from .exceptions import InvalidIdentifier, InvalidName, InvalidPassword
from .ports import IdentifierMode

EMAIL_PATTERN = r"^[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9.-]+$"
PHONE_NUMBER_LENGTH = 11

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 16
PASSWORD_MIN_LENGTH = 5
PASSWORD_MAX_LENGTH = 64

_NAME_CHARACTERS = frozenset(string.ascii_letters + string.digits)
_PHONE_CHARACTERS = frozenset(string.digits)


class Validator:
    """Pure validation checks configured for one identifier mode."""

    def __init__(self, mode: IdentifierMode | str, strict_lengths: bool = False) -> None:
        self.mode = IdentifierMode(mode)
        self.strict_lengths = strict_lengths
        self._email_re = re.compile(EMAIL_PATTERN)

    def validate_identifier(self, identifier: str) -> None:
        """
        Check identifier syntax for the configured mode.

        Raises:
            InvalidIdentifier: If the identifier does not match
        """
        if self.mode is IdentifierMode.EMAIL:
            valid = self._email_re.fullmatch(identifier) is not None
        else:
            valid = len(identifier) == PHONE_NUMBER_LENGTH and all(
                char in _PHONE_CHARACTERS for char in identifier
            )
        if not valid:
            raise InvalidIdentifier(identifier)

    def validate_name(self, name: str) -> None:
        """
        Check that a display name is ASCII alphanumeric.

        Raises:
            InvalidName: On any other character, or a bad length in strict mode
        """
        has_valid_characters = all(char in _NAME_CHARACTERS for char in name)
        has_valid_length = self._length_ok(name, NAME_MIN_LENGTH, NAME_MAX_LENGTH)
        if not (has_valid_characters and has_valid_length):
            raise InvalidName(name)

    def validate_password(self, password: str) -> None:
        """
        Check password length.

        Raises:
            InvalidPassword: On a bad length in strict mode
        """
        if not self._length_ok(password, PASSWORD_MIN_LENGTH, PASSWORD_MAX_LENGTH):
            raise InvalidPassword()

    def _length_ok(self, value: str, minimum: int, maximum: int) -> bool:
        length = len(value.encode("utf-8"))
        if self.strict_lengths:
            return minimum <= length <= maximum
        # Lenient mode keeps the historical OR.
        return length >= minimum or length <= maximum
