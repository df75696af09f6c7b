"""
Domain exceptions - Semantic error types for registration and login.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
The API layer maps each of them onto an HTTP status.
"""


class ServiceError(Exception):
    """Base class for registration and login domain errors."""

    message = "service error"

    def __str__(self) -> str:
        return self.message


class InvalidArgument(ServiceError):
    """A request field failed syntactic validation."""

    field = "argument"

    def __init__(self, value: str = "", field: str | None = None) -> None:
        super().__init__(value)
        self.value = value
        if field is not None:
            self.field = field

    def __str__(self) -> str:
        return f"argument '{self.field}' is incorrect"


class InvalidIdentifier(InvalidArgument):
    """Identifier is neither a valid email address nor a valid phone number."""

    field = "identifier"


class InvalidName(InvalidArgument):
    """Display name contains non-alphanumeric characters or has a bad length."""

    field = "name"


class InvalidPassword(InvalidArgument):
    """Password length is out of bounds."""

    field = "password"


class ExpiredCode(ServiceError):
    """No verification code was issued, or the last one is past its window."""

    message = "expired code"


class WrongCode(ServiceError):
    """Submitted code differs from the last issued code."""

    message = "wrong code"


class DuplicateIdentifier(ServiceError):
    """A user with the same identifier already exists."""

    message = "user with same identifier already exists"

    def __init__(self, identifier: str = "") -> None:
        super().__init__(identifier)
        self.identifier = identifier


class WrongCredentials(ServiceError):
    """Identifier/password pair does not match any user."""

    message = "wrong credentials"


class TransportError(ServiceError):
    """Verification message could not be delivered."""

    message = "could not deliver verification code"


class StoreError(ServiceError):
    """Persistent store failed."""

    message = "database error"
