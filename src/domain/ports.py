"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Protocol


class IdentifierMode(str, Enum):
    """
    Identifier scheme active for a deployment.

    Exactly one scheme is used per deployment; accounts are keyed by
    email address or by phone number, never a mix of both.
    """

    EMAIL = "email"
    PHONE = "phone"


@dataclass(frozen=True)
class VerificationRecord:
    """Latest verification code issued for an identifier."""

    identifier: str
    code: int
    issued_at: datetime


class VerificationStore(Protocol):
    """Port interface for verification code persistence."""

    def upsert(self, identifier: str, code: int, issued_at: datetime) -> None:
        """
        Create or overwrite the verification record for an identifier.

        Must be atomic per identifier: concurrent calls leave exactly one
        caller's code and timestamp.

        Args:
            identifier: Account identifier (email or phone)
            code: 6-digit verification code
            issued_at: Issuance time, taken from the same clock that later
                judges expiry

        Raises:
            StoreError: If the store fails
        """
        ...

    def get_latest(self, identifier: str) -> VerificationRecord | None:
        """
        Fetch the most recently issued code for an identifier.

        Returns:
            The current record, or None if no code was ever issued

        Raises:
            StoreError: If the store fails
        """
        ...


class UserStore(Protocol):
    """Port interface for user persistence."""

    def insert(self, identifier: str, display_name: str, password_digest: str) -> None:
        """
        Atomically create a user record unless one exists.

        Args:
            identifier: Account identifier (primary key)
            display_name: User's display name
            password_digest: Hasher output, never the plaintext

        Raises:
            DuplicateIdentifier: If a user with this identifier exists
            StoreError: If the store fails
        """
        ...

    def find_by_credentials(self, identifier: str, password_digest: str) -> bool:
        """
        Check whether a user with this exact identifier/digest pair exists.

        Raises:
            StoreError: If the store fails
        """
        ...


class Transport(Protocol):
    """Port interface for verification message delivery (email or SMS)."""

    def send(self, message: str, destination: str) -> None:
        """
        Deliver a message to an identifier.

        Args:
            message: Rendered verification message
            destination: Email address or phone number

        Raises:
            TransportError: If delivery fails
        """
        ...
