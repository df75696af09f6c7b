"""
Registration domain service - verification code issuance and redemption.

This module contains the core business logic for user registration:
proving control of an identifier with a one-time code, then claiming
the identifier for exactly one account.

Per-identifier State Machine
============================

States:
- NO_CODE: No verification code was ever issued
- CODE_ISSUED: A code was delivered and persisted (latest code only)
- REDEEMED: A user record exists for the identifier (terminal)

Transitions:
    NO_CODE     -> CODE_ISSUED  (issue_code)
    CODE_ISSUED -> CODE_ISSUED  (issue_code again, overwrites code and time)
    CODE_ISSUED -> REDEEMED     (redeem with matching, unexpired code)
    REDEEMED    -> CODE_ISSUED  (issue_code is still allowed, but redeem is
                                 blocked forever by user uniqueness)

Ordering guarantees:
- issue_code delivers before it persists, so a code that failed to send
  can never be redeemed. If persisting fails after delivery the user holds
  a code the store never saw; the error propagates and is logged.
- redeem runs every validation check before any write.
"""

import logging
import secrets
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from .codes import format_code, generate_code
from .exceptions import ExpiredCode, StoreError, WrongCode
from .hashing import digest
from .ports import Transport, UserStore, VerificationStore
from .validation import Validator

logger = logging.getLogger(__name__)

DEFAULT_CODE_TTL = timedelta(hours=1)
DEFAULT_MESSAGE_TEMPLATE = "your register code is: {code}"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Orchestrates code issuance (generate, deliver, persist) and
    redemption (validate, check code, hash password, claim identifier).
    """

    validator: Validator
    verification_store: VerificationStore
    user_store: UserStore
    transport: Transport
    code_ttl: timedelta = DEFAULT_CODE_TTL
    message_template: str = DEFAULT_MESSAGE_TEMPLATE
    clock: Callable[[], datetime] = field(default=utc_now)
    code_generator: Callable[[], int] = field(default=generate_code)

    def issue_code(self, identifier: str) -> None:
        """
        Send a fresh verification code and remember it for the identifier.

        Does not check whether the identifier is already registered.

        Args:
            identifier: Email address or phone number

        Raises:
            InvalidIdentifier: If the identifier is malformed (nothing is sent)
            TransportError: If delivery fails (nothing is persisted)
            StoreError: If persisting fails after successful delivery
        """
        self.validator.validate_identifier(identifier)

        code = self.code_generator()
        message = self.message_template.format(code=format_code(code))
        self.transport.send(message, identifier)

        try:
            self.verification_store.upsert(identifier, code, self.clock())
        except StoreError:
            logger.warning(
                "Verification code delivered to %s but could not be persisted", identifier
            )
            raise

        logger.info("Verification code issued for %s", identifier)

    def redeem(self, identifier: str, display_name: str, password: str, code: int) -> None:
        """
        Complete registration by presenting the last issued code.

        Checks run in order and stop at the first failure.

        Args:
            identifier: Email address or phone number
            display_name: ASCII alphanumeric display name
            password: Plaintext password (hashed before storage)
            code: Verification code received by the user

        Raises:
            InvalidIdentifier, InvalidName, InvalidPassword: On malformed input
            ExpiredCode: If no code was issued or the last one is too old
            WrongCode: If the code does not match the last issued one
            DuplicateIdentifier: If the identifier is already registered
            StoreError: If the store fails
        """
        self.validator.validate_identifier(identifier)
        self.validator.validate_name(display_name)
        self.validator.validate_password(password)

        record = self.verification_store.get_latest(identifier)
        # Never issued is treated the same as expired
        if record is None:
            raise ExpiredCode()

        if self.clock() - record.issued_at > self.code_ttl:
            raise ExpiredCode()

        if not secrets.compare_digest(format_code(record.code), format_code(code)):
            raise WrongCode()

        self.user_store.insert(identifier, display_name, digest(password))
        logger.info("User registered: %s", identifier)
