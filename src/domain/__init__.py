"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for verification-code
registration and password login. It defines its own port interfaces for
infrastructure abstraction, keeping storage and delivery swappable.
"""

from .exceptions import (
    DuplicateIdentifier,
    ExpiredCode,
    InvalidArgument,
    InvalidIdentifier,
    InvalidName,
    InvalidPassword,
    ServiceError,
    StoreError,
    TransportError,
    WrongCode,
    WrongCredentials,
)
from .login import LoginService
from .ports import IdentifierMode, Transport, UserStore, VerificationRecord, VerificationStore
from .registration import RegistrationService
from .validation import Validator

__all__ = [
    "DuplicateIdentifier",
    "ExpiredCode",
    "IdentifierMode",
    "InvalidArgument",
    "InvalidIdentifier",
    "InvalidName",
    "InvalidPassword",
    "LoginService",
    "RegistrationService",
    "ServiceError",
    "StoreError",
    "Transport",
    "TransportError",
    "UserStore",
    "Validator",
    "VerificationRecord",
    "VerificationStore",
    "WrongCode",
    "WrongCredentials",
]
