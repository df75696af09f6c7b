"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Validators for both identifier modes
- A controllable clock
- In-memory stores and a recording transport
"""

import pytest

from src.adapters.repository.memory import InMemoryUserStore, InMemoryVerificationStore
from src.domain.ports import IdentifierMode
from src.domain.validation import Validator
from tests.doubles import FakeClock, RecordingTransport


@pytest.fixture
def email_validator() -> Validator:
    return Validator(IdentifierMode.EMAIL)


@pytest.fixture
def phone_validator() -> Validator:
    return Validator(IdentifierMode.PHONE)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def verification_store() -> InMemoryVerificationStore:
    return InMemoryVerificationStore()


@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()
