"""
In-memory repository adapters - Implement VerificationStore and UserStore.

Process-local dict-backed stores for development and tests. A lock per
store gives the same atomicity the PostgreSQL adapters get from their
single-statement writes. Data is lost on restart.
"""

import threading
from datetime import datetime

from src.domain.exceptions import DuplicateIdentifier
from src.domain.ports import VerificationRecord


class InMemoryVerificationStore:
    """Implements VerificationStore protocol with a dict."""

    def __init__(self) -> None:
        self._records: dict[str, VerificationRecord] = {}
        self._lock = threading.Lock()

    def upsert(self, identifier: str, code: int, issued_at: datetime) -> None:
        record = VerificationRecord(identifier=identifier, code=code, issued_at=issued_at)
        with self._lock:
            self._records[identifier] = record

    def get_latest(self, identifier: str) -> VerificationRecord | None:
        with self._lock:
            return self._records.get(identifier)


class InMemoryUserStore:
    """Implements UserStore protocol with a dict keyed by identifier."""

    def __init__(self) -> None:
        self._users: dict[str, tuple[str, str]] = {}
        self._lock = threading.Lock()

    def insert(self, identifier: str, display_name: str, password_digest: str) -> None:
        with self._lock:
            if identifier in self._users:
                raise DuplicateIdentifier(identifier)
            self._users[identifier] = (display_name, password_digest)

    def find_by_credentials(self, identifier: str, password_digest: str) -> bool:
        with self._lock:
            user = self._users.get(identifier)
        return user is not None and user[1] == password_digest

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
