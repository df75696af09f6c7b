"""
PostgreSQL repository adapters - Implement VerificationStore and UserStore.

This module provides the PostgreSQL implementations of the domain's
storage ports using psycopg3 with raw SQL.

Atomicity Design:
-----------------
Neither adapter reads before it writes. Each operation is one statement,
so concurrent requests for the same identifier are serialized by the
primary key constraint instead of application-level locks:

1. **upsert**: INSERT ... ON CONFLICT (identifier) DO UPDATE replaces code
   and issued_at together, so the stored pair always comes from a single call.

2. **insert**: INSERT ... ON CONFLICT (identifier) DO NOTHING. A rowcount of
   0 means another registration already holds the identifier.

issued_at is written as given by the caller, never from NOW(), so expiry is
judged against a single clock.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path

import psycopg
from psycopg_pool import ConnectionPool

from src.domain.exceptions import DuplicateIdentifier, StoreError
from src.domain.ports import VerificationRecord

logger = logging.getLogger(__name__)


@contextmanager
def _translate_errors(operation: str) -> Iterator[None]:
    """Re-raise driver and pool failures as StoreError."""
    try:
        yield
    except psycopg.Error as e:
        logger.error("Database error during %s: %s", operation, e)
        raise StoreError() from e


class PostgresVerificationStore:
    """
    Implements VerificationStore protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize store with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def upsert(self, identifier: str, code: int, issued_at: datetime) -> None:
        """
        Create or overwrite the verification record for an identifier.

        Args:
            identifier: Account identifier (email or phone)
            code: 6-digit verification code
            issued_at: Timezone-aware issuance time
        """
        sql = """
            INSERT INTO verification_codes (identifier, code, issued_at)
            VALUES (%s, %s, %s)
            ON CONFLICT (identifier) DO UPDATE
            SET code = EXCLUDED.code,
                issued_at = EXCLUDED.issued_at
        """

        with _translate_errors("upsert"), self._pool.connection() as conn:
            conn.execute(sql, (identifier, code, issued_at))
            conn.commit()

    def get_latest(self, identifier: str) -> VerificationRecord | None:
        """
        Fetch the current verification record.

        Returns:
            VerificationRecord, or None if no code was ever issued
        """
        sql = """
            SELECT code, issued_at
            FROM verification_codes
            WHERE identifier = %s
        """

        with _translate_errors("get_latest"), self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (identifier,))
            row = cursor.fetchone()

        if row is None:
            return None
        return VerificationRecord(identifier=identifier, code=row[0], issued_at=row[1])


class PostgresUserStore:
    """
    Implements UserStore protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    def insert(self, identifier: str, display_name: str, password_digest: str) -> None:
        """
        Atomically create a user unless the identifier is taken.

        The PRIMARY KEY on identifier makes the claim race-free: of several
        concurrent inserts exactly one affects a row.

        Raises:
            DuplicateIdentifier: If the identifier is already registered
        """
        sql = """
            INSERT INTO users (identifier, name, password_digest)
            VALUES (%s, %s, %s)
            ON CONFLICT (identifier) DO NOTHING
        """

        with _translate_errors("insert"), self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (identifier, display_name, password_digest))
            conn.commit()
            inserted = cursor.rowcount == 1

        if not inserted:
            raise DuplicateIdentifier(identifier)

    def find_by_credentials(self, identifier: str, password_digest: str) -> bool:
        """Return True iff a user has exactly this identifier and digest."""
        sql = """
            SELECT 1 FROM users
            WHERE identifier = %s AND password_digest = %s
        """

        with _translate_errors("find_by_credentials"), self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (identifier, password_digest))
            return cursor.fetchone() is not None


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            with pool.connection() as conn:
                conn.execute(sql_file.read_text())
            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
