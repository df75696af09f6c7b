"""Repository adapters - Database and in-memory implementations."""

from .memory import InMemoryUserStore, InMemoryVerificationStore
from .postgres import PostgresUserStore, PostgresVerificationStore, run_migrations

__all__ = [
    "InMemoryUserStore",
    "InMemoryVerificationStore",
    "PostgresUserStore",
    "PostgresVerificationStore",
    "run_migrations",
]
