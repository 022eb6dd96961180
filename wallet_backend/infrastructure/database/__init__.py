"""Database infrastructure helpers (engine, sessions, migrations)."""

from .base import Base
from .session import TransactionScope, build_engine, build_session_factory, enable_sqlite_foreign_keys, init_db

__all__ = [
    "Base",
    "TransactionScope",
    "build_engine",
    "build_session_factory",
    "enable_sqlite_foreign_keys",
    "init_db",
]
