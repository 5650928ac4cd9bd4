"""Utility enums and helpers for database dialect handling.

Centralizes the dialect names ROOMKEEPER knows how to talk to so that checks
such as "is this SQLite?" do not scatter string literals around the adapters.
Async driver suffixes (``+aiosqlite``, ``+asyncpg``, ``+psycopg``) are
accepted and stripped.
"""

from __future__ import annotations

from enum import Enum


class UnsupportedDialect(Exception):
    """Raised when an unsupported database dialect is encountered."""


class DialectName(str, Enum):
    """Enumeration of supported SQLAlchemy dialect names.

    Attributes:
        POSTGRES: PostgreSQL dialect (``"postgresql"``).
        SQLITE:   SQLite dialect (``"sqlite"``).
    """

    POSTGRES = "postgresql"
    SQLITE = "sqlite"

    @classmethod
    def from_string(cls, dialect_str: str) -> DialectName:
        """Normalize a dialect or URL drivername to a DialectName.

        Args:
            dialect_str: a raw dialect string such as ``"sqlite+aiosqlite"``.

        Returns:
            The corresponding DialectName enum member.

        Raises:
            UnsupportedDialect: if the dialect is not recognized or supported.
        """

        base = (dialect_str or "").strip().lower().split("+", 1)[0]
        if base in {"postgres", "postgresql", "pg"}:
            return cls.POSTGRES
        if base == "sqlite":
            return cls.SQLITE
        raise UnsupportedDialect(f"Unsupported dialect: {dialect_str!r}")
