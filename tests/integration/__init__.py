"""Integration tests.

Purpose
- Run against real SQLite files: Alembic migrations, the SQL room store under
  concurrent writers, and the bootstrap wiring.

Guidelines
- One temporary database file per test.
- Synchronous tests when Alembic or the CLI drive their own event loop.
"""
