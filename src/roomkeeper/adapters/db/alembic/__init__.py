"""Packaged Alembic migration environment and revision scripts."""
