"""Functional tests.

Purpose
- Drive the ``roomkeeper`` CLI as a user would and check outputs, prompts,
  exit codes, and what ends up in the database.

Guidelines
- Seed data through the store, never through raw SQL.
- One flow per test.
"""
