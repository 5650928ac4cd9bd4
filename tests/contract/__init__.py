"""Contract tests.

Purpose
- State the RoomStore behavior once and run it against every implementation
  (in-memory and SQLAlchemy) so either can back the removal workflow.

Guidelines
- Implementations are selected by a parametrized fixture.
- Only the public port is exercised: lookups, update, and seeding.
"""
