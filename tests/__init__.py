"""ROOMKEEPER test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real interactions with a database (SQLite files, Alembic).
- functional/   : User-visible CLI flows tested end-to-end at the boundary.
- contract/     : Shared behavior enforced across every RoomStore implementation.
- fixtures/     : Shared pytest fixtures (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); prefer fakes over mocks at boundaries.
- Coroutine tests are marked ``@pytest.mark.asyncio``; async fixtures use
  ``pytest_asyncio.fixture``.
- Tests that drive ``asyncio.run`` themselves (CLI, Alembic) stay synchronous.
- Markers: unit, integration, functional, contract, property, slow
"""
