"""Room store adapters.

- `InMemoryRoomStore`: non-durable, for tests and prototyping.
- `SqlAlchemyRoomStore`: durable, backed by a SQLAlchemy asyncio engine.

Both implementations pass the same contract tests for the `RoomStore` port.
"""

from .memory import InMemoryRoomStore
from .sqlalchemy_store import SqlAlchemyRoomStore

__all__ = ["InMemoryRoomStore", "SqlAlchemyRoomStore"]
