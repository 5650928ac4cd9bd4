"""ROOMKEEPER Room Store Interface Package"""

from .errors import (
    ConcurrentModificationError,
    PersistenceError,
    RoomNotFoundError,
    RoomStoreError,
)
from .room_store import RoomStore

__all__ = [
    "ConcurrentModificationError",
    "PersistenceError",
    "RoomNotFoundError",
    "RoomStore",
    "RoomStoreError",
]
