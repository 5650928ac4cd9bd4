"""Exceptions for room store operations."""


class RoomStoreError(Exception):
    """Base class for room store errors."""


class RoomNotFoundError(RoomStoreError):
    """No room matches the lookup.

    Attributes:
        lookup (str): What was looked up (e.g. "room code", "participant code").
        value (str): The value that did not resolve.
    """

    def __init__(self, lookup: str, value: str):
        super().__init__(f"No room found for {lookup} '{value}'.")
        self.lookup = lookup
        self.value = value


class PersistenceError(RoomStoreError):
    """The store rejected a write. Nothing from the write was applied."""


class ConcurrentModificationError(PersistenceError):
    """Conflict: the stored room changed since it was loaded.

    Attributes:
        room_code (str): The room whose write was rejected.
        expected_version (int): The version the writer loaded.
        actual_version (int | None): The version the store holds, if known.
    """

    def __init__(
        self, room_code: str, expected_version: int, actual_version: int | None
    ):
        super().__init__(
            f"Room '{room_code}' was modified concurrently "
            f"(expected version {expected_version}, found {actual_version})."
        )
        self.room_code = room_code
        self.expected_version = expected_version
        self.actual_version = actual_version
