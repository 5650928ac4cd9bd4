"""Service layer handlers."""

from collections.abc import Awaitable, Callable

from .room_handlers import COMMAND_HANDLERS as ROOM_COMMAND_HANDLERS

__all__ = ["COMMAND_HANDLERS"]

COMMAND_HANDLERS: dict[type, Callable[..., Awaitable[object]]] = {
    **ROOM_COMMAND_HANDLERS,
}
