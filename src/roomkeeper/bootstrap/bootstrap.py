"""Bootstrap the message bus with handlers and the room store."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from roomkeeper import config
from roomkeeper.adapters.db.engine import make_engine
from roomkeeper.adapters.room_store import SqlAlchemyRoomStore
from roomkeeper.service_layer.handlers import COMMAND_HANDLERS
from roomkeeper.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine

    from roomkeeper.interfaces.room_store import RoomStore
    from roomkeeper.service_layer.commands import Command


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    message_bus: MessageBus
    room_store: RoomStore
    engine: AsyncEngine | None = None

    async def aclose(self) -> None:
        """Release pooled database connections, if any."""
        if self.engine is not None:
            await self.engine.dispose()


def build_room_store(url: str) -> tuple[RoomStore, AsyncEngine]:
    """Build the SQL room store and the engine it runs on."""
    engine = make_engine(url)
    return SqlAlchemyRoomStore(engine), engine


def build_message_bus(
    room_store: RoomStore,
    command_handlers: dict[type[Command], Callable[..., Awaitable[object]]],
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"room_store": room_store}
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(command_handlers=injected_command_handlers)


def bootstrap(url: str | None = None) -> AppContainer:
    """Bootstrap the message bus against the configured database."""
    room_store, engine = build_room_store(url or config.get_db_url())
    message_bus = build_message_bus(room_store, COMMAND_HANDLERS)

    return AppContainer(message_bus=message_bus, room_store=room_store, engine=engine)


def inject_dependencies(
    handler: Callable[..., Awaitable[object]], dependencies: Mapping[str, object]
) -> Callable[..., Awaitable[object]]:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }

    async def injected(message):
        return await handler(message, **deps)

    injected.__name__ = getattr(handler, "__name__", repr(handler))
    return injected
