"""Command dispatch.

The bus owns no business logic: it looks up the coroutine registered for a
command's type, awaits it and returns its result. Rule violations come back
as ``Failure`` values from the handler; anything raised is logged here and
re-raised untouched, so ``asyncio.CancelledError`` reaches the caller as-is.
"""

import logging
from collections.abc import Awaitable, Callable, Mapping

from .commands import Command

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods

Handler = Callable[..., Awaitable[object]]


class NoHandlerForCommand(LookupError):
    """Raised for a command type the bus was not configured with."""

    def __init__(self, cmd: Command) -> None:
        self.command_type = type(cmd)
        super().__init__(f"No handler registered for {self.command_type.__name__}")


def describe_handler(fn: Callable[..., object]) -> str:
    """Human-readable handler name; unwraps ``functools.partial``."""
    target = getattr(fn, "func", fn)
    return getattr(target, "__name__", None) or repr(fn)


class MessageBus:
    """Route commands to their handlers.

    Args:
        command_handlers: Command type to coroutine function. Handlers take
            the command as their only argument; collaborators such as the
            room store are bound beforehand (see ``bootstrap``).
    """

    def __init__(self, command_handlers: Mapping[type[Command], Handler]) -> None:
        self._command_handlers = dict(command_handlers)

    async def handle(self, cmd: Command) -> object:
        """Dispatch ``cmd`` and return the handler's result.

        Raises:
            NoHandlerForCommand: Nothing is registered for ``type(cmd)``.
        """

        handler = self._command_handlers.get(type(cmd))
        if handler is None:
            logger.error("Dropping %s: no handler registered", type(cmd).__name__)
            raise NoHandlerForCommand(cmd)

        name = describe_handler(handler)
        logger.debug("Dispatching %s to %s", cmd, name)
        try:
            return await handler(cmd)
        except Exception:  # pylint: disable=broad-except
            logger.exception("%s failed while handling %s", name, cmd)
            raise
