"""Run a coroutine against a freshly bootstrapped application."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

from roomkeeper.bootstrap import AppContainer, bootstrap

T = TypeVar("T")


def run_with_app(url: str, fn: Callable[[AppContainer], Awaitable[T]]) -> T:
    """Bootstrap against ``url``, await ``fn(app)`` and release the engine.

    Args:
        url: Database URL handed to the bootstrap.
        fn: Coroutine function receiving the application container.

    Returns:
        Whatever ``fn`` returned.
    """

    async def _main() -> T:
        app = bootstrap(url)
        try:
            return await fn(app)
        finally:
            await app.aclose()

    return asyncio.run(_main())
