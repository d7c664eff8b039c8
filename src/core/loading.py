"""Loading indicator.

Side-effect only: a message is pushed on the loading surface before a
network call and popped once it settles, after a short cosmetic delay.

Delayed pops run as tasks. If the event loop shuts down first, the pending
task is cancelled and still pops its message, so the surface never keeps a
stale "Loading..." around.

Not reentrant-safe. Overlapping calls push and pop independently, so the
surface may briefly show the wrong state.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from core.interfaces.surfaces import LoadingSurface


class LoadingIndicator:
    def __init__(
        self,
        surface: LoadingSurface,
        *,
        hide_delay: float = 0.3,
        message: str = "Loading...",
    ) -> None:
        self._surface = surface
        self._hide_delay = max(0.0, hide_delay)
        self._message = message
        self._pending: set[asyncio.Task[None]] = set()

    def show(self) -> None:
        self._surface.push_message(self._message)

    async def _pop_later(self) -> None:
        try:
            await asyncio.sleep(self._hide_delay)
        finally:
            self._surface.pop_message()

    def hide(self) -> None:
        if self._hide_delay <= 0:
            self._surface.pop_message()
            return
        task = asyncio.get_running_loop().create_task(self._pop_later())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def settle(self) -> None:
        """Wait until every scheduled hide has run."""

        while self._pending:
            await asyncio.gather(*self._pending)

    @asynccontextmanager
    async def track(self) -> AsyncIterator[None]:
        """Wrap exactly one network call."""

        self.show()
        try:
            yield
        finally:
            self.hide()
