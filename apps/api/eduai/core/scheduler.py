from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class ExpiryScheduler:
    """Delayed, cancellable callbacks keyed by an id.

    Scheduling a key that is already pending replaces the earlier task, so a
    reused id never fires a stale expiry.
    """

    def __init__(self) -> None:
        self._tasks: dict[str, asyncio.Task] = {}

    def schedule(self, key: str, delay_seconds: float, callback: Callable[[str], None]) -> None:
        self.cancel(key)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop; %s will not auto-expire", key)
            return
        task = loop.create_task(self._fire_later(key, delay_seconds, callback))
        self._tasks[key] = task

    async def _fire_later(self, key: str, delay_seconds: float, callback: Callable[[str], None]) -> None:
        await asyncio.sleep(delay_seconds)
        if self._tasks.get(key) is asyncio.current_task():
            self._tasks.pop(key, None)
        callback(key)

    def cancel(self, key: str) -> bool:
        task = self._tasks.pop(key, None)
        if task is None:
            return False
        task.cancel()
        return True

    def pending(self) -> list[str]:
        return [key for key, task in self._tasks.items() if not task.done()]

    def cancel_all(self) -> None:
        for key in list(self._tasks):
            self.cancel(key)
