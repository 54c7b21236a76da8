from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FileWriteQueue:
    """Serialize writes per file; writes to different files run concurrently.

    Each write runs in a worker thread while holding the lock for its file,
    so a second edit to the same file always reads the result of the first.
    """

    def __init__(self) -> None:
        self._locks: dict[Path, asyncio.Lock] = {}
        self._users: dict[Path, int] = {}

    def _lock_for(self, path: Path) -> asyncio.Lock:
        lock = self._locks.get(path)
        if lock is None:
            lock = self._locks[path] = asyncio.Lock()
        return lock

    def _release(self, path: Path) -> None:
        self._users[path] -= 1
        if not self._users[path]:
            del self._users[path]
            del self._locks[path]

    async def run(self, path: Path, operation: Callable[[], T]) -> T:
        lock = self._lock_for(path)
        self._users[path] = self._users.get(path, 0) + 1
        try:
            if lock.locked():
                logger.debug("Waiting for pending write to %s", path)
            async with lock:
                return await asyncio.to_thread(operation)
        finally:
            self._release(path)
