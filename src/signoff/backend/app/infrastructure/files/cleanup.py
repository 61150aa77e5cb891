from __future__ import annotations

import asyncio
import logging

from signoff.backend.app.domain.files.interfaces import ObjectStorage

logger = logging.getLogger(__name__)


class BackgroundObjectCleanup:
    """
    Deletes unreferenced objects on the running event loop without making
    the request wait. A failed delete leaves an orphan and a log line.
    """

    def __init__(self, storage: ObjectStorage) -> None:
        self._storage = storage
        self._tasks: set[asyncio.Task] = set()

    def schedule_delete(self, key: str) -> None:
        try:
            task = asyncio.get_running_loop().create_task(self._delete(key))
        except RuntimeError:
            logger.warning("No running event loop, object %s left orphaned", key)
            return
        # hold a reference until done, the loop only keeps weak ones
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def drain(self) -> None:
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    async def _delete(self, key: str) -> None:
        try:
            await self._storage.delete(key=key)
            logger.info("Deleted orphaned object %s", key)
        except Exception:
            logger.warning("Failed to delete object %s, leaving it orphaned", key, exc_info=True)
