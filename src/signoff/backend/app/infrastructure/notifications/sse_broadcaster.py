from __future__ import annotations

import asyncio
import json
import logging
from collections import defaultdict
from typing import Any, AsyncIterator

logger = logging.getLogger(__name__)


class SseNotificationBroadcaster:
    """
    Per-project fan-out to server-sent-event streams.

    Each subscriber gets its own bounded queue; a subscriber that falls behind
    loses events rather than slowing the emitter down.
    """

    def __init__(self, max_queue_size: int = 100) -> None:
        self._max_queue_size = max_queue_size
        self._queues: dict[str, set[asyncio.Queue]] = defaultdict(set)

    async def emit(self, topic: str, event: str, payload: dict[str, Any]) -> None:
        message = format_sse(event, payload)
        for queue in list(self._queues.get(topic, ())):
            try:
                queue.put_nowait(message)
            except asyncio.QueueFull:
                logger.warning("Dropping %s for a slow subscriber on %s", event, topic)

    def subscribe(self, topic: str) -> asyncio.Queue:
        queue: asyncio.Queue = asyncio.Queue(maxsize=self._max_queue_size)
        self._queues[topic].add(queue)
        return queue

    def unsubscribe(self, topic: str, queue: asyncio.Queue) -> None:
        subscribers = self._queues.get(topic)
        if subscribers is None:
            return
        subscribers.discard(queue)
        if not subscribers:
            del self._queues[topic]

    def subscriber_count(self, topic: str) -> int:
        return len(self._queues.get(topic, ()))

    async def stream(self, topic: str, queue: asyncio.Queue) -> AsyncIterator[str]:
        try:
            yield "event: connected\ndata: {}\n\n"
            while True:
                yield await queue.get()
        finally:
            self.unsubscribe(topic, queue)


def format_sse(event: str, payload: dict[str, Any]) -> str:
    return f"event: {event}\ndata: {json.dumps(payload, default=str)}\n\n"
