from __future__ import annotations

from enum import StrEnum
from typing import Any, Protocol


class ProjectEvent(StrEnum):
    STATUS_UPDATED = "project-status-updated"
    EXPIRATION_UPDATED = "project-expiration-updated"
    FILE_UPDATED = "project-file-updated"
    DELETED = "project-deleted"


class NotificationSink(Protocol):
    """
    Fire-and-forget channel towards connected clients. Delivery is not
    guaranteed; receivers treat events as a hint to refetch.
    """

    async def emit(self, topic: str, event: str, payload: dict[str, Any]) -> None: ...
