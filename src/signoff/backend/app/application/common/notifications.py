from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from signoff.backend.app.domain.notifications import NotificationSink, ProjectEvent

logger = logging.getLogger(__name__)


async def emit_safely(
        sink: NotificationSink,
        project_id: UUID,
        event: ProjectEvent,
        payload: dict[str, Any],
) -> None:
    # notifications are hints to refetch; a failed emit never fails the request
    try:
        await sink.emit(str(project_id), event.value, payload)
    except Exception:
        logger.warning("Failed to emit %s for project %s", event.value, project_id, exc_info=True)
