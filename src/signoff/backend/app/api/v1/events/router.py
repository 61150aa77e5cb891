from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse

from signoff.backend.app.api.v1.common.deps import get_resolve_token_use_case
from signoff.backend.app.application.projects.use_cases import ResolveProjectTokenUseCase
from signoff.backend.app.core.deps import get_broadcaster
from signoff.backend.app.domain.common.errors import Unauthorized
from signoff.backend.app.infrastructure.notifications.sse_broadcaster import SseNotificationBroadcaster

router = APIRouter(prefix="/events", tags=["events"])


@router.get("")
async def project_events(
        token: Annotated[str, Query(min_length=1)],
        use_case: Annotated[ResolveProjectTokenUseCase, Depends(get_resolve_token_use_case)],
        broadcaster: Annotated[SseNotificationBroadcaster, Depends(get_broadcaster)],
):
    """Opens a server-sent-event stream for the project either token belongs to."""
    identity = await use_case.execute(token)
    if identity is None:
        raise Unauthorized()

    topic = str(identity.project_id)
    queue = broadcaster.subscribe(topic)
    return StreamingResponse(
        broadcaster.stream(topic, queue),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
