import httpx
import pytest_asyncio

from signoff.backend.app.core.deps import (
    get_broadcaster,
    get_cleanup_scheduler,
    get_notification_sink,
    get_object_storage,
    get_token_generator,
    get_uow,
)
from signoff.backend.app.infrastructure.notifications.sse_broadcaster import SseNotificationBroadcaster
from signoff.backend.app.main import create_app


@pytest_asyncio.fixture
async def app(uow, storage, cleanup, notifier, tokens):
    app = create_app()
    app.dependency_overrides[get_uow] = lambda: uow
    app.dependency_overrides[get_object_storage] = lambda: storage
    app.dependency_overrides[get_cleanup_scheduler] = lambda: cleanup
    app.dependency_overrides[get_notification_sink] = lambda: notifier
    app.dependency_overrides[get_token_generator] = lambda: tokens
    app.dependency_overrides[get_broadcaster] = SseNotificationBroadcaster
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test/api/v1") as c:
        yield c
