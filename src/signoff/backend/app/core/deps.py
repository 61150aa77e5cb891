from functools import lru_cache
from typing import AsyncIterator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from signoff.backend.app.application.files.upload_policy import UploadPolicy
from signoff.backend.app.application.projects.expiration import ExpirationPolicy
from signoff.backend.app.core.config import settings
from signoff.backend.app.core.security import SecretTokenGenerator
from signoff.backend.app.domain.files.interfaces import ObjectStorage, ObjectCleanupScheduler
from signoff.backend.app.domain.notifications import NotificationSink
from signoff.backend.app.infrastructure.db.session import SessionLocal
from signoff.backend.app.infrastructure.db.uow import UnitOfWork, SqlAlchemyUnitOfWork
from signoff.backend.app.infrastructure.files.cleanup import BackgroundObjectCleanup
from signoff.backend.app.infrastructure.files.r2_storage import R2ObjectStorage, create_r2_client
from signoff.backend.app.infrastructure.notifications.sse_broadcaster import SseNotificationBroadcaster


async def get_session() -> AsyncIterator[AsyncSession]:
    async with SessionLocal() as session:
        yield session


async def get_uow(
    session: AsyncSession = Depends(get_session),
) -> AsyncIterator[UnitOfWork]:
    # the transaction lifecycle (commit/rollback) is handled by UnitOfWork
    uow = SqlAlchemyUnitOfWork(session)
    yield uow


@lru_cache
def get_object_storage() -> ObjectStorage:
    """
    Singleton object storage instance.
    Swap implementation here (R2 / S3 / MinIO) without touching use cases.
    """
    client = create_r2_client(
        endpoint_url=settings.R2_ENDPOINT_URL,
        access_key_id=settings.R2_ACCESS_KEY_ID,
        secret_access_key=settings.R2_SECRET_ACCESS_KEY,
    )
    return R2ObjectStorage(client, settings.R2_BUCKET_NAME)


@lru_cache
def get_cleanup_scheduler() -> ObjectCleanupScheduler:
    return BackgroundObjectCleanup(get_object_storage())


@lru_cache
def get_broadcaster() -> SseNotificationBroadcaster:
    # one per process, created on first use and shared by every request
    return SseNotificationBroadcaster()


def get_notification_sink() -> NotificationSink:
    return get_broadcaster()


@lru_cache
def get_upload_policy() -> UploadPolicy:
    return UploadPolicy(
        allowed_mime_types=tuple(settings.ALLOWED_MIME_TYPES),
        max_size_bytes=settings.MAX_UPLOAD_SIZE_BYTES,
    )


@lru_cache
def get_expiration_policy() -> ExpirationPolicy:
    return ExpirationPolicy(default_days=settings.DEFAULT_EXPIRATION_DAYS)


@lru_cache
def get_token_generator() -> SecretTokenGenerator:
    return SecretTokenGenerator()
