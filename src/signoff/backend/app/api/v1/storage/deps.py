from typing import Annotated

from fastapi import Depends

from signoff.backend.app.application.files.upload_policy import UploadPolicy
from signoff.backend.app.application.files.use_cases import (
    ConfirmUploadUseCase,
    DeleteAttachmentUseCase,
    IssueDownloadCapabilityUseCase,
    IssueUploadCapabilityUseCase,
)
from signoff.backend.app.core.config import settings
from signoff.backend.app.core.deps import (
    get_cleanup_scheduler,
    get_notification_sink,
    get_object_storage,
    get_uow,
    get_upload_policy,
)
from signoff.backend.app.domain.files.interfaces import ObjectCleanupScheduler, ObjectStorage
from signoff.backend.app.domain.notifications import NotificationSink
from signoff.backend.app.infrastructure.db.uow import UnitOfWork


async def get_issue_upload_capability_use_case(
        storage: Annotated[ObjectStorage, Depends(get_object_storage)],
        policy: Annotated[UploadPolicy, Depends(get_upload_policy)],
) -> IssueUploadCapabilityUseCase:
    return IssueUploadCapabilityUseCase(
        storage, policy, upload_expires_in=settings.UPLOAD_URL_EXPIRES_SECONDS
    )


async def get_confirm_upload_use_case(
        uow: Annotated[UnitOfWork, Depends(get_uow)],
        policy: Annotated[UploadPolicy, Depends(get_upload_policy)],
        cleanup: Annotated[ObjectCleanupScheduler, Depends(get_cleanup_scheduler)],
        notifier: Annotated[NotificationSink, Depends(get_notification_sink)],
) -> ConfirmUploadUseCase:
    return ConfirmUploadUseCase(uow, policy, cleanup, notifier)


async def get_issue_download_capability_use_case(
        uow: Annotated[UnitOfWork, Depends(get_uow)],
        storage: Annotated[ObjectStorage, Depends(get_object_storage)],
) -> IssueDownloadCapabilityUseCase:
    return IssueDownloadCapabilityUseCase(
        uow, storage, download_expires_in=settings.DOWNLOAD_URL_EXPIRES_SECONDS
    )


async def get_delete_attachment_use_case(
        uow: Annotated[UnitOfWork, Depends(get_uow)],
        cleanup: Annotated[ObjectCleanupScheduler, Depends(get_cleanup_scheduler)],
        notifier: Annotated[NotificationSink, Depends(get_notification_sink)],
) -> DeleteAttachmentUseCase:
    return DeleteAttachmentUseCase(uow, cleanup, notifier)
