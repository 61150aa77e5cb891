from typing import Annotated

from fastapi import Depends

from signoff.backend.app.application.projects.expiration import ExpirationPolicy
from signoff.backend.app.application.projects.use_cases import (
    CreateProjectUseCase,
    DeleteProjectUseCase,
    ExtendExpirationUseCase,
    GetAdminViewUseCase,
    GetPublicViewUseCase,
    SubmitDecisionUseCase,
)
from signoff.backend.app.core.config import settings
from signoff.backend.app.core.deps import (
    get_cleanup_scheduler,
    get_expiration_policy,
    get_notification_sink,
    get_object_storage,
    get_token_generator,
    get_uow,
)
from signoff.backend.app.core.security import SecretTokenGenerator
from signoff.backend.app.domain.files.interfaces import ObjectCleanupScheduler, ObjectStorage
from signoff.backend.app.domain.notifications import NotificationSink
from signoff.backend.app.infrastructure.db.uow import UnitOfWork


async def get_create_project_use_case(
        uow: Annotated[UnitOfWork, Depends(get_uow)],
        tokens: Annotated[SecretTokenGenerator, Depends(get_token_generator)],
        expiration: Annotated[ExpirationPolicy, Depends(get_expiration_policy)],
) -> CreateProjectUseCase:
    return CreateProjectUseCase(uow, tokens, expiration)


async def get_admin_view_use_case(
        uow: Annotated[UnitOfWork, Depends(get_uow)],
        storage: Annotated[ObjectStorage, Depends(get_object_storage)],
) -> GetAdminViewUseCase:
    return GetAdminViewUseCase(uow, storage, download_expires_in=settings.DOWNLOAD_URL_EXPIRES_SECONDS)


async def get_public_view_use_case(
        uow: Annotated[UnitOfWork, Depends(get_uow)],
        storage: Annotated[ObjectStorage, Depends(get_object_storage)],
        expiration: Annotated[ExpirationPolicy, Depends(get_expiration_policy)],
) -> GetPublicViewUseCase:
    return GetPublicViewUseCase(
        uow, storage, expiration, download_expires_in=settings.DOWNLOAD_URL_EXPIRES_SECONDS
    )


async def get_submit_decision_use_case(
        uow: Annotated[UnitOfWork, Depends(get_uow)],
        notifier: Annotated[NotificationSink, Depends(get_notification_sink)],
        expiration: Annotated[ExpirationPolicy, Depends(get_expiration_policy)],
) -> SubmitDecisionUseCase:
    return SubmitDecisionUseCase(uow, notifier, expiration)


async def get_extend_expiration_use_case(
        uow: Annotated[UnitOfWork, Depends(get_uow)],
        expiration: Annotated[ExpirationPolicy, Depends(get_expiration_policy)],
        notifier: Annotated[NotificationSink, Depends(get_notification_sink)],
) -> ExtendExpirationUseCase:
    return ExtendExpirationUseCase(uow, expiration, notifier)


async def get_delete_project_use_case(
        uow: Annotated[UnitOfWork, Depends(get_uow)],
        cleanup: Annotated[ObjectCleanupScheduler, Depends(get_cleanup_scheduler)],
        notifier: Annotated[NotificationSink, Depends(get_notification_sink)],
) -> DeleteProjectUseCase:
    return DeleteProjectUseCase(uow, cleanup, notifier)
