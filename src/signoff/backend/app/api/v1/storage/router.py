from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, status

from signoff.backend.app.api.v1.common.deps import admin_identity_dep
from signoff.backend.app.api.v1.storage.deps import (
    get_confirm_upload_use_case,
    get_delete_attachment_use_case,
    get_issue_download_capability_use_case,
    get_issue_upload_capability_use_case,
)
from signoff.backend.app.api.v1.storage.mappers import (
    get_confirm_upload_input_dto,
    get_delete_attachment_input_dto,
    get_download_input_dto,
    get_issue_upload_input_dto,
)
from signoff.backend.app.api.v1.storage.schemas import (
    AttachmentResponse,
    ConfirmUploadRequest,
    ConfirmUploadResponse,
    DeleteFileResponse,
    DownloadUrlResponse,
    SignUrlRequest,
    SignUrlResponse,
)
from signoff.backend.app.application.files.use_cases import (
    ConfirmUploadUseCase,
    DeleteAttachmentUseCase,
    IssueDownloadCapabilityUseCase,
    IssueUploadCapabilityUseCase,
)

router = APIRouter(prefix="/storage", tags=["storage"])

issue_upload_dep = Annotated[IssueUploadCapabilityUseCase, Depends(get_issue_upload_capability_use_case)]
confirm_upload_dep = Annotated[ConfirmUploadUseCase, Depends(get_confirm_upload_use_case)]
issue_download_dep = Annotated[IssueDownloadCapabilityUseCase, Depends(get_issue_download_capability_use_case)]
delete_attachment_dep = Annotated[DeleteAttachmentUseCase, Depends(get_delete_attachment_use_case)]


@router.post("/sign-url", response_model=SignUrlResponse)
async def get_upload_url(
        identity: admin_identity_dep,
        use_case: issue_upload_dep,
        body: SignUrlRequest,
):
    capability = await use_case.execute(get_issue_upload_input_dto(identity, body))
    return SignUrlResponse(upload_url=capability.upload_url, key=capability.key)


@router.post("/confirm", response_model=ConfirmUploadResponse, status_code=status.HTTP_201_CREATED)
async def confirm_upload(
        identity: admin_identity_dep,
        use_case: confirm_upload_dep,
        body: ConfirmUploadRequest,
):
    attachment = await use_case.execute(get_confirm_upload_input_dto(identity, body))
    return ConfirmUploadResponse(attachment=AttachmentResponse.model_validate(attachment))


@router.get("/download/{file_id}", response_model=DownloadUrlResponse)
async def get_download_url(
        identity: admin_identity_dep,
        use_case: issue_download_dep,
        file_id: UUID,
):
    capability = await use_case.execute(get_download_input_dto(identity, file_id))
    return DownloadUrlResponse.model_validate(capability)


@router.delete("/{file_id}", response_model=DeleteFileResponse)
async def delete_attachment(
        identity: admin_identity_dep,
        use_case: delete_attachment_dep,
        file_id: UUID,
):
    result = await use_case.execute(get_delete_attachment_input_dto(identity, file_id))
    return DeleteFileResponse(success=result.success)
