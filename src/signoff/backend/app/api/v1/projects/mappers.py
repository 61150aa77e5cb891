from signoff.backend.app.api.v1.common.deps import RequestMeta
from signoff.backend.app.api.v1.projects.schemas import (
    AdminProjectResponse,
    AttachmentResponse,
    AuditLogResponse,
    PublicFileResponse,
    PublicProjectResponse,
    ProjectResponse,
    SubmitDecisionRequest,
)
from signoff.backend.app.application.projects.dto import (
    AdminProjectViewDTO,
    GetPublicViewInputDTO,
    PublicProjectViewDTO,
    SubmitDecisionInputDTO,
)


def get_public_view_input_dto(token: str, meta: RequestMeta) -> GetPublicViewInputDTO:
    return GetPublicViewInputDTO(
        public_token=token,
        ip_address=meta.ip_address,
        user_agent=meta.user_agent,
    )


def get_submit_decision_input_dto(
        token: str,
        body: SubmitDecisionRequest,
        meta: RequestMeta,
) -> SubmitDecisionInputDTO:
    return SubmitDecisionInputDTO(
        public_token=token,
        decision=body.decision,
        comment=body.comment,
        ip_address=meta.ip_address,
        user_agent=meta.user_agent,
    )


def admin_view_dto_to_schema(view: AdminProjectViewDTO) -> AdminProjectResponse:
    return AdminProjectResponse(
        project=ProjectResponse.model_validate(view.project),
        file=AttachmentResponse.model_validate(view.file) if view.file else None,
        logs=[AuditLogResponse.model_validate(entry) for entry in view.logs],
        latest_comment=view.latest_comment,
    )


def public_view_dto_to_schema(view: PublicProjectViewDTO) -> PublicProjectResponse:
    return PublicProjectResponse(
        name=view.name,
        status=view.status,
        expires_at=view.expires_at,
        file=PublicFileResponse.model_validate(view.file) if view.file else None,
        client_feedback=view.client_feedback,
    )
