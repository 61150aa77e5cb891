from typing import Annotated

from fastapi import APIRouter, Depends, status

from signoff.backend.app.api.v1.common.deps import admin_identity_dep, request_meta_dep
from signoff.backend.app.api.v1.projects.deps import (
    get_admin_view_use_case,
    get_create_project_use_case,
    get_delete_project_use_case,
    get_extend_expiration_use_case,
    get_public_view_use_case,
    get_submit_decision_use_case,
)
from signoff.backend.app.api.v1.projects.mappers import (
    admin_view_dto_to_schema,
    get_public_view_input_dto,
    get_submit_decision_input_dto,
    public_view_dto_to_schema,
)
from signoff.backend.app.api.v1.projects.schemas import (
    AdminProjectResponse,
    CreateProjectRequest,
    DecisionResponse,
    ExtendExpirationRequest,
    ProjectResponse,
    PublicProjectResponse,
    SubmitDecisionRequest,
    SuccessResponse,
)
from signoff.backend.app.application.projects.dto import (
    CreateProjectInputDTO,
    DeleteProjectInputDTO,
    ExtendExpirationInputDTO,
    GetAdminViewInputDTO,
)
from signoff.backend.app.application.projects.use_cases import (
    CreateProjectUseCase,
    DeleteProjectUseCase,
    ExtendExpirationUseCase,
    GetAdminViewUseCase,
    GetPublicViewUseCase,
    SubmitDecisionUseCase,
)

router = APIRouter(prefix="/projects", tags=["projects"])

create_project_dep = Annotated[CreateProjectUseCase, Depends(get_create_project_use_case)]
admin_view_dep = Annotated[GetAdminViewUseCase, Depends(get_admin_view_use_case)]
public_view_dep = Annotated[GetPublicViewUseCase, Depends(get_public_view_use_case)]
submit_decision_dep = Annotated[SubmitDecisionUseCase, Depends(get_submit_decision_use_case)]
extend_expiration_dep = Annotated[ExtendExpirationUseCase, Depends(get_extend_expiration_use_case)]
delete_project_dep = Annotated[DeleteProjectUseCase, Depends(get_delete_project_use_case)]


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
        body: CreateProjectRequest,
        use_case: create_project_dep,
):
    # the caller must keep admin_token: it is the only way back in
    project_dto = await use_case.execute(CreateProjectInputDTO(name=body.name))
    return ProjectResponse.model_validate(project_dto)


@router.get("/admin/me", response_model=AdminProjectResponse)
async def get_admin_view(
        identity: admin_identity_dep,
        use_case: admin_view_dep,
):
    view = await use_case.execute(GetAdminViewInputDTO(identity=identity))
    return admin_view_dto_to_schema(view)


@router.patch("/admin/expiration", response_model=ProjectResponse)
async def extend_expiration(
        identity: admin_identity_dep,
        use_case: extend_expiration_dep,
        body: ExtendExpirationRequest,
):
    project_dto = await use_case.execute(ExtendExpirationInputDTO(identity=identity, days=body.days))
    return ProjectResponse.model_validate(project_dto)


@router.delete("/admin/me", response_model=SuccessResponse)
async def delete_project(
        identity: admin_identity_dep,
        use_case: delete_project_dep,
):
    result = await use_case.execute(DeleteProjectInputDTO(identity=identity))
    return SuccessResponse(success=result.success, message="Project and files deleted permanently")


@router.get("/view/{token}", response_model=PublicProjectResponse)
async def get_public_view(
        token: str,
        meta: request_meta_dep,
        use_case: public_view_dep,
):
    view = await use_case.execute(get_public_view_input_dto(token, meta))
    return public_view_dto_to_schema(view)


@router.post("/{token}/status", response_model=DecisionResponse)
async def submit_decision(
        token: str,
        body: SubmitDecisionRequest,
        meta: request_meta_dep,
        use_case: submit_decision_dep,
):
    result = await use_case.execute(get_submit_decision_input_dto(token, body, meta))
    return DecisionResponse.model_validate(result)
