from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, ConfigDict


class CreateProjectRequest(BaseModel):
    name: str = Field(min_length=1, max_length=200)


class SubmitDecisionRequest(BaseModel):
    # kept as a plain string so an unknown value reaches the core as InvalidDecision
    decision: str
    comment: Optional[str] = Field(default=None, max_length=5000)


class ExtendExpirationRequest(BaseModel):
    days: int = Field(gt=0, le=3650)


class ProjectResponse(BaseModel):
    id: UUID
    name: str
    admin_token: str
    public_token: str
    status: str
    created_at: datetime
    updated_at: datetime
    expires_at: Optional[datetime]

    model_config = ConfigDict(from_attributes=True)


class AttachmentResponse(BaseModel):
    id: UUID
    original_filename: str
    content_type: str
    size_bytes: int
    uploaded_at: datetime
    url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class AuditLogResponse(BaseModel):
    id: UUID
    action: str
    actor_role: str
    ip_address: Optional[str]
    user_agent: Optional[str]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AdminProjectResponse(BaseModel):
    role: str = "ADMIN"
    project: ProjectResponse
    file: Optional[AttachmentResponse]
    logs: list[AuditLogResponse]
    latest_comment: Optional[str]

    model_config = ConfigDict(from_attributes=True)


class PublicFileResponse(BaseModel):
    file_id: UUID
    filename: str
    mime_type: str
    size: int
    url: Optional[str]

    model_config = ConfigDict(from_attributes=True)


class PublicProjectResponse(BaseModel):
    role: str = "CLIENT"
    name: str
    status: str
    expires_at: Optional[datetime]
    file: Optional[PublicFileResponse]
    client_feedback: Optional[str]

    model_config = ConfigDict(from_attributes=True)


class DecisionResponse(BaseModel):
    status: str
    updated_at: datetime
    comment: Optional[str]

    model_config = ConfigDict(from_attributes=True)


class SuccessResponse(BaseModel):
    success: bool
    message: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

