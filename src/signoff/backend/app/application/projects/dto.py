from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID

from signoff.backend.app.application.files.dto import AttachmentDTO
from signoff.backend.app.domain.projects import ProjectIdentity


@dataclass(frozen=True)
class CreateProjectInputDTO:
    name: str


@dataclass(frozen=True)
class GetAdminViewInputDTO:
    identity: ProjectIdentity


@dataclass(frozen=True)
class GetPublicViewInputDTO:
    public_token: str
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


@dataclass(frozen=True)
class SubmitDecisionInputDTO:
    public_token: str
    decision: str
    comment: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


@dataclass(frozen=True)
class ExtendExpirationInputDTO:
    identity: ProjectIdentity
    days: int


@dataclass(frozen=True)
class DeleteProjectInputDTO:
    identity: ProjectIdentity


# ---------- OUTPUT DTOs ----------
@dataclass(frozen=True)
class ProjectDTO:
    id: UUID
    name: str
    admin_token: str
    public_token: str
    status: str
    created_at: datetime
    updated_at: datetime
    expires_at: Optional[datetime]


@dataclass(frozen=True)
class AuditLogDTO:
    id: UUID
    action: str
    actor_role: str
    ip_address: Optional[str]
    user_agent: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class AdminProjectViewDTO:
    project: ProjectDTO
    file: Optional[AttachmentDTO]
    logs: list[AuditLogDTO] = field(default_factory=list)
    latest_comment: Optional[str] = None


@dataclass(frozen=True)
class PublicFileDTO:
    file_id: UUID
    filename: str
    mime_type: str
    size: int
    url: Optional[str]


@dataclass(frozen=True)
class PublicProjectViewDTO:
    # deliberately token-free: this is what a client link reveals
    name: str
    status: str
    expires_at: Optional[datetime]
    file: Optional[PublicFileDTO]
    client_feedback: Optional[str]


@dataclass(frozen=True)
class DecisionResultDTO:
    project_id: UUID
    status: str
    updated_at: datetime
    comment: Optional[str]
