from __future__ import annotations

from typing import Optional

from .dto import ProjectDTO, AuditLogDTO, DecisionResultDTO, PublicFileDTO
from signoff.backend.app.domain.audit import AuditLogEntry
from signoff.backend.app.domain.files import Attachment
from signoff.backend.app.domain.projects import Project


def project_domain_to_output_dto(project: Project) -> ProjectDTO:
    return ProjectDTO(
        id=project.id,
        name=str(project.name),
        admin_token=project.admin_token,
        public_token=project.public_token,
        status=project.status.value,
        created_at=project.created_at,
        updated_at=project.updated_at,
        expires_at=project.expires_at,
    )


def audit_entry_to_dto(entry: AuditLogEntry) -> AuditLogDTO:
    return AuditLogDTO(
        id=entry.id,
        action=entry.action.value,
        actor_role=entry.actor_role.value,
        ip_address=entry.ip_address,
        user_agent=entry.user_agent,
        created_at=entry.created_at,
    )


def attachment_to_public_file_dto(attachment: Attachment, url: Optional[str]) -> PublicFileDTO:
    return PublicFileDTO(
        file_id=attachment.id,
        filename=attachment.original_filename,
        mime_type=attachment.content_type,
        size=attachment.size_bytes,
        url=url,
    )


def decision_result_dto(project: Project, comment: Optional[str]) -> DecisionResultDTO:
    return DecisionResultDTO(
        project_id=project.id,
        status=project.status.value,
        updated_at=project.updated_at,
        comment=comment,
    )
