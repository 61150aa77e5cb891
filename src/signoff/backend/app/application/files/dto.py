from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from signoff.backend.app.domain.projects import ProjectIdentity


@dataclass(frozen=True)
class IssueUploadCapabilityInputDTO:
    identity: ProjectIdentity
    filename: str
    mime_type: str
    size: int


@dataclass(frozen=True)
class ConfirmUploadInputDTO:
    identity: ProjectIdentity
    key: str
    filename: str
    size: int
    mime_type: str


@dataclass(frozen=True)
class IssueDownloadCapabilityInputDTO:
    identity: ProjectIdentity
    file_id: UUID


@dataclass(frozen=True)
class DeleteAttachmentInputDTO:
    identity: ProjectIdentity
    file_id: UUID


# ---------- OUTPUT DTOs ----------
@dataclass(frozen=True)
class AttachmentDTO:
    id: UUID
    project_id: UUID
    original_filename: str
    content_type: str
    size_bytes: int
    storage_key: str
    uploaded_at: datetime
    url: Optional[str] = None


@dataclass(frozen=True)
class UploadCapabilityDTO:
    upload_url: str
    key: str


@dataclass(frozen=True)
class DownloadCapabilityDTO:
    url: str
    filename: str


@dataclass(frozen=True)
class DeleteResultDTO:
    success: bool = True
