from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, ConfigDict


class SignUrlRequest(BaseModel):
    filename: str = Field(min_length=1, max_length=512)
    mimetype: str = Field(min_length=1, max_length=128)
    size: int


class SignUrlResponse(BaseModel):
    message: str = "Upload authorized"
    upload_url: str
    key: str


class ConfirmUploadRequest(BaseModel):
    key: str = Field(min_length=1, max_length=1024)
    filename: str = Field(min_length=1, max_length=512)
    size: int
    mimetype: str = Field(min_length=1, max_length=128)


class AttachmentResponse(BaseModel):
    id: UUID
    project_id: UUID
    original_filename: str
    content_type: str
    size_bytes: int
    storage_key: str
    uploaded_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ConfirmUploadResponse(BaseModel):
    message: str = "File successfully attached to project"
    attachment: AttachmentResponse


class DownloadUrlResponse(BaseModel):
    url: str
    filename: str

    model_config = ConfigDict(from_attributes=True)


class DeleteFileResponse(BaseModel):
    success: bool
    message: str = "File deleted"
