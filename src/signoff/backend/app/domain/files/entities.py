from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from ..common import utcnow


@dataclass(frozen=True, slots=True)
class Attachment:
    project_id: UUID
    original_filename: str
    content_type: str
    size_bytes: int
    storage_key: str
    id: UUID = field(default_factory=uuid4)
    uploaded_at: datetime = field(default_factory=utcnow)


@dataclass(frozen=True, slots=True)
class StorageCapability:
    """A presigned URL allowing exactly one operation on one key, until it expires."""
    url: str
    key: str
    expires_in: int
