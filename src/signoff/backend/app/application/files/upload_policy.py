from __future__ import annotations

from pathlib import PurePosixPath
from uuid import UUID, uuid4

from signoff.backend.app.domain.files import DisallowedMimeType, InvalidFileSize, InvalidUpload


class UploadPolicy:
    """Which files may be attached, and where their bytes live in the bucket."""

    def __init__(self, *, allowed_mime_types: tuple[str, ...], max_size_bytes: int) -> None:
        self._allowed = allowed_mime_types
        self._max_size = max_size_bytes

    def validate(self, *, mime_type: str, size: int) -> None:
        if mime_type not in self._allowed:
            raise DisallowedMimeType(mime_type, self._allowed)
        if size <= 0 or size > self._max_size:
            raise InvalidFileSize(size, self._max_size)

    @staticmethod
    def key_prefix(project_id: UUID) -> str:
        return f"projects/{project_id}/"

    def build_key(self, project_id: UUID, filename: str) -> str:
        # keep only the last path segment so a filename cannot climb out of the prefix
        name = PurePosixPath(filename.replace("\\", "/")).name
        if not name or name in {".", ".."}:
            raise InvalidUpload("Filename is required")
        return f"{self.key_prefix(project_id)}{uuid4()}-{name}"

    def ensure_key_owned(self, project_id: UUID, key: str) -> None:
        prefix = self.key_prefix(project_id)
        if not key.startswith(prefix):
            raise InvalidUpload("Storage key does not belong to this project")
        # keys are built as a single segment under the prefix; dots inside a name are fine
        name = key[len(prefix):]
        if not name or "/" in name or name in {".", ".."}:
            raise InvalidUpload("Storage key does not belong to this project")
