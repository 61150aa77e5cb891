from __future__ import annotations

from enum import StrEnum


class LogAction(StrEnum):
    PROJECT_CREATED = "PROJECT_CREATED"
    PROJECT_UPDATED = "PROJECT_UPDATED"
    CLIENT_VIEWED = "CLIENT_VIEWED"
    CLIENT_APPROVED = "CLIENT_APPROVED"
    CLIENT_REQUESTED_CHANGES = "CLIENT_REQUESTED_CHANGES"
    FILE_UPLOADED = "FILE_UPLOADED"
    FILE_DELETED = "FILE_DELETED"
