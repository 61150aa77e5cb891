from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    LOCKED = "LOCKED"
    GONE = "GONE"
    INVALID_INPUT = "INVALID_INPUT"
    STORAGE_FAILURE = "STORAGE_FAILURE"


class DomainError(Exception):
    """Base for every failure the core reports to its callers."""
    kind: ErrorKind


class NotFoundError(DomainError):
    kind = ErrorKind.NOT_FOUND


class Unauthorized(DomainError):
    kind = ErrorKind.UNAUTHORIZED

    def __init__(self, reason: str = "Invalid or missing project token") -> None:
        super().__init__(reason)


class LockedError(DomainError):
    kind = ErrorKind.LOCKED


class GoneError(DomainError):
    kind = ErrorKind.GONE


class InvalidInputError(DomainError):
    kind = ErrorKind.INVALID_INPUT


class StorageFailure(DomainError):
    kind = ErrorKind.STORAGE_FAILURE

    def __init__(self, operation: str) -> None:
        super().__init__(f"Object storage failed to {operation}")
        self.operation = operation
