from .entities import AuditLogEntry
from .enums import LogAction
from .repositories import AuditLogRepository

__all__ = ["AuditLogEntry", "LogAction", "AuditLogRepository"]
