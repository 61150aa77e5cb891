from .recorder import AuditTrailRecorder

__all__ = ["AuditTrailRecorder"]
