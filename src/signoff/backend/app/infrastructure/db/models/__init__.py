from signoff.backend.app.infrastructure.db.models.project import ProjectModel, DecisionModel
from signoff.backend.app.infrastructure.db.models.file import AttachmentModel
from signoff.backend.app.infrastructure.db.models.audit import AuditLogModel

__all__ = ["ProjectModel", "DecisionModel", "AttachmentModel", "AuditLogModel"]
