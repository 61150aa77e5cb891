from signoff.backend.app.domain.audit import AuditLogEntry
from signoff.backend.app.domain.common import ensure_utc
from signoff.backend.app.infrastructure.db.models.audit import AuditLogModel


def audit_model_to_domain(m: AuditLogModel) -> AuditLogEntry:
    return AuditLogEntry(
        id=m.id,
        project_id=m.project_id,
        action=m.action,
        actor_role=m.actor_role,
        ip_address=m.ip_address,
        user_agent=m.user_agent,
        created_at=ensure_utc(m.created_at),
    )


def audit_domain_to_model(e: AuditLogEntry) -> AuditLogModel:
    return AuditLogModel(
        id=e.id,
        project_id=e.project_id,
        action=e.action,
        actor_role=e.actor_role,
        ip_address=e.ip_address,
        user_agent=e.user_agent,
        created_at=e.created_at,
    )
