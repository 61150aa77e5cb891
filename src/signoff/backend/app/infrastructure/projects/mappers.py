from signoff.backend.app.domain.common import ensure_utc
from signoff.backend.app.domain.projects import Project, ProjectName, Decision
from signoff.backend.app.infrastructure.db.models.project import ProjectModel, DecisionModel


def project_model_to_domain(m: ProjectModel) -> Project:
    return Project(
        id=m.id,
        name=ProjectName(m.name),
        admin_token=m.admin_token,
        public_token=m.public_token,
        status=m.status,
        created_at=ensure_utc(m.created_at),
        updated_at=ensure_utc(m.updated_at),
        expires_at=ensure_utc(m.expires_at),
    )


def project_domain_to_model(p: Project) -> ProjectModel:
    return ProjectModel(
        id=p.id,
        name=p.name.value,
        admin_token=p.admin_token,
        public_token=p.public_token,
        status=p.status,
        created_at=p.created_at,
        updated_at=p.updated_at,
        expires_at=p.expires_at,
    )


def decision_model_to_domain(m: DecisionModel) -> Decision:
    return Decision(
        id=m.id,
        project_id=m.project_id,
        type=m.type,
        comment=m.comment,
        actor_role=m.actor_role,
        ip_address=m.ip_address,
        user_agent=m.user_agent,
        created_at=ensure_utc(m.created_at),
    )


def decision_domain_to_model(d: Decision) -> DecisionModel:
    return DecisionModel(
        id=d.id,
        project_id=d.project_id,
        type=d.type,
        comment=d.comment,
        actor_role=d.actor_role,
        ip_address=d.ip_address,
        user_agent=d.user_agent,
        created_at=d.created_at,
    )
