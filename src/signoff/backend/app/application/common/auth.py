from signoff.backend.app.domain.common.errors import Unauthorized
from signoff.backend.app.domain.projects import ProjectIdentity


def require_admin(identity: ProjectIdentity) -> None:
    if not identity.is_admin:
        raise Unauthorized("Admin token required")
