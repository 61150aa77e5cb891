# signoff/backend/app/application/projects/use_cases/__init__.py
from .create_project import CreateProjectUseCase
from .delete_project import DeleteProjectUseCase
from .extend_expiration import ExtendExpirationUseCase
from .get_admin_view import GetAdminViewUseCase
from .get_public_view import GetPublicViewUseCase
from .resolve_token import ResolveProjectTokenUseCase
from .submit_decision import SubmitDecisionUseCase

__all__ = [
    "CreateProjectUseCase",
    "DeleteProjectUseCase",
    "ExtendExpirationUseCase",
    "GetAdminViewUseCase",
    "GetPublicViewUseCase",
    "ResolveProjectTokenUseCase",
    "SubmitDecisionUseCase",
]
