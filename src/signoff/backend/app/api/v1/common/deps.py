from dataclasses import dataclass
from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from signoff.backend.app.application.projects.use_cases import ResolveProjectTokenUseCase
from signoff.backend.app.core.deps import get_uow
from signoff.backend.app.domain.common.errors import Unauthorized
from signoff.backend.app.domain.projects import ProjectIdentity
from signoff.backend.app.infrastructure.db.uow import UnitOfWork

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class RequestMeta:
    ip_address: Optional[str]
    user_agent: Optional[str]


def get_request_meta(request: Request) -> RequestMeta:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        ip = forwarded.split(",")[0].strip()
    else:
        ip = request.client.host if request.client else None
    return RequestMeta(ip_address=ip, user_agent=request.headers.get("user-agent"))


async def get_resolve_token_use_case(
        uow: Annotated[UnitOfWork, Depends(get_uow)],
) -> ResolveProjectTokenUseCase:
    return ResolveProjectTokenUseCase(uow)


async def get_admin_identity(
        credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
        use_case: Annotated[ResolveProjectTokenUseCase, Depends(get_resolve_token_use_case)],
) -> ProjectIdentity:
    if credentials is None or not credentials.credentials:
        raise Unauthorized("Authentication required (missing admin token)")
    identity = await use_case.execute(credentials.credentials)
    # a public token here is treated exactly like an unknown one
    if identity is None or not identity.is_admin:
        raise Unauthorized("Invalid admin token")
    return identity


admin_identity_dep = Annotated[ProjectIdentity, Depends(get_admin_identity)]
request_meta_dep = Annotated[RequestMeta, Depends(get_request_meta)]
