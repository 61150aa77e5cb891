from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from .enums import LogAction
from ..common import utcnow
from ..common.enums import ActorRole


@dataclass(frozen=True, slots=True)
class AuditLogEntry:
    project_id: UUID
    action: LogAction
    actor_role: ActorRole
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utcnow)
