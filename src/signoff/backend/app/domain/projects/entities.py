# signoff/backend/app/domain/projects/entities.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from .enums import ProjectStatus, DecisionType
from .errors import ProjectLocked
from .value_objects import ProjectName
from ..common import utcnow
from ..common.enums import ActorRole


@dataclass(frozen=True, slots=True)
class Decision:
    project_id: UUID
    type: DecisionType
    comment: Optional[str] = None
    actor_role: ActorRole = ActorRole.CLIENT
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utcnow)

    def is_retry_of(self, decision_type: DecisionType, comment: Optional[str]) -> bool:
        """
        A resubmission of the same verdict with the same comment.
        A missing comment and an empty one are the same comment.
        """
        return self.type == decision_type and (self.comment or "") == (comment or "")


@dataclass
class Project:
    name: ProjectName
    admin_token: str
    public_token: str
    expires_at: Optional[datetime] = None
    status: ProjectStatus = ProjectStatus.PENDING
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def __post_init__(self) -> None:
        if self.admin_token == self.public_token:
            raise ValueError("admin_token and public_token must differ")

    @property
    def is_locked(self) -> bool:
        return self.status.is_terminal

    def apply_decision(self, decision: Decision) -> None:
        if self.is_locked:
            raise ProjectLocked()
        target = decision.type.target_status
        if not self.status.can_transition_to(target):
            raise ProjectLocked()
        self.status = target
        self.updated_at = decision.created_at

    def extend_until(self, expires_at: datetime) -> None:
        self.expires_at = expires_at
        self.updated_at = utcnow()
