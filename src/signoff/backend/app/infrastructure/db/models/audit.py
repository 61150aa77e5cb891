from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Enum as SAEnum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from signoff.backend.app.domain.audit.enums import LogAction
from signoff.backend.app.domain.common import utcnow
from signoff.backend.app.domain.common.enums import ActorRole
from signoff.backend.app.infrastructure.db.base import Base


class AuditLogModel(Base):
    __tablename__ = "audit_logs"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)

    project_id: Mapped[UUID] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    action: Mapped[LogAction] = mapped_column(
        SAEnum(LogAction, name="log_action_enum", native_enum=True, create_constraint=True),
        nullable=False,
    )
    actor_role: Mapped[ActorRole] = mapped_column(
        SAEnum(ActorRole, name="actor_role_enum", native_enum=True, create_constraint=True),
        nullable=False,
    )
    ip_address: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    user_agent: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False, index=True
    )
