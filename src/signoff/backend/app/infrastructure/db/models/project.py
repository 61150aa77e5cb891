from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Enum as SAEnum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from signoff.backend.app.domain.common import utcnow
from signoff.backend.app.domain.common.enums import ActorRole
from signoff.backend.app.domain.projects.enums import ProjectStatus, DecisionType
from signoff.backend.app.infrastructure.db.base import Base


class ProjectModel(Base):
    __tablename__ = "projects"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    admin_token: Mapped[str] = mapped_column(String(128), nullable=False, unique=True, index=True)
    public_token: Mapped[str] = mapped_column(String(128), nullable=False, unique=True, index=True)

    status: Mapped[ProjectStatus] = mapped_column(
        SAEnum(
            ProjectStatus,
            name="project_status_enum",
            native_enum=True,
            create_constraint=True,
        ),
        nullable=False,
        default=ProjectStatus.PENDING,
    )

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    expires_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)


class DecisionModel(Base):
    __tablename__ = "approval_decisions"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)

    project_id: Mapped[UUID] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    type: Mapped[DecisionType] = mapped_column(
        SAEnum(
            DecisionType,
            name="approval_decision_type_enum",
            native_enum=True,
            create_constraint=True,
        ),
        nullable=False,
    )
    comment: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    actor_role: Mapped[ActorRole] = mapped_column(
        SAEnum(ActorRole, name="actor_role_enum", native_enum=True, create_constraint=True),
        nullable=False,
    )
    ip_address: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    user_agent: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False, index=True
    )
