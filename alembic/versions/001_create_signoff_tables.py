"""Create projects, approval_decisions, files and audit_logs.

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

project_status = postgresql.ENUM(
    "PENDING", "CHANGES_REQUESTED", "APPROVED", name="project_status_enum", create_type=False
)
decision_type = postgresql.ENUM(
    "APPROVED", "CHANGES_REQUESTED", name="approval_decision_type_enum", create_type=False
)
actor_role = postgresql.ENUM("ADMIN", "CLIENT", name="actor_role_enum", create_type=False)
log_action = postgresql.ENUM(
    "PROJECT_CREATED",
    "PROJECT_UPDATED",
    "CLIENT_VIEWED",
    "CLIENT_APPROVED",
    "CLIENT_REQUESTED_CHANGES",
    "FILE_UPLOADED",
    "FILE_DELETED",
    name="log_action_enum",
    create_type=False,
)


def upgrade() -> None:
    bind = op.get_bind()
    for enum_type in (project_status, decision_type, actor_role, log_action):
        enum_type.create(bind, checkfirst=True)

    op.create_table(
        "projects",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("admin_token", sa.String(128), nullable=False),
        sa.Column("public_token", sa.String(128), nullable=False),
        sa.Column("status", project_status, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_projects_admin_token", "projects", ["admin_token"], unique=True)
    op.create_index("ix_projects_public_token", "projects", ["public_token"], unique=True)

    op.create_table(
        "approval_decisions",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column(
            "project_id",
            sa.UUID(),
            sa.ForeignKey("projects.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("type", decision_type, nullable=False),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.Column("actor_role", actor_role, nullable=False),
        sa.Column("ip_address", sa.String(64), nullable=True),
        sa.Column("user_agent", sa.String(512), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_approval_decisions_project_id", "approval_decisions", ["project_id"])
    op.create_index("ix_approval_decisions_created_at", "approval_decisions", ["created_at"])

    op.create_table(
        "files",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column(
            "project_id",
            sa.UUID(),
            sa.ForeignKey("projects.id", ondelete="CASCADE"),
            nullable=False,
            unique=True,
        ),
        sa.Column("original_filename", sa.String(512), nullable=False),
        sa.Column("content_type", sa.String(128), nullable=False),
        sa.Column("size_bytes", sa.BigInteger(), nullable=False),
        sa.Column("storage_key", sa.String(1024), nullable=False, unique=True),
        sa.Column("uploaded_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "audit_logs",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column(
            "project_id",
            sa.UUID(),
            sa.ForeignKey("projects.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("action", log_action, nullable=False),
        sa.Column("actor_role", actor_role, nullable=False),
        sa.Column("ip_address", sa.String(64), nullable=True),
        sa.Column("user_agent", sa.String(512), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_audit_logs_project_id", "audit_logs", ["project_id"])
    op.create_index("ix_audit_logs_created_at", "audit_logs", ["created_at"])


def downgrade() -> None:
    op.drop_table("audit_logs")
    op.drop_table("files")
    op.drop_table("approval_decisions")
    op.drop_table("projects")
    bind = op.get_bind()
    for enum_type in (log_action, actor_role, decision_type, project_status):
        enum_type.drop(bind, checkfirst=True)
