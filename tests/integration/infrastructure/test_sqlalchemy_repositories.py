from datetime import timedelta

import pytest

from signoff.backend.app.domain.audit import AuditLogEntry, LogAction
from signoff.backend.app.domain.common import utcnow
from signoff.backend.app.domain.common.enums import ActorRole
from signoff.backend.app.domain.files import Attachment, InvalidUpload
from signoff.backend.app.domain.projects import Decision, DecisionType, Project, ProjectName, ProjectStatus

pytestmark = pytest.mark.asyncio


def _project(admin="adm", public="pub") -> Project:
    return Project(
        name=ProjectName("Logo Redesign"),
        admin_token=admin,
        public_token=public,
        expires_at=utcnow() + timedelta(days=30),
    )


def _attachment(project_id, key) -> Attachment:
    return Attachment(
        project_id=project_id,
        original_filename="logo.png",
        content_type="image/png",
        size_bytes=123,
        storage_key=key,
    )


async def test_project_round_trip_and_token_lookups(uow):
    async with uow:
        saved = await uow.project_repo.add(_project())

    async with uow:
        by_admin = await uow.project_repo.get_by_admin_token("adm")
        by_public = await uow.project_repo.get_by_public_token("pub", for_update=True)
        by_any = await uow.project_repo.get_by_any_token("pub")
        missing = await uow.project_repo.get_by_public_token("adm")

    assert by_admin.id == by_public.id == by_any.id == saved.id
    assert str(by_admin.name) == "Logo Redesign"
    assert by_admin.status is ProjectStatus.PENDING
    assert by_admin.expires_at.tzinfo is not None
    assert missing is None


async def test_update_persists_status_and_expiry(uow):
    async with uow:
        project = await uow.project_repo.add(_project())

    new_expiry = utcnow() + timedelta(days=3)
    project.status = ProjectStatus.CHANGES_REQUESTED
    project.extend_until(new_expiry)
    async with uow:
        await uow.project_repo.update(project)

    async with uow:
        loaded = await uow.project_repo.get_by_id(project.id)
    assert loaded.status is ProjectStatus.CHANGES_REQUESTED
    assert abs(loaded.expires_at - new_expiry) < timedelta(seconds=1)


async def test_latest_decision_and_history(uow):
    async with uow:
        project = await uow.project_repo.add(_project())
        now = utcnow()
        await uow.decision_repo.add(
            Decision(project_id=project.id, type=DecisionType.CHANGES_REQUESTED, comment="bigger", created_at=now)
        )
        await uow.decision_repo.add(
            Decision(project_id=project.id, type=DecisionType.APPROVED, created_at=now + timedelta(seconds=1))
        )

    async with uow:
        latest = await uow.decision_repo.get_latest(project.id)
        history = await uow.decision_repo.list_by_project(project.id)

    assert latest.type is DecisionType.APPROVED
    assert [d.comment for d in history] == ["bigger", None]


async def test_audit_log_lists_newest_first(uow):
    async with uow:
        project = await uow.project_repo.add(_project())
        now = utcnow()
        for offset, action in enumerate([LogAction.PROJECT_CREATED, LogAction.CLIENT_VIEWED, LogAction.CLIENT_APPROVED]):
            await uow.audit_repo.add(
                AuditLogEntry(
                    project_id=project.id,
                    action=action,
                    actor_role=ActorRole.CLIENT,
                    created_at=now + timedelta(seconds=offset),
                )
            )

    async with uow:
        logs = await uow.audit_repo.list_by_project(project.id)

    assert [e.action for e in logs] == [
        LogAction.CLIENT_APPROVED,
        LogAction.CLIENT_VIEWED,
        LogAction.PROJECT_CREATED,
    ]


async def test_one_attachment_per_project(uow):
    async with uow:
        project = await uow.project_repo.add(_project())
        await uow.attachment_repo.add(_attachment(project.id, f"projects/{project.id}/a"))

    with pytest.raises(InvalidUpload):
        async with uow:
            await uow.attachment_repo.add(_attachment(project.id, f"projects/{project.id}/b"))

    async with uow:
        current = await uow.attachment_repo.get_by_project(project.id)
    assert current.storage_key == f"projects/{project.id}/a"


async def test_attachment_lookup_is_scoped_to_project(uow):
    async with uow:
        mine = await uow.project_repo.add(_project("a1", "p1"))
        theirs = await uow.project_repo.add(_project("a2", "p2"))
        attachment = await uow.attachment_repo.add(_attachment(mine.id, f"projects/{mine.id}/a"))

    async with uow:
        assert await uow.attachment_repo.get_by_id_and_project(attachment.id, theirs.id) is None
        assert (await uow.attachment_repo.get_by_id_and_project(attachment.id, mine.id)).id == attachment.id


async def test_deleting_project_cascades(uow):
    async with uow:
        project = await uow.project_repo.add(_project())
        await uow.decision_repo.add(Decision(project_id=project.id, type=DecisionType.APPROVED))
        await uow.attachment_repo.add(_attachment(project.id, f"projects/{project.id}/a"))
        await uow.audit_repo.add(
            AuditLogEntry(project_id=project.id, action=LogAction.PROJECT_CREATED, actor_role=ActorRole.ADMIN)
        )

    async with uow:
        await uow.project_repo.delete(project.id)

    async with uow:
        assert await uow.project_repo.get_by_id(project.id) is None
        assert await uow.attachment_repo.get_by_project(project.id) is None
        assert await uow.decision_repo.list_by_project(project.id) == []
        assert await uow.audit_repo.list_by_project(project.id) == []
