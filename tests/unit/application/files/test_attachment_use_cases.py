from uuid import uuid4

import pytest

from signoff.backend.app.application.files.dto import (
    ConfirmUploadInputDTO,
    DeleteAttachmentInputDTO,
    IssueDownloadCapabilityInputDTO,
    IssueUploadCapabilityInputDTO,
)
from signoff.backend.app.application.files.use_cases import (
    ConfirmUploadUseCase,
    DeleteAttachmentUseCase,
    IssueDownloadCapabilityUseCase,
    IssueUploadCapabilityUseCase,
)
from signoff.backend.app.domain.audit import LogAction
from signoff.backend.app.domain.common.enums import ActorRole
from signoff.backend.app.domain.common.errors import StorageFailure, Unauthorized
from signoff.backend.app.domain.files import (
    AttachmentNotFound,
    DisallowedMimeType,
    InvalidFileSize,
    InvalidUpload,
)
from signoff.backend.app.domain.notifications import ProjectEvent
from signoff.backend.app.domain.projects import Project, ProjectIdentity, ProjectName
from signoff.backend.app.domain.projects.errors import ProjectNotFound

pytestmark = pytest.mark.asyncio


def _confirm(identity, key, filename="logo.png", size=2048, mime="image/png") -> ConfirmUploadInputDTO:
    return ConfirmUploadInputDTO(identity=identity, key=key, filename=filename, size=size, mime_type=mime)


@pytest.fixture
def confirm_uc(uow, upload_policy, cleanup, notifier) -> ConfirmUploadUseCase:
    return ConfirmUploadUseCase(uow, upload_policy, cleanup, notifier)


class TestIssueUpload:
    async def test_returns_presigned_put_under_project_prefix(self, storage, upload_policy, admin, project):
        use_case = IssueUploadCapabilityUseCase(storage, upload_policy, upload_expires_in=600)

        out = await use_case.execute(
            IssueUploadCapabilityInputDTO(identity=admin, filename="logo.png", mime_type="image/png", size=2048)
        )

        assert out.key.startswith(f"projects/{project.id}/")
        assert out.key.endswith("-logo.png")
        assert out.upload_url == f"https://storage.test/put/{out.key}"
        assert storage.signed_writes == [(out.key, "image/png", 600)]

    async def test_rejects_disallowed_type_without_signing(self, storage, upload_policy, admin):
        use_case = IssueUploadCapabilityUseCase(storage, upload_policy, upload_expires_in=600)

        with pytest.raises(DisallowedMimeType):
            await use_case.execute(
                IssueUploadCapabilityInputDTO(identity=admin, filename="a.exe", mime_type="application/x-msdownload", size=1)
            )
        assert storage.signed_writes == []

    async def test_rejects_oversized_file(self, storage, upload_policy, admin):
        use_case = IssueUploadCapabilityUseCase(storage, upload_policy, upload_expires_in=600)

        with pytest.raises(InvalidFileSize):
            await use_case.execute(
                IssueUploadCapabilityInputDTO(
                    identity=admin, filename="big.pdf", mime_type="application/pdf", size=50 * 1024 * 1024 + 1
                )
            )

    async def test_storage_failure_propagates(self, storage, upload_policy, admin):
        storage.fail = True
        use_case = IssueUploadCapabilityUseCase(storage, upload_policy, upload_expires_in=600)

        with pytest.raises(StorageFailure):
            await use_case.execute(
                IssueUploadCapabilityInputDTO(identity=admin, filename="a.pdf", mime_type="application/pdf", size=1)
            )

    async def test_client_cannot_upload(self, storage, upload_policy, client_identity):
        use_case = IssueUploadCapabilityUseCase(storage, upload_policy, upload_expires_in=600)

        with pytest.raises(Unauthorized):
            await use_case.execute(
                IssueUploadCapabilityInputDTO(identity=client_identity, filename="a.pdf", mime_type="application/pdf", size=1)
            )


class TestConfirmUpload:
    async def test_first_upload_creates_row_and_audit_entry(self, uow, confirm_uc, cleanup, notifier, admin, project):
        key = f"projects/{project.id}/k1-logo.png"

        out = await confirm_uc.execute(_confirm(admin, key))

        assert out.storage_key == key
        assert out.original_filename == "logo.png"
        stored = await uow.attachment_repo.get_by_project(project.id)
        assert stored.id == out.id
        assert cleanup.scheduled == []

        logs = await uow.audit_repo.list_by_project(project.id)
        assert [(e.action, e.actor_role) for e in logs] == [(LogAction.FILE_UPLOADED, ActorRole.ADMIN)]
        assert notifier.events == [
            (str(project.id), ProjectEvent.FILE_UPDATED.value, {"fileId": str(out.id), "filename": "logo.png"})
        ]

    async def test_replacing_keeps_one_row_and_schedules_old_object(self, uow, confirm_uc, cleanup, admin, project):
        old_key = f"projects/{project.id}/k1-logo.png"
        new_key = f"projects/{project.id}/k2-logo-v2.png"

        await confirm_uc.execute(_confirm(admin, old_key))
        out = await confirm_uc.execute(_confirm(admin, new_key, filename="logo-v2.png"))

        assert len(uow.attachment_repo._all()) == 1
        assert (await uow.attachment_repo.get_by_project(project.id)).id == out.id
        assert cleanup.scheduled == [old_key]

    async def test_reconfirming_same_key_never_deletes_live_object(self, uow, confirm_uc, cleanup, admin, project):
        key = f"projects/{project.id}/k1-logo.png"

        await confirm_uc.execute(_confirm(admin, key))
        await confirm_uc.execute(_confirm(admin, key))

        assert len(uow.attachment_repo._all()) == 1
        assert cleanup.scheduled == []

    async def test_key_outside_project_prefix_is_rejected(self, uow, confirm_uc, admin, project):
        with pytest.raises(InvalidUpload):
            await confirm_uc.execute(_confirm(admin, f"projects/{uuid4()}/k-logo.png"))

        assert uow.attachment_repo._all() == []

    async def test_dotted_filename_round_trips_from_issue_to_confirm(
            self, uow, storage, upload_policy, confirm_uc, admin, project
    ):
        issue = IssueUploadCapabilityUseCase(storage, upload_policy, upload_expires_in=600)
        cap = await issue.execute(
            IssueUploadCapabilityInputDTO(identity=admin, filename="draft..v2.png", mime_type="image/png", size=2048)
        )

        out = await confirm_uc.execute(_confirm(admin, cap.key, filename="draft..v2.png"))

        assert out.storage_key == cap.key
        assert (await uow.attachment_repo.get_by_project(project.id)).original_filename == "draft..v2.png"

    async def test_revalidates_type_and_size(self, confirm_uc, admin, project):
        key = f"projects/{project.id}/k-logo.gif"
        with pytest.raises(DisallowedMimeType):
            await confirm_uc.execute(_confirm(admin, key, mime="image/gif"))
        with pytest.raises(InvalidFileSize):
            await confirm_uc.execute(_confirm(admin, key, size=0))

    async def test_missing_project(self, uow, upload_policy, cleanup, notifier):
        ghost = ProjectIdentity(project_id=uuid4(), role=ActorRole.ADMIN)
        use_case = ConfirmUploadUseCase(uow, upload_policy, cleanup, notifier)

        with pytest.raises(ProjectNotFound):
            await use_case.execute(_confirm(ghost, f"projects/{ghost.project_id}/k-a.png"))
        assert uow.rolled_back is True


class TestDownload:
    async def test_download_url_carries_original_filename(self, uow, storage, confirm_uc, admin, project):
        attachment = await confirm_uc.execute(_confirm(admin, f"projects/{project.id}/k-brief.pdf", "brief.pdf", mime="application/pdf"))
        use_case = IssueDownloadCapabilityUseCase(uow, storage, download_expires_in=3600)

        out = await use_case.execute(IssueDownloadCapabilityInputDTO(identity=admin, file_id=attachment.id))

        assert out.filename == "brief.pdf"
        assert storage.signed_reads == [(attachment.storage_key, "brief.pdf", 3600)]

    async def test_other_projects_file_is_not_found(self, uow, storage, confirm_uc, admin, project):
        other = Project(name=ProjectName("Other"), admin_token="oa", public_token="op")
        uow.project_repo._add_raw(other)
        other_admin = ProjectIdentity(project_id=other.id, role=ActorRole.ADMIN)
        attachment = await confirm_uc.execute(_confirm(admin, f"projects/{project.id}/k-logo.png"))

        use_case = IssueDownloadCapabilityUseCase(uow, storage, download_expires_in=3600)
        with pytest.raises(AttachmentNotFound) as exc:
            await use_case.execute(IssueDownloadCapabilityInputDTO(identity=other_admin, file_id=attachment.id))

        assert str(exc.value) == "File not found"
        assert storage.signed_reads == []

    async def test_unknown_file(self, uow, storage, admin, project):
        use_case = IssueDownloadCapabilityUseCase(uow, storage, download_expires_in=3600)
        with pytest.raises(AttachmentNotFound):
            await use_case.execute(IssueDownloadCapabilityInputDTO(identity=admin, file_id=uuid4()))


class TestDeleteAttachment:
    async def test_delete_removes_row_then_schedules_object(self, uow, confirm_uc, cleanup, notifier, admin, project):
        attachment = await confirm_uc.execute(_confirm(admin, f"projects/{project.id}/k-logo.png"))
        notifier.events.clear()

        out = await DeleteAttachmentUseCase(uow, cleanup, notifier).execute(
            DeleteAttachmentInputDTO(identity=admin, file_id=attachment.id)
        )

        assert out.success is True
        assert await uow.attachment_repo.get_by_project(project.id) is None
        assert cleanup.scheduled == [attachment.storage_key]
        logs = await uow.audit_repo.list_by_project(project.id)
        assert logs[0].action is LogAction.FILE_DELETED
        assert notifier.events == [
            (str(project.id), ProjectEvent.FILE_UPDATED.value, {"fileId": None, "filename": None})
        ]

    async def test_cannot_delete_other_projects_file(self, uow, confirm_uc, cleanup, notifier, admin, project):
        attachment = await confirm_uc.execute(_confirm(admin, f"projects/{project.id}/k-logo.png"))
        stranger = ProjectIdentity(project_id=uuid4(), role=ActorRole.ADMIN)

        with pytest.raises(AttachmentNotFound):
            await DeleteAttachmentUseCase(uow, cleanup, notifier).execute(
                DeleteAttachmentInputDTO(identity=stranger, file_id=attachment.id)
            )
        assert await uow.attachment_repo.get_by_project(project.id) is not None
        assert cleanup.scheduled == []
