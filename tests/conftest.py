from datetime import timedelta

import pytest

from signoff.backend.app.application.files.upload_policy import UploadPolicy
from signoff.backend.app.application.projects.expiration import ExpirationPolicy
from signoff.backend.app.domain.common import utcnow
from signoff.backend.app.domain.common.enums import ActorRole
from signoff.backend.app.domain.projects import Project, ProjectIdentity, ProjectName
from tests.unit.fakes.cleanup import RecordingCleanupScheduler
from tests.unit.fakes.notifications import RecordingNotificationSink
from tests.unit.fakes.object_storage import FakeObjectStorage
from tests.unit.fakes.tokens import SequentialTokenGenerator
from tests.unit.fakes.uow import FakeUnitOfWork

ALLOWED_MIME_TYPES = ("image/png", "image/jpeg", "image/jpg", "image/webp", "application/pdf")
MAX_UPLOAD_SIZE = 50 * 1024 * 1024


@pytest.fixture
def uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()


@pytest.fixture
def storage() -> FakeObjectStorage:
    return FakeObjectStorage()


@pytest.fixture
def cleanup() -> RecordingCleanupScheduler:
    return RecordingCleanupScheduler()


@pytest.fixture
def notifier() -> RecordingNotificationSink:
    return RecordingNotificationSink()


@pytest.fixture
def tokens() -> SequentialTokenGenerator:
    return SequentialTokenGenerator()


@pytest.fixture
def expiration() -> ExpirationPolicy:
    return ExpirationPolicy(default_days=30)


@pytest.fixture
def upload_policy() -> UploadPolicy:
    return UploadPolicy(allowed_mime_types=ALLOWED_MIME_TYPES, max_size_bytes=MAX_UPLOAD_SIZE)


@pytest.fixture
def project(uow) -> Project:
    p = Project(
        name=ProjectName("Logo Redesign"),
        admin_token="admin-secret",
        public_token="public-secret",
        expires_at=utcnow() + timedelta(days=30),
    )
    uow.project_repo._add_raw(p)
    return p


@pytest.fixture
def admin(project) -> ProjectIdentity:
    return ProjectIdentity(project_id=project.id, role=ActorRole.ADMIN)


@pytest.fixture
def client_identity(project) -> ProjectIdentity:
    return ProjectIdentity(project_id=project.id, role=ActorRole.CLIENT)
