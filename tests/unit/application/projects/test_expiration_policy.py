from datetime import datetime, timedelta, timezone

from signoff.backend.app.application.projects.expiration import ExpirationPolicy
from signoff.backend.app.domain.projects import Project, ProjectName

NOW = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def _project(expires_at):
    return Project(name=ProjectName("p"), admin_token="a", public_token="b", expires_at=expires_at)


def test_default_expiry_is_thirty_days_out():
    assert ExpirationPolicy().default_expiry(NOW) == NOW + timedelta(days=30)


def test_extension_counts_from_now_not_from_previous_expiry():
    policy = ExpirationPolicy()
    assert policy.extended(7, now=NOW) == NOW + timedelta(days=7)


def test_no_expiry_never_expires():
    assert not ExpirationPolicy().is_expired(_project(None), now=NOW)


def test_expired_only_strictly_after_deadline():
    policy = ExpirationPolicy()
    assert not policy.is_expired(_project(NOW), now=NOW)
    assert policy.is_expired(_project(NOW - timedelta(seconds=1)), now=NOW)
    assert not policy.is_expired(_project(NOW + timedelta(days=1)), now=NOW)


def test_naive_expiry_is_read_as_utc():
    naive = (NOW - timedelta(minutes=1)).replace(tzinfo=None)
    assert ExpirationPolicy().is_expired(_project(naive), now=NOW)
