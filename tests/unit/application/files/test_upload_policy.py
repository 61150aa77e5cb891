from uuid import uuid4

import pytest

from signoff.backend.app.domain.files import DisallowedMimeType, InvalidFileSize, InvalidUpload


def test_accepts_allowed_type_within_limit(upload_policy):
    upload_policy.validate(mime_type="application/pdf", size=1024)


def test_rejects_disallowed_type(upload_policy):
    with pytest.raises(DisallowedMimeType):
        upload_policy.validate(mime_type="application/zip", size=1024)


@pytest.mark.parametrize("size", [0, -1, 50 * 1024 * 1024 + 1])
def test_rejects_bad_size(upload_policy, size):
    with pytest.raises(InvalidFileSize):
        upload_policy.validate(mime_type="image/png", size=size)


def test_build_key_is_scoped_to_project(upload_policy):
    project_id = uuid4()
    key = upload_policy.build_key(project_id, "logo.png")

    assert key.startswith(f"projects/{project_id}/")
    assert key.endswith("-logo.png")


def test_build_key_drops_directories_from_filename(upload_policy):
    project_id = uuid4()
    key = upload_policy.build_key(project_id, "../../etc/passwd")

    assert ".." not in key
    assert key.endswith("-passwd")


def test_two_keys_for_same_filename_differ(upload_policy):
    project_id = uuid4()
    assert upload_policy.build_key(project_id, "a.pdf") != upload_policy.build_key(project_id, "a.pdf")


def test_key_from_another_project_is_not_owned(upload_policy):
    mine, theirs = uuid4(), uuid4()
    key = upload_policy.build_key(theirs, "a.pdf")

    with pytest.raises(InvalidUpload):
        upload_policy.ensure_key_owned(mine, key)
    upload_policy.ensure_key_owned(theirs, key)


def test_bare_prefix_is_not_a_key(upload_policy):
    project_id = uuid4()
    with pytest.raises(InvalidUpload):
        upload_policy.ensure_key_owned(project_id, f"projects/{project_id}/")


@pytest.mark.parametrize("filename", ["draft..v2.png", "report...pdf", "..hidden.png"])
def test_built_key_with_dotted_name_is_owned(upload_policy, filename):
    project_id = uuid4()
    key = upload_policy.build_key(project_id, filename)

    upload_policy.ensure_key_owned(project_id, key)


@pytest.mark.parametrize("suffix", ["..", ".", "../other/a.png", "nested/a.png"])
def test_traversal_or_nested_key_is_not_owned(upload_policy, suffix):
    project_id = uuid4()
    with pytest.raises(InvalidUpload):
        upload_policy.ensure_key_owned(project_id, f"projects/{project_id}/{suffix}")
