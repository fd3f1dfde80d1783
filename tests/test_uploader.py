"""Tests for ObjectStoreUploader."""

import pytest

from artifact_relay.exceptions import UploadFailed
from artifact_relay.services import ObjectStoreUploader

from conftest import FakeObjectStore


class TestObjectStoreUploader:
    """Test ObjectStoreUploader."""

    def test_upload_returns_reference(self, tmp_path):
        """The store's reference is returned and the content stored."""
        artifact = tmp_path / "release.zip"
        artifact.write_bytes(b"payload")
        store = FakeObjectStore()

        reference = ObjectStoreUploader(store).upload(str(artifact), "release-mirror", "123-abc-release.zip")

        assert reference == "s3://release-mirror/123-abc-release.zip"
        assert store.objects[("release-mirror", "123-abc-release.zip")] == b"payload"

    def test_content_type_guessed_from_key(self, tmp_path):
        """The content type is derived from the destination key."""
        artifact = tmp_path / "a"
        artifact.write_bytes(b"x")
        store = FakeObjectStore()

        ObjectStoreUploader(store).upload(str(artifact), "bucket", "release.zip")

        assert store.put_calls[0]["content_type"] == "application/zip"

    def test_explicit_content_type(self, tmp_path):
        """An explicit content type wins."""
        artifact = tmp_path / "a"
        artifact.write_bytes(b"x")
        store = FakeObjectStore()

        ObjectStoreUploader(store).upload(str(artifact), "bucket", "release.zip", content_type="application/x-custom")

        assert store.put_calls[0]["content_type"] == "application/x-custom"

    def test_failure_raises_upload_failed(self, tmp_path):
        """Store errors become UploadFailed with the cause attached."""
        artifact = tmp_path / "release.zip"
        artifact.write_bytes(b"x")
        cause = RuntimeError("AccessDenied")

        with pytest.raises(UploadFailed) as exc_info:
            ObjectStoreUploader(FakeObjectStore(error=cause)).upload(str(artifact), "bucket", "key.zip")

        assert exc_info.value.cause is cause
        assert exc_info.value.bucket == "bucket"
        assert exc_info.value.key == "key.zip"
