"""Tests for the S3 object store adapter."""

import io
import json
from unittest.mock import Mock, patch

import pytest

from artifact_relay.api import S3ObjectStore
from artifact_relay.exceptions import CacheIOError


@pytest.fixture
def s3_client():
    """Mock boto3 s3 client."""
    client = Mock()
    client.get_object.return_value = {"Body": io.BytesIO(b"stored")}
    return client


class TestS3ObjectStore:
    """Test S3ObjectStore operations."""

    def test_reference_defaults_to_uri(self, s3_client):
        """Without a public base URL references are s3:// URIs."""
        assert S3ObjectStore(client=s3_client).reference("bucket", "a/b.zip") == "s3://bucket/a/b.zip"

    def test_reference_with_public_base_url(self, s3_client):
        """A public base URL yields browsable links."""
        store = S3ObjectStore(client=s3_client, public_base_url="https://storage.googleapis.com/")
        assert store.reference("bucket", "b.zip") == "https://storage.googleapis.com/bucket/b.zip"

    def test_get_object(self, s3_client):
        """get_object returns the body bytes."""
        assert S3ObjectStore(client=s3_client).get_object("bucket", "key") == b"stored"
        s3_client.get_object.assert_called_once_with(Bucket="bucket", Key="key")

    def test_put_object(self, s3_client):
        """Strings are encoded before upload."""
        reference = S3ObjectStore(client=s3_client).put_object("bucket", "key.json", "{}")

        s3_client.put_object.assert_called_once_with(Bucket="bucket", Key="key.json", Body=b"{}")
        assert reference == "s3://bucket/key.json"

    def test_put_file(self, s3_client, tmp_path):
        """Files go through the managed transfer with their content type."""
        path = tmp_path / "release.zip"
        path.write_bytes(b"x")

        reference = S3ObjectStore(client=s3_client).put_file("bucket", "release.zip", str(path), "application/zip")

        s3_client.upload_file.assert_called_once_with(
            str(path), "bucket", "release.zip", ExtraArgs={"ContentType": "application/zip"}
        )
        assert reference == "s3://bucket/release.zip"

    def test_put_file_without_content_type(self, s3_client, tmp_path):
        """No extra arguments are sent without a content type."""
        path = tmp_path / "artifact"
        path.write_bytes(b"x")

        S3ObjectStore(client=s3_client).put_file("bucket", "artifact", str(path))

        assert s3_client.upload_file.call_args.kwargs["ExtraArgs"] is None


class TestFromCredentialsFile:
    """Test building a store from a credential file."""

    def test_builds_client_from_file(self, tmp_path):
        """Access keys and endpoint come from the file, the region from the caller."""
        path = tmp_path / "credentials.json"
        path.write_text(
            json.dumps(
                {
                    "aws_access_key_id": "GOOGEXAMPLE",
                    "aws_secret_access_key": "secret",
                    "endpoint_url": "https://storage.googleapis.com",
                    "ignored": "value",
                }
            )
        )

        with patch("artifact_relay.api.object_store.boto3.client") as mock_client:
            store = S3ObjectStore.from_credentials_file(str(path), region_name="auto")

        mock_client.assert_called_once_with(
            "s3",
            aws_access_key_id="GOOGEXAMPLE",
            aws_secret_access_key="secret",
            endpoint_url="https://storage.googleapis.com",
            region_name="auto",
        )
        assert store.public_base_url is None

    def test_file_region_wins(self, tmp_path):
        """A region in the file is not overridden."""
        path = tmp_path / "credentials.json"
        path.write_text(
            json.dumps({"aws_access_key_id": "AKID", "aws_secret_access_key": "secret", "region_name": "eu-west-1"})
        )

        with patch("artifact_relay.api.object_store.boto3.client") as mock_client:
            S3ObjectStore.from_credentials_file(str(path), region_name="us-east-1")

        assert mock_client.call_args.kwargs["region_name"] == "eu-west-1"

    def test_missing_file(self, tmp_path):
        """Unreadable files raise CacheIOError."""
        with pytest.raises(CacheIOError):
            S3ObjectStore.from_credentials_file(str(tmp_path / "missing.json"))

    @pytest.mark.parametrize(
        "content,message",
        [
            ("not json", "not valid JSON"),
            ("[]", "JSON object"),
            ('{"aws_access_key_id": "AKID"}', "aws_secret_access_key"),
        ],
    )
    def test_invalid_file(self, tmp_path, content, message):
        """Malformed credential files are rejected."""
        path = tmp_path / "credentials.json"
        path.write_text(content)

        with pytest.raises(ValueError, match=message):
            S3ObjectStore.from_credentials_file(str(path))
