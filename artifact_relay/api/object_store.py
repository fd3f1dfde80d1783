"""
S3 object store adapter.

Works against AWS S3 and S3-compatible services (for example Google Cloud
Storage through its interoperability endpoint) by way of endpoint_url.
"""

import json
import logging
from typing import Any, Dict, Optional, Union

import boto3

from ..exceptions import CacheIOError

# Keys accepted in a destination credential file
CREDENTIAL_FILE_KEYS = (
    "aws_access_key_id",
    "aws_secret_access_key",
    "aws_session_token",
    "region_name",
    "endpoint_url",
)


class S3ObjectStore:
    """Object store backed by an S3 client."""

    def __init__(
        self,
        client: Optional[Any] = None,
        public_base_url: Optional[str] = None,
        **client_kwargs: Any,
    ) -> None:
        """
        Initialize the object store.

        Args:
            client: Pre-built s3 client; built from client_kwargs when None
            public_base_url: Base URL used for references ("<base>/<bucket>/<key>");
                references are s3:// URIs when None
            **client_kwargs: Keyword arguments for boto3.client("s3", ...)
        """
        self._client = client if client is not None else boto3.client("s3", **client_kwargs)
        self.public_base_url = public_base_url.rstrip("/") if public_base_url else None

    @classmethod
    def from_credentials_file(
        cls, path: str, region_name: Optional[str] = None, public_base_url: Optional[str] = None
    ) -> "S3ObjectStore":
        """
        Build an object store from a JSON credential file.

        Args:
            path: Path to the credential file (see CREDENTIAL_FILE_KEYS)
            region_name: Region used when the file names none
            public_base_url: Base URL for references

        Raises:
            CacheIOError: If the file cannot be read
            ValueError: If the file is not a JSON object with access keys
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = f.read()
        except OSError as e:
            raise CacheIOError(path, e) from e

        try:
            data = json.loads(raw)
        except ValueError as e:
            raise ValueError(f"Credential file {path} is not valid JSON") from e
        if not isinstance(data, dict):
            raise ValueError(f"Credential file {path} must contain a JSON object")

        missing = [k for k in ("aws_access_key_id", "aws_secret_access_key") if not data.get(k)]
        if missing:
            raise ValueError(f"Credential file {path} is missing: {', '.join(missing)}")

        client_kwargs: Dict[str, Any] = {k: data[k] for k in CREDENTIAL_FILE_KEYS if data.get(k)}
        if region_name and "region_name" not in client_kwargs:
            client_kwargs["region_name"] = region_name

        logging.debug("Building object store client from credential file %s", path)
        return cls(public_base_url=public_base_url, **client_kwargs)

    def reference(self, bucket: str, key: str) -> str:
        """Return the resolvable reference for an object."""
        if self.public_base_url:
            return f"{self.public_base_url}/{bucket}/{key}"
        return f"s3://{bucket}/{key}"

    def get_object(self, bucket: str, key: str) -> bytes:
        """Return the content of an object."""
        logging.debug("Reading object s3://%s/%s", bucket, key)
        response = self._client.get_object(Bucket=bucket, Key=key)
        return response["Body"].read()

    def put_object(self, bucket: str, key: str, body: Union[bytes, str]) -> str:
        """Write an object from memory and return its reference."""
        payload = body.encode("utf-8") if isinstance(body, str) else body
        self._client.put_object(Bucket=bucket, Key=key, Body=payload)
        return self.reference(bucket, key)

    def put_file(self, bucket: str, key: str, path: str, content_type: Optional[str] = None) -> str:
        """
        Stream a local file into an object.

        The managed transfer switches to multipart uploads for large files,
        so the file is never held in memory as a whole.
        """
        extra_args = {"ContentType": content_type} if content_type else None
        self._client.upload_file(path, bucket, key, ExtraArgs=extra_args)
        return self.reference(bucket, key)


__all__ = ["S3ObjectStore", "CREDENTIAL_FILE_KEYS"]
