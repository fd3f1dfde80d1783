"""
Object store uploader.

This module writes a fetched artifact to its destination bucket/key.
"""

import logging
import mimetypes
from typing import Optional

from ..exceptions import UploadFailed
from ..protocols import ObjectStore


class ObjectStoreUploader:
    """Uploads local artifacts to an object store."""

    def __init__(self, store: ObjectStore) -> None:
        self._store = store

    def upload(
        self,
        local_artifact: str,
        destination_bucket: str,
        destination_key: str,
        content_type: Optional[str] = None,
    ) -> str:
        """
        Upload a local file to destination_bucket/destination_key.

        Partially written objects are not cleaned up on failure.

        Args:
            local_artifact: Path of the local file
            destination_bucket: Target bucket
            destination_key: Target key
            content_type: Content type; guessed from the key when None

        Returns:
            Destination reference (URL or URI) of the uploaded object

        Raises:
            UploadFailed: If the store rejects the upload
        """
        if content_type is None:
            content_type, _ = mimetypes.guess_type(destination_key)

        logging.info("Uploading %s to %s/%s", local_artifact, destination_bucket, destination_key)
        try:
            reference = self._store.put_file(destination_bucket, destination_key, local_artifact, content_type)
        except Exception as e:
            raise UploadFailed(destination_bucket, destination_key, e) from e

        logging.info("Uploaded artifact: %s", reference)
        return reference


__all__ = ["ObjectStoreUploader"]
