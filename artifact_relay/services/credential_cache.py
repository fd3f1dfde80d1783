"""
Local credential cache.

Keeps a copy of a service credential file in ephemeral storage so that
invocations sharing an execution environment fetch it at most once.

Concurrent invocations may race on the same slot. No lock is taken: both
writers store the same bytes and the atomic rename makes the last write
win. A corrupted file is not detected; invalidate() is the remedy.
"""

import logging
import os
import tempfile
from typing import Callable, Union

from ..exceptions import CacheIOError, CredentialFetchFailed
from ..models.artifacts import CredentialCacheEntry
from ..protocols import ObjectStore
from ..utils.constants import CACHE_FILE_MODE
from ..utils.keys import cache_file_name, ensure_directory_exists, parse_object_uri
from .secret_resolver import SecretResolver

FetchFn = Callable[[], Union[bytes, str]]


class CredentialCache:
    """Idempotent, file-backed credential cache."""

    def __init__(self, cache_dir: str) -> None:
        """
        Initialize the cache.

        Args:
            cache_dir: Directory holding cached files (created on first write)
        """
        self.cache_dir = cache_dir

    def path_for(self, cache_key: str) -> str:
        """Return the local path backing a cache key."""
        return os.path.join(self.cache_dir, cache_file_name(cache_key))

    def entry(self, cache_key: str) -> CredentialCacheEntry:
        """Describe the current state of a cache slot."""
        path = self.path_for(cache_key)
        return CredentialCacheEntry(cache_key=cache_key, local_path=path, present=os.path.isfile(path))

    def ensure_local(self, cache_key: str, fetch_fn: FetchFn) -> str:
        """
        Make sure the credential file for cache_key exists locally.

        fetch_fn is only called when the file is absent.

        Args:
            cache_key: Cache slot identifier
            fetch_fn: Returns the credential content

        Returns:
            Local path of the credential file

        Raises:
            CredentialFetchFailed: If fetch_fn fails
            CacheIOError: If the file cannot be written
        """
        entry = self.entry(cache_key)
        if entry.present:
            logging.debug("Credential cache hit for %s", cache_key)
            return entry.local_path

        logging.info("Credential cache miss for %s, fetching", cache_key)
        try:
            content = fetch_fn()
        except Exception as e:
            raise CredentialFetchFailed(cache_key, e) from e

        data = content.encode("utf-8") if isinstance(content, str) else content
        self._write(entry.local_path, data)
        return entry.local_path

    def invalidate(self, cache_key: str) -> bool:
        """
        Delete the cached file for cache_key.

        Returns:
            True if a file was removed, False if the slot was empty

        Raises:
            CacheIOError: If the file exists but cannot be removed
        """
        path = self.path_for(cache_key)
        try:
            os.remove(path)
        except FileNotFoundError:
            return False
        except OSError as e:
            raise CacheIOError(path, e) from e
        logging.info("Invalidated credential cache entry %s", cache_key)
        return True

    def _write(self, path: str, data: bytes) -> None:
        tmp_path = None
        try:
            ensure_directory_exists(self.cache_dir)
            fd, tmp_path = tempfile.mkstemp(dir=self.cache_dir, prefix=".tmp-")
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.chmod(tmp_path, CACHE_FILE_MODE)
            os.replace(tmp_path, path)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise CacheIOError(path, e) from e
        logging.debug("Wrote %d bytes to credential cache %s", len(data), path)


def secret_fetcher(resolver: SecretResolver, secret_id: str) -> FetchFn:
    """Fetch function reading credential content from a secret."""

    def fetch() -> str:
        return resolver.resolve(secret_id)

    return fetch


def object_fetcher(store: ObjectStore, object_uri: str) -> FetchFn:
    """Fetch function reading credential content from an s3://bucket/key object."""
    bucket, key = parse_object_uri(object_uri)

    def fetch() -> bytes:
        return store.get_object(bucket, key)

    return fetch


__all__ = ["CredentialCache", "FetchFn", "secret_fetcher", "object_fetcher"]
