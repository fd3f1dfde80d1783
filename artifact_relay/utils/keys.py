"""
Destination key and local path utilities.

This module provides centralized functions for naming uploaded objects,
deriving artifact file names from source URLs and mapping cache keys to
local file names.
"""

import os
import posixpath
import re
import time
import uuid
from typing import Optional
from urllib.parse import quote, unquote, urlparse

from .constants import DEFAULT_ARTIFACT_NAME, GENERATED_KEY_RANDOM_LENGTH, OBJECT_URI_SCHEME

_UNSAFE_NAME_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def artifact_name_from_url(source_url: str) -> str:
    """
    Derive the artifact file name from the last segment of a URL path.

    Args:
        source_url: URL of the artifact

    Returns:
        Sanitized file name, or DEFAULT_ARTIFACT_NAME if the path has none

    Example:
        >>> artifact_name_from_url("https://example.test/v1.2/release.zip?x=1")
        'release.zip'
        >>> artifact_name_from_url("https://example.test/")
        'release.zip'
    """
    path = unquote(urlparse(source_url).path)
    basename = posixpath.basename(path.rstrip("/")) if path else ""
    if not basename:
        return DEFAULT_ARTIFACT_NAME
    return safe_file_name(basename)


def safe_file_name(name: str) -> str:
    """
    Replace characters that are unsafe in file names and object keys.

    Path separators are replaced as well, so the result never
    refers to a parent or nested directory.

    Args:
        name: Raw name

    Returns:
        Name containing only letters, digits, '.', '_' and '-'
    """
    cleaned = _UNSAFE_NAME_CHARS.sub("_", name).strip(".")
    return cleaned or "_"


def generate_destination_key(source_url: str, prefix: Optional[str] = None, now_ms: Optional[int] = None) -> str:
    """
    Generate a destination key that is unique per invocation.

    The key combines a millisecond timestamp, a random component and the
    artifact file name, so repeated transfers of the same release never
    overwrite each other.

    Args:
        source_url: URL of the artifact being transferred
        prefix: Optional key prefix ("folder")
        now_ms: Optional timestamp override in epoch milliseconds

    Returns:
        Destination key such as '1700000000000-3f2a9c1b7d4e-release.zip'
    """
    timestamp = now_ms if now_ms is not None else int(time.time() * 1000)
    random_part = uuid.uuid4().hex[:GENERATED_KEY_RANDOM_LENGTH]
    key = f"{timestamp}-{random_part}-{artifact_name_from_url(source_url)}"
    if prefix:
        return f"{prefix.strip('/')}/{key}"
    return key


def cache_file_name(cache_key: str) -> str:
    """
    Map a cache key to a file name, one distinct name per distinct key.

    Every character outside letters, digits and "_.-~" is percent-encoded,
    so the mapping is reversible with urllib.parse.unquote. Keys made only of
    dots have their dots encoded as well.

    Args:
        cache_key: Cache slot identifier

    Returns:
        File name that never refers to a parent or nested directory

    Raises:
        ValueError: If the key is empty

    Example:
        >>> cache_file_name("team/a")
        'team%2Fa'
    """
    if not cache_key:
        raise ValueError("Cache key must not be empty")
    name = quote(cache_key, safe="")
    if not name.strip("."):
        name = name.replace(".", "%2E")
    return name


def parse_object_uri(uri: str) -> tuple[str, str]:
    """
    Split an object URI of the form s3://bucket/key.

    Args:
        uri: Object URI

    Returns:
        Tuple of (bucket, key)

    Raises:
        ValueError: If the URI is not a valid object URI
    """
    if not uri.startswith(OBJECT_URI_SCHEME):
        raise ValueError(f"Object URI must start with {OBJECT_URI_SCHEME}: {uri}")
    bucket, _, key = uri[len(OBJECT_URI_SCHEME) :].partition("/")
    if not bucket or not key:
        raise ValueError(f"Object URI must name a bucket and a key: {uri}")
    return bucket, key


def ensure_directory_exists(directory: str) -> None:
    """Create a directory (and parents) if it does not exist."""
    os.makedirs(directory, exist_ok=True)


__all__ = [
    "artifact_name_from_url",
    "safe_file_name",
    "cache_file_name",
    "generate_destination_key",
    "parse_object_uri",
    "ensure_directory_exists",
]
