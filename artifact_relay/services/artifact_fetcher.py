"""
Artifact fetcher for downloading release artifacts.

This module streams a remote artifact to local storage chunk by chunk, so
peak memory stays bounded regardless of the artifact size.
"""

# Standard library imports
import hashlib
import logging
import os
import tempfile
from typing import Optional

# Third-party imports
import httpx

# Local imports
from ..exceptions import FetchFailed
from ..models.artifacts import FetchedArtifact
from ..utils.constants import DEFAULT_HTTP_TIMEOUT, MAX_CHUNK_SIZE, MIN_CHUNK_SIZE
from ..utils.error_handling import handle_http_error
from ..utils.keys import artifact_name_from_url, ensure_directory_exists
from ..utils.session import create_session


def chunk_size_for(content_length: Optional[str]) -> int:
    """Pick a streaming chunk size from the Content-Length header.

    Larger files get larger chunks, bounded to [MIN_CHUNK_SIZE, MAX_CHUNK_SIZE].
    """
    if not content_length or not content_length.isdigit():
        return MIN_CHUNK_SIZE
    return min(max(MIN_CHUNK_SIZE, int(content_length) // 100), MAX_CHUNK_SIZE)


class ArtifactFetcher:
    """Downloads artifacts over HTTP(S) into a local directory."""

    def __init__(
        self, download_dir: str, session: Optional[httpx.Client] = None, timeout: float = DEFAULT_HTTP_TIMEOUT
    ) -> None:
        """Initialize the fetcher.

        Args:
            download_dir: Directory receiving downloaded artifacts
            session: Optional httpx client (one is created when None)
            timeout: Request timeout in seconds for a created session
        """
        self.download_dir = download_dir
        self.session = session if session is not None else create_session(timeout=timeout)

    def fetch(self, source_url: str) -> FetchedArtifact:
        """Stream an artifact to a new local file.

        Args:
            source_url: URL to download

        Returns:
            FetchedArtifact describing the local copy

        Raises:
            FetchFailed: On any non-success response, unusable URL or transport error
        """
        logging.info("Fetching artifact %s", source_url)
        try:
            ensure_directory_exists(self.download_dir)
            fd, path = tempfile.mkstemp(dir=self.download_dir, suffix=f"-{artifact_name_from_url(source_url)}")
        except OSError as e:
            raise FetchFailed(None, f"cannot create local file: {e}", source_url) from e

        digest = hashlib.sha256()
        size = 0
        completed = False
        try:
            with os.fdopen(fd, "wb") as f, self.session.stream("GET", source_url) as response:
                if not response.is_success:
                    raise FetchFailed(response.status_code, response.reason_phrase, source_url)

                content_type = response.headers.get("content-type")
                for chunk in response.iter_bytes(chunk_size=chunk_size_for(response.headers.get("content-length"))):
                    f.write(chunk)
                    digest.update(chunk)
                    size += len(chunk)
            completed = True
        except FetchFailed:
            raise
        except httpx.HTTPError as e:
            handle_http_error(e, "artifact fetch")
            raise FetchFailed(None, str(e) or type(e).__name__, source_url) from e
        except httpx.InvalidURL as e:
            raise FetchFailed(None, f"invalid URL: {e}", source_url) from e
        except OSError as e:
            raise FetchFailed(None, f"local write failed: {e}", source_url) from e
        finally:
            if not completed:
                self._discard(path)

        logging.info("Fetched %d bytes from %s", size, source_url)
        return FetchedArtifact(
            source_url=source_url,
            path=path,
            size_bytes=size,
            sha256=digest.hexdigest(),
            content_type=content_type,
        )

    @staticmethod
    def _discard(path: str) -> None:
        if os.path.exists(path):
            os.remove(path)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()


__all__ = ["ArtifactFetcher", "chunk_size_for"]
