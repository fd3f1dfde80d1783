"""Models describing local files handled by the relay."""

from typing import Optional

from pydantic import Field

from .base import RelayBaseModel


class FetchedArtifact(RelayBaseModel):
    """
    An artifact streamed to local storage.

    Attributes:
        source_url: URL the artifact was downloaded from
        path: Local file path
        size_bytes: Number of bytes written
        sha256: SHA256 checksum of the content
        content_type: Content-Type reported by the source, if any
    """

    source_url: str
    path: str
    size_bytes: int = Field(ge=0)
    sha256: str
    content_type: Optional[str] = None


class CredentialCacheEntry(RelayBaseModel):
    """
    State of one credential cache slot.

    Attributes:
        cache_key: Cache slot identifier
        local_path: File backing the slot
        present: Whether the file currently exists
    """

    cache_key: str
    local_path: str
    present: bool


class ResolvedSecrets(RelayBaseModel):
    """
    Secret material gathered before any transfer step runs.

    Attributes:
        credentials_path: Local path of the destination credential file
        mail_api_key: Email provider API key
        mail_domain: Email provider sending domain
    """

    credentials_path: str
    mail_api_key: str = Field(repr=False)
    mail_domain: str


__all__ = ["FetchedArtifact", "CredentialCacheEntry", "ResolvedSecrets"]
