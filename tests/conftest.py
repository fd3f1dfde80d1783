"""
Test fixtures and fakes for artifact-relay tests.

This module provides in-memory implementations of every collaborator
protocol (secret store, object store, email sender, audit store), a
validated configuration rooted in pytest's tmp_path, and an orchestrator
factory wired from those fakes.
"""

import json
from typing import Any, Dict, List, Optional, Union

import pytest
import respx

from artifact_relay.models.config import RelayConfig
from artifact_relay.services import (
    ArtifactFetcher,
    AuditLogger,
    CredentialCache,
    Notifier,
    ObjectStoreUploader,
    SecretResolver,
    TransferOrchestrator,
)

SOURCE_URL = "https://example.test/release.zip"

DESTINATION_CREDENTIALS = json.dumps(
    {"aws_access_key_id": "AKIDEXAMPLE", "aws_secret_access_key": "secret-key-example"}
)


class FakeSecretStore:
    """In-memory secret store counting lookups per secret id."""

    def __init__(self, secrets: Optional[Dict[str, str]] = None, error: Optional[Exception] = None) -> None:
        self.secrets = dict(secrets or {})
        self.error = error
        self.calls: List[str] = []

    def get(self, secret_id: str) -> Optional[str]:
        self.calls.append(secret_id)
        if self.error is not None:
            raise self.error
        return self.secrets.get(secret_id)


class FakeObjectStore:
    """In-memory object store."""

    def __init__(self, objects: Optional[Dict[tuple, bytes]] = None, error: Optional[Exception] = None) -> None:
        self.objects: Dict[tuple, bytes] = dict(objects or {})
        self.error = error
        self.put_calls: List[Dict[str, Any]] = []

    def get_object(self, bucket: str, key: str) -> bytes:
        if self.error is not None:
            raise self.error
        return self.objects[(bucket, key)]

    def put_object(self, bucket: str, key: str, body: Union[bytes, str]) -> str:
        if self.error is not None:
            raise self.error
        self.objects[(bucket, key)] = body.encode() if isinstance(body, str) else body
        return f"s3://{bucket}/{key}"

    def put_file(self, bucket: str, key: str, path: str, content_type: Optional[str] = None) -> str:
        self.put_calls.append({"bucket": bucket, "key": key, "path": path, "content_type": content_type})
        if self.error is not None:
            raise self.error
        with open(path, "rb") as f:
            self.objects[(bucket, key)] = f.read()
        return f"s3://{bucket}/{key}"


class FakeEmailSender:
    """Email sender recording every message."""

    def __init__(self, error: Optional[Exception] = None) -> None:
        self.error = error
        self.sent: List[Dict[str, str]] = []
        self.closed = False

    def send(self, sender: str, recipient: str, subject: str, body: str) -> str:
        if self.error is not None:
            raise self.error
        self.sent.append({"sender": sender, "recipient": recipient, "subject": subject, "body": body})
        return f"<message-{len(self.sent)}@mail.example.test>"

    def close(self) -> None:
        self.closed = True


class FakeAuditStore:
    """Append-only audit store keeping items in a list."""

    def __init__(self, error: Optional[Exception] = None) -> None:
        self.error = error
        self.items: List[Dict[str, Any]] = []

    def put(self, item: Dict[str, Any]) -> None:
        if self.error is not None:
            raise self.error
        self.items.append(item)


@pytest.fixture
def relay_env(tmp_path) -> Dict[str, str]:
    """Environment variables for a complete relay configuration."""
    return {
        "DESTINATION_BUCKET": "release-mirror",
        "EMAIL_FROM": "relay@example.test",
        "EMAIL_TO": "releases@example.test",
        "AUDIT_TABLE_NAME": "relay-audit",
        "CREDENTIAL_SECRET_ARN": "arn:aws:secretsmanager:us-east-1:123456789012:secret:dest-creds",
        "MAILGUN_API_KEY_SECRET_ARN": "arn:aws:secretsmanager:us-east-1:123456789012:secret:mailgun-key",
        "MAILGUN_DOMAIN_SECRET_ARN": "arn:aws:secretsmanager:us-east-1:123456789012:secret:mailgun-domain",
        "CREDENTIAL_CACHE_DIR": str(tmp_path / "cache"),
        "DOWNLOAD_DIR": str(tmp_path / "downloads"),
    }


@pytest.fixture
def relay_config(relay_env) -> RelayConfig:
    """Validated relay configuration."""
    return RelayConfig.from_env(relay_env)


@pytest.fixture
def secret_store(relay_env) -> FakeSecretStore:
    """Secret store holding every secret the relay needs."""
    return FakeSecretStore(
        {
            relay_env["CREDENTIAL_SECRET_ARN"]: DESTINATION_CREDENTIALS,
            relay_env["MAILGUN_API_KEY_SECRET_ARN"]: "key-example",
            relay_env["MAILGUN_DOMAIN_SECRET_ARN"]: '"mg.example.test"',
        }
    )


@pytest.fixture
def object_store() -> FakeObjectStore:
    """Destination object store."""
    return FakeObjectStore()


@pytest.fixture
def email_sender() -> FakeEmailSender:
    """Email sender."""
    return FakeEmailSender()


@pytest.fixture
def audit_store() -> FakeAuditStore:
    """Audit store."""
    return FakeAuditStore()


@pytest.fixture
def httpx_mock():
    """Provide respx mock for HTTP mocking."""
    with respx.mock:
        yield respx


@pytest.fixture
def make_orchestrator(relay_config, secret_store, object_store, email_sender, audit_store):
    """Factory building an orchestrator wired to the fakes."""

    def _make(config: Optional[RelayConfig] = None, **kwargs: Any) -> TransferOrchestrator:
        cfg = config or relay_config
        resolver = SecretResolver(kwargs.pop("secret_store", secret_store))
        uploader_store = kwargs.pop("object_store", object_store)
        sender = kwargs.pop("email_sender", email_sender)
        return TransferOrchestrator(
            config=cfg,
            secret_resolver=resolver,
            credential_cache=kwargs.pop("credential_cache", CredentialCache(cfg.cache_dir)),
            fetcher=kwargs.pop("fetcher", ArtifactFetcher(cfg.download_dir)),
            uploader_factory=kwargs.pop("uploader_factory", lambda secrets: ObjectStoreUploader(uploader_store)),
            notifier_factory=kwargs.pop("notifier_factory", lambda secrets: Notifier(sender, cfg.notify_from)),
            audit_logger=AuditLogger(kwargs.pop("audit_store", audit_store)),
            **kwargs,
        )

    return _make
