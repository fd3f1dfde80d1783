"""
Transfer orchestration.

The orchestrator runs one invocation as an explicit state machine:

    Init -> SecretsResolved -> ArtifactFetched -> ArtifactUploaded -> Notified -> Logged -> Done

with an absorbing Failed state reachable from any non-terminal state. After
entering Failed the notification and audit steps are still attempted with
the failure content, each independently of the other. The returned result
reflects only the transfer steps.
"""

import logging
import os
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional

from ..exceptions import AuditWriteFailed, NotifyFailed, RelayError
from ..models.artifacts import FetchedArtifact, ResolvedSecrets
from ..models.audit import AuditRecord
from ..models.config import RelayConfig
from ..models.outcome import InvocationResult, TransferOutcome
from ..models.request import TransferRequest
from ..utils.error_handling import handle_generic_error
from .artifact_fetcher import ArtifactFetcher
from .audit_logger import AuditLogger
from .credential_cache import CredentialCache, FetchFn, secret_fetcher
from .notifier import Notifier
from .secret_resolver import SecretResolver
from .uploader import ObjectStoreUploader

UploaderFactory = Callable[[ResolvedSecrets], ObjectStoreUploader]
NotifierFactory = Callable[[ResolvedSecrets], Notifier]


class RelayState(str, Enum):
    """States of one relay invocation."""

    INIT = "Init"
    SECRETS_RESOLVED = "SecretsResolved"
    ARTIFACT_FETCHED = "ArtifactFetched"
    ARTIFACT_UPLOADED = "ArtifactUploaded"
    NOTIFIED = "Notified"
    LOGGED = "Logged"
    DONE = "Done"
    FAILED = "Failed"


# Happy path, in order
STATE_SEQUENCE = [
    RelayState.INIT,
    RelayState.SECRETS_RESOLVED,
    RelayState.ARTIFACT_FETCHED,
    RelayState.ARTIFACT_UPLOADED,
    RelayState.NOTIFIED,
    RelayState.LOGGED,
    RelayState.DONE,
]

TERMINAL_STATES = (RelayState.DONE, RelayState.FAILED)


class TransferOrchestrator:
    """
    Sequences secret resolution, fetch, upload, notification and audit.

    One orchestrator serves one invocation and owns the clients handed to it
    for that duration. Uploader and notifier depend on secret material, so
    they are built by factories once secrets are resolved.
    """

    def __init__(
        self,
        config: RelayConfig,
        secret_resolver: SecretResolver,
        credential_cache: CredentialCache,
        fetcher: ArtifactFetcher,
        uploader_factory: UploaderFactory,
        notifier_factory: NotifierFactory,
        audit_logger: AuditLogger,
        credential_fetcher: Optional[FetchFn] = None,
    ) -> None:
        """
        Initialize the orchestrator.

        Args:
            config: Validated relay configuration
            secret_resolver: Resolves email provider secrets (and credentials by default)
            credential_cache: Local cache for the destination credential file
            fetcher: Downloads the source artifact
            uploader_factory: Builds the uploader from resolved secrets
            notifier_factory: Builds the notifier from resolved secrets
            audit_logger: Appends the audit record
            credential_fetcher: Fetch function for the credential file; defaults to
                reading config.credential_secret_id through the secret resolver
        """
        if credential_fetcher is None:
            if not config.credential_secret_id:
                raise ValueError("credential_fetcher is required when credentials come from an object URI")
            credential_fetcher = secret_fetcher(secret_resolver, config.credential_secret_id)

        self.config = config
        self._secret_resolver = secret_resolver
        self._credential_cache = credential_cache
        self._credential_fetcher = credential_fetcher
        self._fetcher = fetcher
        self._uploader_factory = uploader_factory
        self._notifier_factory = notifier_factory
        self._audit_logger = audit_logger

        self._notifier: Optional[Notifier] = None
        self.request: Optional[TransferRequest] = None
        self.outcome: Optional[TransferOutcome] = None
        self.state = RelayState.INIT
        self.history: List[RelayState] = [RelayState.INIT]

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------

    def _transition(self, state: RelayState) -> None:
        if self.state in TERMINAL_STATES:
            raise RuntimeError(f"Invocation already finished in state {self.state.value}")
        if state is not RelayState.FAILED:
            expected = STATE_SEQUENCE[STATE_SEQUENCE.index(self.state) + 1]
            if state is not expected:
                raise RuntimeError(f"Illegal transition {self.state.value} -> {state.value}")
        logging.debug("Relay state %s -> %s", self.state.value, state.value)
        self.state = state
        self.history.append(state)

    @property
    def failed(self) -> bool:
        """Whether the invocation entered the Failed state."""
        return self.state is RelayState.FAILED

    # ------------------------------------------------------------------
    # Invocation
    # ------------------------------------------------------------------

    def run(self, event: Mapping[str, Any]) -> InvocationResult:
        """
        Execute one invocation for a trigger event.

        Args:
            event: Trigger event (SNS notification or bare message)

        Returns:
            InvocationResult with status code 200 on success, 500 on failure
        """
        if len(self.history) > 1:
            raise RuntimeError("A TransferOrchestrator runs exactly one invocation")

        outcome = self._execute_transfer(event)
        self.outcome = outcome
        self._report(outcome)

        result = outcome.to_result()
        if result.ok:
            logging.info("Relay invocation completed: %s", outcome.destination_reference)
        else:
            logging.error("Relay invocation failed: %s", outcome.error_message)
        return result

    def _execute_transfer(self, event: Mapping[str, Any]) -> TransferOutcome:
        try:
            self.request = TransferRequest.from_event(event, self.config)
            logging.info(
                "Relaying %s (correlation id %s)", self.request.source_url, self.request.correlation_id
            )
            secrets = self._resolve_secrets()
            self._notifier = self._notifier_factory(secrets)
            uploader = self._uploader_factory(secrets)
        except Exception as e:  # pylint: disable=broad-exception-caught
            return self._fail("invocation setup", e)
        self._transition(RelayState.SECRETS_RESOLVED)

        artifact: Optional[FetchedArtifact] = None
        try:
            artifact = self._fetcher.fetch(self.request.source_url)
            self._transition(RelayState.ARTIFACT_FETCHED)

            reference = uploader.upload(
                artifact.path,
                self.request.destination_bucket,
                self.request.destination_key,
                content_type=artifact.content_type,
            )
            self._transition(RelayState.ARTIFACT_UPLOADED)
        except Exception as e:  # pylint: disable=broad-exception-caught
            return self._fail("artifact transfer", e)
        finally:
            if artifact is not None:
                self._remove_local_artifact(artifact.path)

        return TransferOutcome.success(reference)

    def _resolve_secrets(self) -> ResolvedSecrets:
        """Resolve email secrets and make the destination credential file local."""
        mail_api_key = self._secret_resolver.resolve(self.config.mail_api_key_secret_id)
        mail_domain = self._secret_resolver.resolve_text(self.config.mail_domain_secret_id)

        credentials_path = self._credential_cache.ensure_local(
            self.config.credential_cache_key, self._credential_fetcher
        )
        secrets = ResolvedSecrets(
            credentials_path=credentials_path,
            mail_api_key=mail_api_key,
            mail_domain=mail_domain,
        )
        return secrets

    def _fail(self, step: str, error: Exception) -> TransferOutcome:
        if isinstance(error, RelayError):
            logging.error("Relay step '%s' failed: %s", step, error)
        else:
            handle_generic_error(error, step)
        self._transition(RelayState.FAILED)
        message = str(error) or type(error).__name__
        return TransferOutcome.failure(message)

    # ------------------------------------------------------------------
    # Best-effort reporting
    # ------------------------------------------------------------------

    def _report(self, outcome: TransferOutcome) -> None:
        """Notify and audit, each independently and without altering the outcome."""
        if self._notifier is not None:
            try:
                self._notifier.notify_outcome(self.config.notify_to, outcome, self.request)
            except NotifyFailed as e:
                logging.error("Notification failed (transfer status unchanged): %s", e)
        else:
            logging.warning("No notifier available, skipping notification")
        if not self.failed:
            self._transition(RelayState.NOTIFIED)

        record = AuditRecord(
            email=self.config.notify_to,
            status=outcome.audit_status,
            detail=self._audit_detail(outcome),
            correlation_id=self.request.correlation_id if self.request else None,
        )
        try:
            self._audit_logger.record(record)
        except AuditWriteFailed as e:
            logging.error("Audit write failed (transfer status unchanged): %s", e)
        if not self.failed:
            self._transition(RelayState.LOGGED)
            self._transition(RelayState.DONE)

    @staticmethod
    def _audit_detail(outcome: TransferOutcome) -> str:
        if outcome.succeeded:
            return f"File uploaded. Submission link: {outcome.destination_reference}"
        return outcome.error_message or "Unknown error"

    @staticmethod
    def _remove_local_artifact(path: str) -> None:
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logging.warning("Could not remove local artifact %s: %s", path, e)

    def close(self) -> None:
        """Close clients owned by this invocation."""
        self._fetcher.close()
        if self._notifier is not None:
            self._notifier.close()


__all__ = [
    "TransferOrchestrator",
    "RelayState",
    "STATE_SEQUENCE",
    "UploaderFactory",
    "NotifierFactory",
]
