"""
Serverless function entry point.

Each invocation builds a fresh orchestrator from a validated configuration;
only the credential cache directory outlives an invocation.
"""

import logging
import os
from typing import Any, Dict, Mapping, Optional

from botocore.exceptions import BotoCoreError

from .api import DynamoDBAuditStore, MailgunClient, S3ObjectStore, SecretsManagerStore
from .exceptions import ConfigurationError
from .models.artifacts import ResolvedSecrets
from .models.config import RelayConfig
from .services import (
    ArtifactFetcher,
    AuditLogger,
    CredentialCache,
    Notifier,
    ObjectStoreUploader,
    SecretResolver,
    TransferOrchestrator,
    object_fetcher,
)
from .utils.logger import setup_logging, verbosity_from_level_name


def build_orchestrator(config: RelayConfig) -> TransferOrchestrator:
    """
    Wire the concrete adapters into an orchestrator for one invocation.

    Clients that need no secret material are built here, before the
    invocation starts, so a deployment that cannot build them (for example
    with no AWS region available) fails like an invalid configuration.

    Args:
        config: Validated relay configuration

    Returns:
        TransferOrchestrator owning the clients it was given

    Raises:
        ConfigurationError: If an AWS client or the credential source cannot be set up
    """
    try:
        secret_store = SecretsManagerStore(region_name=config.aws_region)
        audit_store = DynamoDBAuditStore(config.audit_table_name, region_name=config.aws_region)

        credential_fetcher = None
        if config.credential_object_uri:
            # Credential objects are read with the function's own (ambient) credentials
            credential_fetcher = object_fetcher(
                S3ObjectStore(region_name=config.aws_region), config.credential_object_uri
            )
    except (BotoCoreError, ValueError) as e:
        raise ConfigurationError(f"Cannot set up relay clients: {e}") from e

    def uploader_factory(secrets: ResolvedSecrets) -> ObjectStoreUploader:
        store = S3ObjectStore.from_credentials_file(
            secrets.credentials_path,
            region_name=config.aws_region,
            public_base_url=config.public_base_url,
        )
        return ObjectStoreUploader(store)

    def notifier_factory(secrets: ResolvedSecrets) -> Notifier:
        client = MailgunClient(secrets.mail_api_key, secrets.mail_domain, timeout=config.http_timeout)
        return Notifier(client, config.notify_from)

    return TransferOrchestrator(
        config=config,
        secret_resolver=SecretResolver(secret_store),
        credential_cache=CredentialCache(config.cache_dir),
        fetcher=ArtifactFetcher(config.download_dir, timeout=config.http_timeout),
        uploader_factory=uploader_factory,
        notifier_factory=notifier_factory,
        audit_logger=AuditLogger(audit_store),
        credential_fetcher=credential_fetcher,
    )


def run_invocation(event: Mapping[str, Any], config: RelayConfig) -> Dict[str, Any]:
    """
    Run one invocation and return the function response mapping.

    Args:
        event: Trigger event
        config: Validated relay configuration

    Returns:
        {"statusCode": ..., "body": "<json>"}
    """
    orchestrator = build_orchestrator(config)
    try:
        result = orchestrator.run(event)
    finally:
        orchestrator.close()
    return result.to_response()


def handler(event: Mapping[str, Any], context: Optional[Any] = None) -> Dict[str, Any]:
    """
    Function entry point.

    Configuration is read from the environment on every call, so a
    misconfigured deployment fails fast with ConfigurationError instead of
    starting a transfer.
    """
    setup_logging(verbosity_from_level_name(os.environ.get("LOG_LEVEL")))
    config = RelayConfig.from_env()
    request_id = getattr(context, "aws_request_id", None)
    if request_id:
        logging.info("Handling invocation %s", request_id)
    return run_invocation(event, config)


__all__ = ["handler", "build_orchestrator", "run_invocation"]
