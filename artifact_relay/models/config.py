"""Configuration model for artifact relay invocations."""

import os
from typing import Any, Dict, Mapping, Optional

from pydantic import Field, ValidationError, field_validator, model_validator

from ..exceptions import ConfigurationError
from ..utils.constants import (
    DEFAULT_CACHE_DIR,
    DEFAULT_CREDENTIAL_CACHE_KEY,
    DEFAULT_DOWNLOAD_DIR,
    DEFAULT_HTTP_TIMEOUT,
    KEY_STRATEGIES,
    KEY_STRATEGY_FIXED,
    OBJECT_URI_SCHEME,
    REMOTE_URL_SCHEMES,
)
from .base import RelayBaseModel

# Field name -> environment variable
ENV_VARS: Dict[str, str] = {
    "source_url": "SOURCE_URL",
    "destination_bucket": "DESTINATION_BUCKET",
    "destination_key_strategy": "DESTINATION_KEY_STRATEGY",
    "destination_key": "DESTINATION_KEY",
    "notify_from": "EMAIL_FROM",
    "notify_to": "EMAIL_TO",
    "audit_table_name": "AUDIT_TABLE_NAME",
    "credential_cache_key": "CREDENTIAL_CACHE_KEY",
    "credential_secret_id": "CREDENTIAL_SECRET_ARN",
    "credential_object_uri": "CREDENTIAL_OBJECT_URI",
    "mail_api_key_secret_id": "MAILGUN_API_KEY_SECRET_ARN",
    "mail_domain_secret_id": "MAILGUN_DOMAIN_SECRET_ARN",
    "cache_dir": "CREDENTIAL_CACHE_DIR",
    "download_dir": "DOWNLOAD_DIR",
    "aws_region": "AWS_REGION",
    "public_base_url": "PUBLIC_BASE_URL",
    "http_timeout": "HTTP_TIMEOUT",
}


class RelayConfig(RelayBaseModel):
    """
    Validated configuration for one execution environment.

    Built once at startup (from the environment, optionally overlaid with a
    configuration file) and passed down to every component.

    Attributes:
        source_url: Default artifact origin, used when the trigger has none
        destination_bucket: Bucket receiving the artifact
        destination_key_strategy: "generated" (unique key per transfer) or "fixed" (overwrite)
        destination_key: Key used with the "fixed" strategy when the trigger has none
        notify_from: Sender address for outcome notifications
        notify_to: Recipient address for outcome notifications
        audit_table_name: Audit store identifier
        credential_cache_key: Local cache slot for the destination credential file
        credential_secret_id: Secret holding the destination credential file
        credential_object_uri: s3:// URI of the destination credential file (alternative source)
        mail_api_key_secret_id: Secret holding the email provider API key
        mail_domain_secret_id: Secret holding the email provider sending domain
        cache_dir: Directory backing the credential cache
        download_dir: Directory receiving streamed artifacts
        aws_region: Region for AWS clients (boto3 default chain when None)
        public_base_url: Base URL for destination references (s3:// URIs when None)
        http_timeout: Timeout for artifact downloads and email delivery in seconds
    """

    source_url: Optional[str] = None
    destination_bucket: str = Field(min_length=1)
    destination_key_strategy: str = "generated"
    destination_key: Optional[str] = None
    notify_from: str = Field(min_length=1)
    notify_to: str = Field(min_length=1)
    audit_table_name: str = Field(min_length=1)
    credential_cache_key: str = Field(default=DEFAULT_CREDENTIAL_CACHE_KEY, min_length=1)
    credential_secret_id: Optional[str] = None
    credential_object_uri: Optional[str] = None
    mail_api_key_secret_id: str = Field(min_length=1)
    mail_domain_secret_id: str = Field(min_length=1)
    cache_dir: str = DEFAULT_CACHE_DIR
    download_dir: str = DEFAULT_DOWNLOAD_DIR
    aws_region: Optional[str] = None
    public_base_url: Optional[str] = None
    http_timeout: float = Field(default=DEFAULT_HTTP_TIMEOUT, gt=0)

    @field_validator("destination_key_strategy")
    @classmethod
    def validate_key_strategy(cls, v: str) -> str:
        """Validate that the key strategy is a known one."""
        strategy = v.strip().lower()
        if strategy not in KEY_STRATEGIES:
            raise ValueError(
                f"Invalid destination key strategy: {v}. Valid strategies are: {', '.join(KEY_STRATEGIES)}"
            )
        return strategy

    @field_validator("source_url")
    @classmethod
    def validate_source_url(cls, v: Optional[str]) -> Optional[str]:
        """Validate that the default source is an HTTP(S) URL."""
        if v is not None and not v.startswith(REMOTE_URL_SCHEMES):
            raise ValueError(f"source_url must be an http(s) URL: {v}")
        return v

    @field_validator("public_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        """Normalize the public base URL."""
        return v.rstrip("/") if v else v

    @model_validator(mode="after")
    def validate_credential_source(self) -> "RelayConfig":
        """Require exactly one credential source."""
        if bool(self.credential_secret_id) == bool(self.credential_object_uri):
            raise ValueError("Exactly one of credential_secret_id or credential_object_uri must be set")
        if self.credential_object_uri and not self.credential_object_uri.startswith(OBJECT_URI_SCHEME):
            raise ValueError(f"credential_object_uri must start with {OBJECT_URI_SCHEME}")
        return self

    @property
    def uses_fixed_keys(self) -> bool:
        """Whether uploads overwrite a deterministic key."""
        return self.destination_key_strategy == KEY_STRATEGY_FIXED

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "RelayConfig":
        """
        Build a validated configuration from field values.

        Empty strings are treated as absent.

        Raises:
            ConfigurationError: If required values are missing or invalid
        """
        cleaned = {k: v for k, v in values.items() if v is not None and v != ""}
        try:
            return cls(**cleaned)
        except ValidationError as e:
            problems = "; ".join(_describe_error(err) for err in e.errors())
            raise ConfigurationError(f"Invalid relay configuration: {problems}") from e

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, overrides: Optional[Mapping[str, Any]] = None
    ) -> "RelayConfig":
        """
        Build a validated configuration from environment variables.

        Args:
            environ: Environment mapping (defaults to os.environ)
            overrides: Field values that take precedence over the environment

        Returns:
            Validated RelayConfig

        Raises:
            ConfigurationError: If required values are missing or invalid
        """
        env = os.environ if environ is None else environ
        values: Dict[str, Any] = {field: env.get(var) for field, var in ENV_VARS.items()}
        if overrides:
            values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.from_mapping(values)


def _describe_error(error: Mapping[str, Any]) -> str:
    field = ".".join(str(part) for part in error["loc"])
    if not field:
        return str(error["msg"])
    if field in ENV_VARS:
        field = f"{field} ({ENV_VARS[field]})"
    return f"{field}: {error['msg']}"


__all__ = ["RelayConfig", "ENV_VARS"]
