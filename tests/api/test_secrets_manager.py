"""Tests for the Secrets Manager adapter."""

from unittest.mock import Mock, patch

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from artifact_relay.api import SecretsManagerStore
from artifact_relay.exceptions import SecretUnavailable

SECRET_ID = "arn:aws:secretsmanager:us-east-1:123456789012:secret:mailgun-key"


def client_error(code):
    """Build a botocore ClientError with the given error code."""
    return ClientError({"Error": {"Code": code, "Message": code}}, "GetSecretValue")


class TestSecretsManagerStore:
    """Test SecretsManagerStore."""

    def test_default_client(self):
        """A secretsmanager client is built for the region."""
        with patch("artifact_relay.api.secrets_manager.boto3.client") as mock_client:
            SecretsManagerStore(region_name="eu-west-1")
        mock_client.assert_called_once_with("secretsmanager", region_name="eu-west-1")

    def test_secret_string(self):
        """String secrets are returned as-is."""
        client = Mock()
        client.get_secret_value.return_value = {"SecretString": "key-example"}

        assert SecretsManagerStore(client=client).get(SECRET_ID) == "key-example"
        client.get_secret_value.assert_called_once_with(SecretId=SECRET_ID)

    def test_secret_binary(self):
        """Binary secrets are decoded as UTF-8."""
        client = Mock()
        client.get_secret_value.return_value = {"SecretBinary": b'{"aws_access_key_id": "AKID"}'}

        assert SecretsManagerStore(client=client).get(SECRET_ID) == '{"aws_access_key_id": "AKID"}'

    def test_no_value(self):
        """A secret without a value yields None."""
        client = Mock()
        client.get_secret_value.return_value = {"Name": "empty"}

        assert SecretsManagerStore(client=client).get(SECRET_ID) is None

    def test_undecodable_binary(self):
        """Binary secrets that are not UTF-8 are unavailable."""
        client = Mock()
        client.get_secret_value.return_value = {"SecretBinary": b"\xff\xfe"}

        with pytest.raises(SecretUnavailable, match="UTF-8"):
            SecretsManagerStore(client=client).get(SECRET_ID)

    @pytest.mark.parametrize("code", ["ResourceNotFoundException", "AccessDeniedException"])
    def test_client_error(self, code):
        """Service errors carry the error code."""
        client = Mock()
        client.get_secret_value.side_effect = client_error(code)

        with pytest.raises(SecretUnavailable) as exc_info:
            SecretsManagerStore(client=client).get(SECRET_ID)

        assert exc_info.value.secret_id == SECRET_ID
        assert exc_info.value.reason == code

    def test_connection_error(self):
        """SDK transport errors are unavailable secrets too."""
        client = Mock()
        client.get_secret_value.side_effect = EndpointConnectionError(endpoint_url="https://secretsmanager.test")

        with pytest.raises(SecretUnavailable, match="secretsmanager.test"):
            SecretsManagerStore(client=client).get(SECRET_ID)
