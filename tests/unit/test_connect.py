from boto3.session import Session
from botocore.config import Config

from kinesis_client import config
from kinesis_client.connect import (
    create_kinesis_client,
    default_client_config,
    session_with_credentials_provider,
)
from kinesis_client.constants import USER_AGENT_EXTRA
from tests.unit.testutil import StaticCredentialProvider


class TestConnect:
    def test_default_client_config(self, monkeypatch):
        monkeypatch.setattr(config, "KINESIS_MAX_POOL_CONNECTIONS", 20)
        monkeypatch.setattr(config, "KINESIS_BOTO_MAX_ATTEMPTS", 5)
        monkeypatch.setattr(config, "KINESIS_BOTO_RETRY_MODE", "adaptive")

        client_config = default_client_config()

        assert client_config.max_pool_connections == 20
        assert client_config.retries == {"max_attempts": 5, "mode": "adaptive"}
        assert client_config.user_agent_extra == USER_AGENT_EXTRA

    def test_disable_boto_retries(self, monkeypatch):
        monkeypatch.setattr(config, "DISABLE_BOTO_RETRIES", True)

        assert default_client_config().retries == {"max_attempts": 0}

    def test_endpoint_and_region_from_config(self, monkeypatch):
        monkeypatch.setattr(config, "KINESIS_ENDPOINT_URL", "http://localhost:4566")
        monkeypatch.delenv("AWS_DEFAULT_REGION")
        monkeypatch.setenv("AWS_CONFIG_FILE", "/dev/null")
        monkeypatch.setattr(config, "AWS_DEFAULT_REGION", "eu-central-1")

        kinesis = create_kinesis_client(session=Session())

        assert kinesis.meta.endpoint_url == "http://localhost:4566"
        assert kinesis.meta.region_name == "eu-central-1"

    def test_caller_config_is_merged(self):
        kinesis = create_kinesis_client(config=Config(connect_timeout=3))

        assert kinesis.meta.config.connect_timeout == 3
        assert kinesis.meta.config.max_pool_connections == config.KINESIS_MAX_POOL_CONNECTIONS

    def test_session_with_credentials_provider(self):
        provider = StaticCredentialProvider("AKIDSESSION", "session-secret")

        session = session_with_credentials_provider(provider)
        credentials = session.get_credentials()

        assert credentials.access_key == "AKIDSESSION"
        assert credentials.secret_key == "session-secret"
