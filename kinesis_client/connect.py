"""
Construction of the boto3 Kinesis client used as transport by the kinesis client.
"""

import logging
import threading
from typing import Optional

import botocore.session
from boto3.session import Session
from botocore.client import BaseClient
from botocore.config import Config
from botocore.credentials import CredentialProvider, CredentialResolver

from kinesis_client import config as kinesis_config
from kinesis_client.constants import KINESIS_SERVICE_NAME, USER_AGENT_EXTRA

LOG = logging.getLogger(__name__)

# boto sessions are not thread safe, client creation happens behind this lock
_create_client_lock = threading.RLock()


def default_client_config() -> Config:
    """
    Returns the botocore config used as default for new clients. Transport level retries (throttling,
    connection errors) are entirely handled by botocore, based on this config.
    """
    if kinesis_config.DISABLE_BOTO_RETRIES:
        retries = {"max_attempts": 0}
    else:
        retries = {
            "max_attempts": kinesis_config.KINESIS_BOTO_MAX_ATTEMPTS,
            "mode": kinesis_config.KINESIS_BOTO_RETRY_MODE,
        }
    return Config(
        max_pool_connections=kinesis_config.KINESIS_MAX_POOL_CONNECTIONS,
        retries=retries,
        user_agent_extra=USER_AGENT_EXTRA,
    )


def session_with_credentials_provider(provider: CredentialProvider) -> Session:
    """
    Create a boto3 session whose credentials are resolved through the given provider only, instead of
    the default botocore provider chain (environment, profiles, instance metadata, ...).

    :param provider: a botocore ``CredentialProvider``, e.g. an ``AssumeRoleProvider``
    :return: a new boto3 session
    """
    botocore_session = botocore.session.get_session()
    botocore_session.register_component("credential_provider", CredentialResolver([provider]))
    return Session(botocore_session=botocore_session)


def create_kinesis_client(
    session: Optional[Session] = None,
    region_name: Optional[str] = None,
    endpoint_url: Optional[str] = None,
    aws_access_key_id: Optional[str] = None,
    aws_secret_access_key: Optional[str] = None,
    aws_session_token: Optional[str] = None,
    config: Optional[Config] = None,
) -> BaseClient:
    """
    Returns a boto3 Kinesis client.

    :param session: Session to be used for client creation. Will create a new session if not provided.
    :param region_name: Name of the AWS region to be associated with the client.
        If set to None, loads from the session, falling back to AWS_DEFAULT_REGION.
    :param endpoint_url: Full endpoint URL to be used by the client.
        Defaults to KINESIS_ENDPOINT_URL, or the regular AWS endpoint if that is not set.
    :param aws_access_key_id: Access key to use for the client.
        If set to None, loads from the session.
    :param aws_secret_access_key: Secret key to use for the client.
        If set to None, loads from the session.
    :param aws_session_token: Session token to use for the client.
        Not being used if not set.
    :param config: Boto config for advanced use, merged on top of the default config.
    :return: Boto3 Kinesis client
    """
    default_config = default_client_config()
    client_config = default_config.merge(config) if config else default_config

    with _create_client_lock:
        session = session or Session()
        region_name = region_name or session.region_name or kinesis_config.AWS_DEFAULT_REGION
        endpoint_url = endpoint_url or kinesis_config.KINESIS_ENDPOINT_URL
        LOG.debug(
            "Creating Kinesis client for region %s (endpoint: %s)",
            region_name,
            endpoint_url or "default",
        )
        return session.client(
            service_name=KINESIS_SERVICE_NAME,
            region_name=region_name,
            endpoint_url=endpoint_url,
            aws_access_key_id=aws_access_key_id,
            aws_secret_access_key=aws_secret_access_key,
            aws_session_token=aws_session_token,
            config=client_config,
        )
