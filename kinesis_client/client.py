import asyncio
import concurrent.futures
from concurrent.futures import Executor
from typing import Any, Optional

from boto3.session import Session
from botocore.client import BaseClient
from botocore.config import Config
from botocore.credentials import CredentialProvider

from kinesis_client.connect import create_kinesis_client, session_with_credentials_provider
from kinesis_client.engine import ExecutionEngine, Operation
from kinesis_client.utils.asyncio import run_coroutine_threadsafe


class Client:
    """
    The Kinesis API client.

    Requests from ``kinesis_client.operations`` are executed with ``execute``, which returns a coroutine
    resolving to the result of the operation. Example::

        client = Client.from_session(boto3.Session(), executor=ThreadPoolExecutor(8))
        stream = StreamDefinition("my-stream")
        await client.execute(CreateStream(stream, shard_count=1))
        await client.execute(WaitStreamActive(stream))
        result = await client.execute(PutRecord(stream, b"hello", partition_key="key-1"))
    """

    def __init__(self, kinesis: BaseClient, executor: Optional[Executor] = None):
        self.engine = ExecutionEngine(kinesis, executor=executor)

    @property
    def kinesis(self) -> BaseClient:
        return self.engine.kinesis

    async def execute(self, request: Operation) -> Any:
        return await self.engine.execute(request)

    def submit(
        self, request: Operation, loop: asyncio.AbstractEventLoop
    ) -> concurrent.futures.Future:
        """
        Execute the request on the given (running) event loop, callable from any other thread.

        :return: a future, which can be waited on with ``result()`` or cancelled
        """
        return run_coroutine_threadsafe(self.execute(request), loop)

    @classmethod
    def from_client(cls, kinesis: BaseClient, executor: Optional[Executor] = None) -> "Client":
        """Creates a client from an existing boto3 Kinesis client."""
        return cls(kinesis, executor=executor)

    @classmethod
    def from_session(
        cls,
        session: Session,
        executor: Optional[Executor] = None,
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        config: Optional[Config] = None,
    ) -> "Client":
        """Creates a client from a boto3 session."""
        kinesis = create_kinesis_client(
            session=session, region_name=region_name, endpoint_url=endpoint_url, config=config
        )
        return cls(kinesis, executor=executor)

    @classmethod
    def from_credentials(
        cls,
        provider: CredentialProvider,
        executor: Optional[Executor] = None,
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        config: Optional[Config] = None,
    ) -> "Client":
        """Creates a client from a botocore credentials provider."""
        return cls.from_session(
            session_with_credentials_provider(provider),
            executor=executor,
            region_name=region_name,
            endpoint_url=endpoint_url,
            config=config,
        )

    @classmethod
    def from_keys(
        cls,
        access_key: str,
        secret_key: str,
        session_token: Optional[str] = None,
        executor: Optional[Executor] = None,
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        config: Optional[Config] = None,
    ) -> "Client":
        """Creates a client from an access key and a secret key."""
        kinesis = create_kinesis_client(
            region_name=region_name,
            endpoint_url=endpoint_url,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            aws_session_token=session_token,
            config=config,
        )
        return cls(kinesis, executor=executor)
