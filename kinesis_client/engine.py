"""
Execution engine of the kinesis client.

Every request type of ``kinesis_client.operations`` is mapped to a handler, which performs the
blocking boto3 calls on an executor and converts responses and errors to the values of
``kinesis_client.models``. Two kinds of requests do more than a single call:

* ``DescribeStream`` and ``WaitStreamActive`` poll the stream within a fixed retry budget, suspending
  (``asyncio.sleep``) between attempts.
* ``ListStreams`` and ``ListStreamShards`` (as well as every describe) follow exclusive-start cursors
  until the service reports that no more data is available. Pages are requested strictly one after
  the other, since the cursor of a page is the last element of the previous one.

The engine keeps no state besides the transport and the executor, so a single instance can be shared
by any number of concurrent calls.
"""

import asyncio
import logging
from concurrent.futures import Executor
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple, Type, Union

from botocore.client import BaseClient
from botocore.exceptions import BotoCoreError, ClientError

from kinesis_client.constants import (
    LIST_STREAMS_PAGE_SIZE,
    RESOURCE_IN_USE_BENIGN_STATUS_CODE,
    RESOURCE_IN_USE_ERROR_CODE,
)
from kinesis_client.exceptions import (
    KinesisOperationError,
    RetriesExhaustedError,
    StreamNotActiveError,
)
from kinesis_client.models import (
    NextRecords,
    PutResult,
    Shard,
    ShardIterator,
    StreamDefinition,
    StreamDescription,
)
from kinesis_client.operations import (
    CreateStream,
    DeleteStream,
    DescribeStream,
    GetNextRecords,
    GetShardIterator,
    ListStreams,
    ListStreamShards,
    PutRecord,
    TryDescribeStream,
    WaitStreamActive,
)
from kinesis_client.utils.asyncio import run_sync

LOG = logging.getLogger(__name__)

Operation = Union[
    CreateStream,
    DeleteStream,
    TryDescribeStream,
    DescribeStream,
    WaitStreamActive,
    ListStreams,
    PutRecord,
    ListStreamShards,
    GetShardIterator,
    GetNextRecords,
]

Handler = Callable[[Any], Awaitable[Any]]


def is_benign_resource_in_use(error: ClientError) -> bool:
    """Whether the error reports an already existing stream, which CreateStream treats as success."""
    return (
        error.response.get("Error", {}).get("Code") == RESOURCE_IN_USE_ERROR_CODE
        and error.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
        == RESOURCE_IN_USE_BENIGN_STATUS_CODE
    )


class ExecutionEngine:
    kinesis: BaseClient
    executor: Optional[Executor]

    def __init__(self, kinesis: BaseClient, executor: Optional[Executor] = None):
        """
        :param kinesis: the boto3 Kinesis client, which must be safe for concurrent use
        :param executor: the executor running the blocking boto3 calls. If None, the default executor
            of the running event loop is used.
        """
        self.kinesis = kinesis
        self.executor = executor
        self._handlers: Dict[Type, Handler] = {
            CreateStream: self.create_stream,
            DeleteStream: self.delete_stream,
            TryDescribeStream: self.try_describe_stream,
            DescribeStream: self.describe_stream,
            WaitStreamActive: self.wait_stream_active,
            ListStreams: self.list_streams,
            PutRecord: self.put_record,
            ListStreamShards: self.list_stream_shards,
            GetShardIterator: self.get_shard_iterator,
            GetNextRecords: self.get_next_records,
        }

    async def execute(self, request: Operation) -> Any:
        handler = self._handlers.get(type(request))
        if handler is None:
            raise TypeError(f"Unsupported request type: {type(request).__name__}")
        return await handler(request)

    async def create_stream(self, request: CreateStream) -> StreamDefinition:
        try:
            await self._invoke(
                "create_stream", StreamName=request.stream.name, ShardCount=request.shard_count
            )
        except ClientError as e:
            if is_benign_resource_in_use(e):
                LOG.debug("Stream %s already exists, not creating it", request.stream.name)
                return request.stream
            raise KinesisOperationError("create_stream", e) from e
        except BotoCoreError as e:
            raise KinesisOperationError("create_stream", e) from e
        return request.stream

    async def delete_stream(self, request: DeleteStream) -> None:
        await self._call("delete_stream", StreamName=request.stream.name)

    async def try_describe_stream(self, request: TryDescribeStream) -> StreamDescription:
        return await self._describe(request.stream)

    async def describe_stream(self, request: DescribeStream) -> StreamDescription:
        return await self._describe_with_retries(request.stream, request.retries, request.delay)

    async def wait_stream_active(self, request: WaitStreamActive) -> StreamDescription:
        return await self._describe_with_retries(
            request.stream, request.retries, request.delay, until_active=True
        )

    async def list_streams(self, request: ListStreams) -> List[str]:
        kwargs = {"Limit": LIST_STREAMS_PAGE_SIZE}
        names: List[str] = []
        while True:
            response = await self._call("list_streams", **kwargs)
            page = response.get("StreamNames", [])
            names.extend(page)
            if not response.get("HasMoreStreams") or not page:
                return names
            LOG.debug("Fetched %s stream names, requesting next page", len(names))
            kwargs["ExclusiveStartStreamName"] = names[-1]

    async def put_record(self, request: PutRecord) -> PutResult:
        kwargs = {
            "StreamName": request.stream.name,
            "Data": request.data,
            "PartitionKey": request.partition_key,
        }
        if request.min_sequence_number is not None:
            kwargs["SequenceNumberForOrdering"] = request.min_sequence_number
        response = await self._call("put_record", **kwargs)
        return PutResult.from_response(request.stream, response)

    async def list_stream_shards(self, request: ListStreamShards) -> List[Shard]:
        _, shards = await self._describe_pages(request.stream)
        return shards

    async def get_shard_iterator(self, request: GetShardIterator) -> ShardIterator:
        shard = request.shard
        kwargs = {
            "StreamName": shard.stream.name,
            "ShardId": shard.shard_id,
            "ShardIteratorType": request.iterator_type.value,
        }
        if request.starting_sequence_number is not None:
            kwargs["StartingSequenceNumber"] = request.starting_sequence_number
        if request.timestamp is not None:
            kwargs["Timestamp"] = request.timestamp
        response = await self._call("get_shard_iterator", **kwargs)
        return ShardIterator(name=response["ShardIterator"], shard=shard)

    async def get_next_records(self, request: GetNextRecords) -> NextRecords:
        response = await self._call(
            "get_records", ShardIterator=request.iterator.name, Limit=request.limit
        )
        return NextRecords.from_response(request.iterator, response)

    async def _describe(self, stream: StreamDefinition) -> StreamDescription:
        description, shards = await self._describe_pages(stream)
        return StreamDescription.from_response(stream, description, tuple(shards))

    async def _describe_pages(self, stream: StreamDefinition) -> Tuple[dict, List[Shard]]:
        """
        Describes the stream, following ``HasMoreShards`` until all shards have been fetched.

        :return: the ``StreamDescription`` member of the last response page, and all shards
        """
        kwargs = {"StreamName": stream.name}
        shards: List[Shard] = []
        while True:
            response = await self._call("describe_stream", **kwargs)
            description = response["StreamDescription"]
            page = [Shard.from_response(stream, shard) for shard in description.get("Shards", [])]
            shards.extend(page)
            if not description.get("HasMoreShards") or not page:
                return description, shards
            kwargs["ExclusiveStartShardId"] = shards[-1].shard_id

    async def _describe_with_retries(
        self, stream: StreamDefinition, retries: int, delay: float, until_active: bool = False
    ) -> StreamDescription:
        """
        Describes the stream up to ``retries`` times, sleeping ``delay`` seconds between attempts.
        An attempt fails if the describe call fails, or (if ``until_active`` is set) if the stream is
        not ACTIVE yet. Both kinds of failures use up the same budget.
        """
        last_error: Optional[KinesisOperationError] = None
        last_description: Optional[StreamDescription] = None

        for attempt in range(1, retries + 1):
            if attempt > 1:
                await asyncio.sleep(delay)
            try:
                description = await self._describe(stream)
            except KinesisOperationError as e:
                last_error = e
                LOG.debug(
                    "Describing stream %s failed (attempt %s/%s): %s",
                    stream.name,
                    attempt,
                    retries,
                    e,
                )
                continue

            last_error = None
            if not until_active or description.is_active:
                return description

            last_description = description
            LOG.debug(
                "Stream %s is %s, not ACTIVE yet (attempt %s/%s)",
                stream.name,
                description.status.value,
                attempt,
                retries,
            )

        if until_active:
            raise StreamNotActiveError(
                stream, retries, last_description, last_error
            ) from last_error
        raise RetriesExhaustedError(stream, retries, last_error) from last_error

    async def _invoke(self, operation: str, **kwargs) -> dict:
        method = getattr(self.kinesis, operation)
        return await run_sync(method, thread_pool=self.executor, **kwargs)

    async def _call(self, operation: str, **kwargs) -> dict:
        try:
            return await self._invoke(operation, **kwargs)
        except (ClientError, BotoCoreError) as e:
            raise KinesisOperationError(operation, e) from e
