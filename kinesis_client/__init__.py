from kinesis_client.client import Client
from kinesis_client.engine import ExecutionEngine
from kinesis_client.exceptions import (
    KinesisClientError,
    KinesisOperationError,
    RetriesExhaustedError,
    StreamNotActiveError,
)
from kinesis_client.models import (
    NextRecords,
    PutResult,
    Record,
    Shard,
    ShardIterator,
    ShardIteratorType,
    StreamDefinition,
    StreamDescription,
    StreamStatus,
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
from kinesis_client.version import __version__

__all__ = [
    "Client",
    "CreateStream",
    "DeleteStream",
    "DescribeStream",
    "ExecutionEngine",
    "GetNextRecords",
    "GetShardIterator",
    "KinesisClientError",
    "KinesisOperationError",
    "ListStreamShards",
    "ListStreams",
    "NextRecords",
    "PutRecord",
    "PutResult",
    "Record",
    "RetriesExhaustedError",
    "Shard",
    "ShardIterator",
    "ShardIteratorType",
    "StreamDefinition",
    "StreamDescription",
    "StreamNotActiveError",
    "StreamStatus",
    "TryDescribeStream",
    "WaitStreamActive",
    "__version__",
]
