"""
Request model of the kinesis client. Every Kinesis operation the client supports is described by one
immutable value, which is passed to ``Client.execute``. For example::

    stream = StreamDefinition("my-stream")
    await client.execute(CreateStream(stream, shard_count=2))
    description = await client.execute(WaitStreamActive(stream, retries=30, delay=2))

Field constraints are validated when the request is created and raise ``pydantic.ValidationError``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator
from pydantic.dataclasses import dataclass

from kinesis_client import config
from kinesis_client.constants import MAX_GET_RECORDS_LIMIT
from kinesis_client.models import Shard, ShardIterator, ShardIteratorType, StreamDefinition


def _default_retries() -> int:
    return config.KINESIS_DESCRIBE_RETRIES


def _default_delay() -> float:
    return config.KINESIS_DESCRIBE_DELAY


@dataclass(frozen=True)
class CreateStream:
    stream: StreamDefinition
    shard_count: int = Field(1, title="Number of shards of the new stream", ge=1)


@dataclass(frozen=True)
class DeleteStream:
    stream: StreamDefinition


@dataclass(frozen=True)
class TryDescribeStream:
    stream: StreamDefinition


@dataclass(frozen=True)
class DescribeStream:
    stream: StreamDefinition
    retries: int = Field(default_factory=_default_retries, title="Max describe attempts", ge=1)
    delay: float = Field(default_factory=_default_delay, title="Seconds between attempts", ge=0)


@dataclass(frozen=True)
class WaitStreamActive:
    stream: StreamDefinition
    retries: int = Field(default_factory=_default_retries, title="Max describe attempts", ge=1)
    delay: float = Field(default_factory=_default_delay, title="Seconds between attempts", ge=0)


@dataclass(frozen=True)
class ListStreams:
    pass


@dataclass(frozen=True)
class PutRecord:
    stream: StreamDefinition
    data: bytes
    partition_key: str = Field(..., min_length=1, max_length=256)
    # records are only accepted if their sequence number is greater than this one
    min_sequence_number: Optional[str] = None


@dataclass(frozen=True)
class ListStreamShards:
    stream: StreamDefinition


@dataclass(frozen=True)
class GetShardIterator:
    shard: Shard
    iterator_type: ShardIteratorType = ShardIteratorType.TRIM_HORIZON
    starting_sequence_number: Optional[str] = None
    timestamp: Optional[datetime] = None

    @model_validator(mode="after")
    def _check_starting_position(self):
        if self.iterator_type in (
            ShardIteratorType.AT_SEQUENCE_NUMBER,
            ShardIteratorType.AFTER_SEQUENCE_NUMBER,
        ):
            if not self.starting_sequence_number:
                raise ValueError(
                    f"iterator type {self.iterator_type.value} requires a starting_sequence_number"
                )
        if self.iterator_type == ShardIteratorType.AT_TIMESTAMP and self.timestamp is None:
            raise ValueError("iterator type AT_TIMESTAMP requires a timestamp")
        return self


@dataclass(frozen=True)
class GetNextRecords:
    iterator: ShardIterator
    limit: int = Field(MAX_GET_RECORDS_LIMIT, ge=1, le=MAX_GET_RECORDS_LIMIT)


ALL_OPERATIONS = (
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
)
