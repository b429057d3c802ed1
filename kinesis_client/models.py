"""
Domain values returned by the kinesis client. All values are immutable snapshots, a new call
produces new values.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple


class StreamStatus(str, Enum):
    CREATING = "CREATING"
    DELETING = "DELETING"
    ACTIVE = "ACTIVE"
    UPDATING = "UPDATING"


class ShardIteratorType(str, Enum):
    AT_SEQUENCE_NUMBER = "AT_SEQUENCE_NUMBER"
    AFTER_SEQUENCE_NUMBER = "AFTER_SEQUENCE_NUMBER"
    TRIM_HORIZON = "TRIM_HORIZON"
    LATEST = "LATEST"
    AT_TIMESTAMP = "AT_TIMESTAMP"


@dataclass(frozen=True)
class StreamDefinition:
    name: str


@dataclass(frozen=True)
class HashKeyRange:
    starting_hash_key: str
    ending_hash_key: str


@dataclass(frozen=True)
class SequenceNumberRange:
    starting_sequence_number: str
    ending_sequence_number: Optional[str] = None


@dataclass(frozen=True)
class Shard:
    stream: StreamDefinition
    shard_id: str
    parent_shard_id: Optional[str] = None
    adjacent_parent_shard_id: Optional[str] = None
    hash_key_range: Optional[HashKeyRange] = None
    sequence_number_range: Optional[SequenceNumberRange] = None

    @property
    def is_closed(self) -> bool:
        """A shard is closed (e.g. after a split or merge) once its range has an ending number."""
        return bool(
            self.sequence_number_range and self.sequence_number_range.ending_sequence_number
        )

    @classmethod
    def from_response(cls, stream: StreamDefinition, shard: dict) -> "Shard":
        hash_key_range = None
        if key_range := shard.get("HashKeyRange"):
            hash_key_range = HashKeyRange(
                starting_hash_key=key_range["StartingHashKey"],
                ending_hash_key=key_range["EndingHashKey"],
            )
        sequence_number_range = None
        if seq_range := shard.get("SequenceNumberRange"):
            sequence_number_range = SequenceNumberRange(
                starting_sequence_number=seq_range["StartingSequenceNumber"],
                ending_sequence_number=seq_range.get("EndingSequenceNumber"),
            )
        return cls(
            stream=stream,
            shard_id=shard["ShardId"],
            parent_shard_id=shard.get("ParentShardId"),
            adjacent_parent_shard_id=shard.get("AdjacentParentShardId"),
            hash_key_range=hash_key_range,
            sequence_number_range=sequence_number_range,
        )


@dataclass(frozen=True)
class StreamDescription:
    stream: StreamDefinition
    status: StreamStatus
    shards: Tuple[Shard, ...] = ()
    arn: Optional[str] = None
    retention_period_hours: Optional[int] = None
    creation_timestamp: Optional[datetime] = None
    encryption_type: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.status == StreamStatus.ACTIVE

    @classmethod
    def from_response(
        cls, stream: StreamDefinition, description: dict, shards: Tuple[Shard, ...]
    ) -> "StreamDescription":
        """
        Build a description from the ``StreamDescription`` member of a DescribeStream response.
        The shards are passed separately, since they may span several response pages.
        """
        return cls(
            stream=stream,
            status=StreamStatus(description["StreamStatus"]),
            shards=tuple(shards),
            arn=description.get("StreamARN"),
            retention_period_hours=description.get("RetentionPeriodHours"),
            creation_timestamp=description.get("StreamCreationTimestamp"),
            encryption_type=description.get("EncryptionType"),
        )


@dataclass(frozen=True)
class ShardIterator:
    name: str
    shard: Shard


@dataclass(frozen=True)
class Record:
    sequence_number: str
    data: bytes
    partition_key: str
    approximate_arrival_timestamp: Optional[datetime] = None
    encryption_type: Optional[str] = None

    @classmethod
    def from_response(cls, record: dict) -> "Record":
        return cls(
            sequence_number=record["SequenceNumber"],
            data=record["Data"],
            partition_key=record["PartitionKey"],
            approximate_arrival_timestamp=record.get("ApproximateArrivalTimestamp"),
            encryption_type=record.get("EncryptionType"),
        )


@dataclass(frozen=True)
class NextRecords:
    iterator: ShardIterator
    records: Tuple[Record, ...] = field(default_factory=tuple)
    next_iterator: Optional[ShardIterator] = None
    millis_behind_latest: Optional[int] = None

    @property
    def is_shard_closed(self) -> bool:
        """No successor iterator means the shard is closed and will never receive more data."""
        return self.next_iterator is None

    @classmethod
    def from_response(cls, iterator: ShardIterator, response: dict) -> "NextRecords":
        next_iterator = None
        if next_name := response.get("NextShardIterator"):
            next_iterator = ShardIterator(name=next_name, shard=iterator.shard)
        return cls(
            iterator=iterator,
            records=tuple(Record.from_response(record) for record in response["Records"]),
            next_iterator=next_iterator,
            millis_behind_latest=response.get("MillisBehindLatest"),
        )


@dataclass(frozen=True)
class PutResult:
    stream: StreamDefinition
    shard_id: str
    sequence_number: str
    encryption_type: Optional[str] = None

    @classmethod
    def from_response(cls, stream: StreamDefinition, response: dict) -> "PutResult":
        return cls(
            stream=stream,
            shard_id=response["ShardId"],
            sequence_number=response["SequenceNumber"],
            encryption_type=response.get("EncryptionType"),
        )
