import dataclasses
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from kinesis_client import config
from kinesis_client.models import Shard, ShardIterator, ShardIteratorType, StreamDefinition
from kinesis_client.operations import (
    ALL_OPERATIONS,
    CreateStream,
    DescribeStream,
    GetNextRecords,
    GetShardIterator,
    ListStreams,
    PutRecord,
    WaitStreamActive,
)

STREAM = StreamDefinition("test-stream")
SHARD = Shard(stream=STREAM, shard_id="shardId-000000000000")


class TestOperations:
    def test_requests_are_values(self):
        assert CreateStream(STREAM, shard_count=2) == CreateStream(STREAM, shard_count=2)
        assert CreateStream(STREAM, shard_count=2) != CreateStream(STREAM, shard_count=3)
        assert ListStreams() == ListStreams()

    def test_requests_are_immutable(self):
        request = CreateStream(STREAM)
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.shard_count = 5

    def test_create_stream_requires_a_shard(self):
        with pytest.raises(ValidationError):
            CreateStream(STREAM, shard_count=0)

    @pytest.mark.parametrize("request_type", [DescribeStream, WaitStreamActive])
    def test_retry_budget_defaults_from_config(self, request_type, monkeypatch):
        monkeypatch.setattr(config, "KINESIS_DESCRIBE_RETRIES", 7)
        monkeypatch.setattr(config, "KINESIS_DESCRIBE_DELAY", 0.25)

        request = request_type(STREAM)

        assert request.retries == 7
        assert request.delay == 0.25

    @pytest.mark.parametrize("request_type", [DescribeStream, WaitStreamActive])
    def test_invalid_retry_budget(self, request_type):
        with pytest.raises(ValidationError):
            request_type(STREAM, retries=0)
        with pytest.raises(ValidationError):
            request_type(STREAM, retries=3, delay=-1)

    def test_put_record_partition_key(self):
        with pytest.raises(ValidationError):
            PutRecord(STREAM, b"data", partition_key="")
        with pytest.raises(ValidationError):
            PutRecord(STREAM, b"data", partition_key="k" * 257)

        request = PutRecord(STREAM, b"data", partition_key="key")
        assert request.min_sequence_number is None

    def test_shard_iterator_starting_position(self):
        with pytest.raises(ValidationError):
            GetShardIterator(SHARD, ShardIteratorType.AT_SEQUENCE_NUMBER)
        with pytest.raises(ValidationError):
            GetShardIterator(SHARD, ShardIteratorType.AFTER_SEQUENCE_NUMBER)
        with pytest.raises(ValidationError):
            GetShardIterator(SHARD, ShardIteratorType.AT_TIMESTAMP)

        GetShardIterator(SHARD, ShardIteratorType.AT_SEQUENCE_NUMBER, starting_sequence_number="1")
        GetShardIterator(
            SHARD, ShardIteratorType.AT_TIMESTAMP, timestamp=datetime.now(tz=timezone.utc)
        )
        assert GetShardIterator(SHARD).iterator_type == ShardIteratorType.TRIM_HORIZON

    def test_next_records_limit(self):
        iterator = ShardIterator(name="iterator-1", shard=SHARD)

        assert GetNextRecords(iterator).limit == 10000
        with pytest.raises(ValidationError):
            GetNextRecords(iterator, limit=0)
        with pytest.raises(ValidationError):
            GetNextRecords(iterator, limit=10001)

    def test_all_operations(self):
        assert len(ALL_OPERATIONS) == 10
        assert len(set(ALL_OPERATIONS)) == 10
