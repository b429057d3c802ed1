from datetime import datetime, timezone
from typing import List

from botocore.credentials import CredentialProvider, Credentials

from kinesis_client.testing.config import TEST_AWS_REGION_NAME

TEST_ACCOUNT_ID = "000000000000"
MAX_HASH_KEY = "340282366920938463463374607431768211455"


def shard_response(index: int, ending_sequence_number: str = None, parent: str = None) -> dict:
    sequence_number_range = {"StartingSequenceNumber": f"4959{index:052d}"}
    if ending_sequence_number:
        sequence_number_range["EndingSequenceNumber"] = ending_sequence_number
    shard = {
        "ShardId": f"shardId-{index:012d}",
        "HashKeyRange": {"StartingHashKey": "0", "EndingHashKey": MAX_HASH_KEY},
        "SequenceNumberRange": sequence_number_range,
    }
    if parent:
        shard["ParentShardId"] = parent
    return shard


def describe_stream_response(
    name: str, status: str = "ACTIVE", shards: List[dict] = None, has_more_shards: bool = False
) -> dict:
    return {
        "StreamDescription": {
            "StreamName": name,
            "StreamARN": f"arn:aws:kinesis:{TEST_AWS_REGION_NAME}:{TEST_ACCOUNT_ID}:stream/{name}",
            "StreamStatus": status,
            "Shards": shards if shards is not None else [shard_response(0)],
            "HasMoreShards": has_more_shards,
            "RetentionPeriodHours": 24,
            "StreamCreationTimestamp": datetime(2024, 1, 1, tzinfo=timezone.utc),
            "EnhancedMonitoring": [{"ShardLevelMetrics": ["ALL"]}],
        }
    }


class StaticCredentialProvider(CredentialProvider):
    METHOD = "static-test"
    CANONICAL_NAME = "StaticTest"

    def __init__(self, access_key: str, secret_key: str):
        super().__init__()
        self.access_key = access_key
        self.secret_key = secret_key
        self.loaded = 0

    def load(self):
        self.loaded += 1
        return Credentials(self.access_key, self.secret_key, method=self.METHOD)
