import asyncio
from concurrent.futures import ThreadPoolExecutor

import boto3
import pytest
from botocore.stub import Stubber

from kinesis_client.engine import ExecutionEngine
from kinesis_client.testing.config import (
    TEST_AWS_ACCESS_KEY_ID,
    TEST_AWS_REGION_NAME,
    TEST_AWS_SECRET_ACCESS_KEY,
)


@pytest.fixture(autouse=True)
def set_boto_test_credentials_and_region(monkeypatch):
    """
    Automatically sets the default credentials and region for all unit tests.
    """
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", TEST_AWS_ACCESS_KEY_ID)
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", TEST_AWS_SECRET_ACCESS_KEY)
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_AWS_REGION_NAME)


@pytest.fixture
def kinesis():
    return boto3.client("kinesis", region_name=TEST_AWS_REGION_NAME)


@pytest.fixture
def kinesis_stubber(kinesis):
    """Stubs the responses of the kinesis client, validating request parameters and response shapes"""
    with Stubber(kinesis) as stubber:
        yield stubber
        stubber.assert_no_pending_responses()


@pytest.fixture
def executor():
    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="kinesis-test") as pool:
        yield pool


@pytest.fixture
def engine(kinesis, executor):
    return ExecutionEngine(kinesis, executor=executor)


@pytest.fixture
def recorded_sleeps(monkeypatch):
    """Records the delays passed to asyncio.sleep, without actually sleeping"""
    sleeps = []
    original_sleep = asyncio.sleep

    async def _sleep(delay, *args, **kwargs):
        sleeps.append(delay)
        await original_sleep(0)

    monkeypatch.setattr(asyncio, "sleep", _sleep)
    return sleeps
