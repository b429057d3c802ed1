import logging
import os
from typing import Optional

from kinesis_client.constants import (
    AWS_REGION_US_EAST_1,
    DEFAULT_BOTO_MAX_ATTEMPTS,
    DEFAULT_BOTO_RETRY_MODE,
    DEFAULT_DESCRIBE_DELAY,
    DEFAULT_DESCRIBE_RETRIES,
    DEFAULT_MAX_POOL_CONNECTIONS,
    FALSE_STRINGS,
    LOG_LEVELS,
    TRUE_STRINGS,
)

LOG = logging.getLogger(__name__)


def is_env_true(env_var_name: str) -> bool:
    """Whether the given environment variable has a truthy value."""
    return os.environ.get(env_var_name, "").lower().strip() in TRUE_STRINGS


def is_env_not_false(env_var_name: str) -> bool:
    """Whether the given environment variable is empty or has a truthy value."""
    return os.environ.get(env_var_name, "").lower().strip() not in FALSE_STRINGS


def eval_log_type(env_var_name: str) -> Optional[str]:
    """Get the log type from environment variable"""
    ls_log = os.environ.get(env_var_name, "").lower().strip()
    return ls_log if ls_log in LOG_LEVELS else None


def parse_int_env(env_var_name: str, default: int) -> int:
    value = os.environ.get(env_var_name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        LOG.warning("Invalid integer value for %s: %r, using %s", env_var_name, value, default)
        return default


def parse_float_env(env_var_name: str, default: float) -> float:
    value = os.environ.get(env_var_name, "").strip()
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        LOG.warning("Invalid float value for %s: %r, using %s", env_var_name, value, default)
        return default


# log level, one of LOG_LEVELS
KINESIS_CLIENT_LOG = eval_log_type("KINESIS_CLIENT_LOG")
DEBUG = is_env_true("DEBUG") or KINESIS_CLIENT_LOG == "trace"

# custom endpoint for the Kinesis API, e.g. http://localhost:4566 for a local emulator
KINESIS_ENDPOINT_URL = os.environ.get("KINESIS_ENDPOINT_URL", "").strip() or None

# region used if the boto session does not define one
AWS_DEFAULT_REGION = os.environ.get("AWS_DEFAULT_REGION", "").strip() or AWS_REGION_US_EAST_1

# default retry budget and delay (in seconds) of DescribeStream and WaitStreamActive
KINESIS_DESCRIBE_RETRIES = parse_int_env("KINESIS_DESCRIBE_RETRIES", DEFAULT_DESCRIBE_RETRIES)
KINESIS_DESCRIBE_DELAY = parse_float_env("KINESIS_DESCRIBE_DELAY", DEFAULT_DESCRIBE_DELAY)

# size of the botocore connection pool, should match the number of executor workers
KINESIS_MAX_POOL_CONNECTIONS = parse_int_env(
    "KINESIS_MAX_POOL_CONNECTIONS", DEFAULT_MAX_POOL_CONNECTIONS
)

# transport level retries, handled by botocore
KINESIS_BOTO_MAX_ATTEMPTS = parse_int_env("KINESIS_BOTO_MAX_ATTEMPTS", DEFAULT_BOTO_MAX_ATTEMPTS)
KINESIS_BOTO_RETRY_MODE = (
    os.environ.get("KINESIS_BOTO_RETRY_MODE", "").strip() or DEFAULT_BOTO_RETRY_MODE
)
DISABLE_BOTO_RETRIES = is_env_true("DISABLE_BOTO_RETRIES")


def is_trace_logging_enabled() -> bool:
    return KINESIS_CLIENT_LOG == "trace"
