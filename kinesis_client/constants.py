from kinesis_client.version import __version__

VERSION = __version__

# name of the AWS service the transport talks to
KINESIS_SERVICE_NAME = "kinesis"

# AWS region used if neither the environment nor the boto session define one
AWS_REGION_US_EAST_1 = "us-east-1"

# page size for ListStreams calls
LIST_STREAMS_PAGE_SIZE = 10

# maximum number of records a single GetRecords call may return
MAX_GET_RECORDS_LIMIT = 10000

# error returned by CreateStream if the stream already exists
RESOURCE_IN_USE_ERROR_CODE = "ResourceInUseException"
# status code under which an existing stream is not treated as a failure
RESOURCE_IN_USE_BENIGN_STATUS_CODE = 400

# defaults for the DescribeStream / WaitStreamActive retry loop
DEFAULT_DESCRIBE_RETRIES = 10
DEFAULT_DESCRIBE_DELAY = 1.0

# botocore client defaults
DEFAULT_MAX_POOL_CONNECTIONS = 50
DEFAULT_BOTO_MAX_ATTEMPTS = 3
DEFAULT_BOTO_RETRY_MODE = "standard"

TRUE_STRINGS = ("1", "true", "True")
FALSE_STRINGS = ("0", "false", "False")

LOG_LEVELS = ("trace", "debug", "info", "warn", "error", "warning")

# the name of the package logger
LOGGER_NAME = "kinesis_client"

# user agent suffix appended to botocore requests
USER_AGENT_EXTRA = f"kinesis-client/{VERSION}"
