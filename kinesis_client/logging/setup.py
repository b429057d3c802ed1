import logging
import sys
import warnings

from kinesis_client import config
from kinesis_client.constants import LOGGER_NAME

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)5s --- [%(threadName)12.12s] %(name)-30.30s : %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# The log levels for third-party modules, which would otherwise flood the output on DEBUG
default_log_levels = {
    "asyncio": logging.INFO,
    "boto3": logging.INFO,
    "botocore": logging.ERROR,
    "s3transfer": logging.INFO,
    "urllib3": logging.WARNING,
}

trace_log_levels = {
    "botocore": logging.DEBUG,
    "urllib3": logging.DEBUG,
}


def get_log_level_from_config() -> int:
    # overriding the log level if KINESIS_CLIENT_LOG has been set
    if config.KINESIS_CLIENT_LOG:
        log_level = str(config.KINESIS_CLIENT_LOG).upper()
        if log_level == "TRACE":
            log_level = "DEBUG"
        if log_level == "WARN":
            log_level = "WARNING"
        return logging.getLevelName(log_level)

    return logging.DEBUG if config.DEBUG else logging.INFO


def setup_logging_from_config():
    log_level = get_log_level_from_config()
    setup_logging(log_level)

    if config.is_trace_logging_enabled():
        for name, level in trace_log_levels.items():
            logging.getLogger(name).setLevel(level)


def create_default_handler(log_level: int):
    log_handler = logging.StreamHandler(stream=sys.stderr)
    log_handler.setLevel(log_level)
    log_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return log_handler


def setup_logging(log_level=logging.INFO) -> None:
    """
    Configures the python logging environment for applications using the kinesis client.
    The library itself never calls this, it only emits records through its module loggers.

    :param log_level: the optional log level.
    """
    log_handler = create_default_handler(log_level)

    # replace any existing handlers
    logging.basicConfig(level=log_level, handlers=[log_handler], force=True)

    logging.captureWarnings(True)
    warnings.filterwarnings("ignore", module="botocore")

    # set log levels of loggers
    logging.root.setLevel(log_level)
    logging.getLogger(LOGGER_NAME).setLevel(log_level)
    for logger, level in default_log_levels.items():
        logging.getLogger(logger).setLevel(level)
