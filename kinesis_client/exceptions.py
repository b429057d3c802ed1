from typing import TYPE_CHECKING, Optional

from botocore.exceptions import ClientError

if TYPE_CHECKING:
    from kinesis_client.models import StreamDefinition, StreamDescription


class KinesisClientError(Exception):
    """Base class for all errors raised by the kinesis client."""

    pass


class KinesisOperationError(KinesisClientError):
    """
    A call to the Kinesis API failed. The original botocore error is available as ``cause`` (and as
    ``__cause__``, since it is raised with ``raise ... from``).
    """

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {cause}")

    @property
    def error_code(self) -> Optional[str]:
        if isinstance(self.cause, ClientError):
            return self.cause.response.get("Error", {}).get("Code")
        return None

    @property
    def status_code(self) -> Optional[int]:
        if isinstance(self.cause, ClientError):
            return self.cause.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
        return None


class RetriesExhaustedError(KinesisClientError):
    """The retry budget of a polling operation was used up without success."""

    def __init__(
        self,
        stream: "StreamDefinition",
        attempts: int,
        last_error: Optional[Exception] = None,
        message: Optional[str] = None,
    ):
        self.stream = stream
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(
            message
            or f"Unable to describe stream {stream.name} after {attempts} attempts: {last_error}"
        )


class StreamNotActiveError(RetriesExhaustedError):
    """The stream did not reach the ACTIVE status within the retry budget."""

    def __init__(
        self,
        stream: "StreamDefinition",
        attempts: int,
        last_description: Optional["StreamDescription"] = None,
        last_error: Optional[Exception] = None,
    ):
        self.last_description = last_description
        status = last_description.status.value if last_description else "unknown"
        super().__init__(
            stream,
            attempts,
            last_error,
            message=f"Stream {stream.name} did not become ACTIVE after {attempts} attempts "
            f"(last status: {status})",
        )
