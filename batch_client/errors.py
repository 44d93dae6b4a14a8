"""
Normalized error hierarchy for the batch-processing job client.

Every failure surfaced by JobStatusClient is a JobStatusClientError carrying a
human-readable ``message``. Subclasses keep the failure origin so callers that
care can tell them apart:

- ServerError: the service answered with a non-2xx status
- NetworkError: the request went out but no response came back
- LocalError: the request could not be built or issued
"""

from typing import Any, Optional

from config.constants import (
    ERROR_MESSAGES,
    SERVER_ERROR_TEMPLATE,
    ErrorCode,
)


class JobStatusClientError(Exception):
    """Base exception for all job status client errors."""

    default_error_code = "CLIENT_ERROR"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        original_error: Optional[BaseException] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.original_error = original_error

    def __str__(self) -> str:
        return self.message


class ServerError(JobStatusClientError):
    """The service responded with an error status code."""

    default_error_code = ErrorCode.SERVER_ERROR.value

    def __init__(
        self,
        message: str,
        status_code: int,
        body: Any = None,
        original_error: Optional[BaseException] = None
    ):
        super().__init__(message, original_error=original_error)
        self.status_code = status_code
        self.body = body

    @classmethod
    def from_response(cls, status_code: int, body: Any) -> "ServerError":
        """
        Build from a decoded error response.

        Uses the body's ``message`` field when present and non-empty,
        otherwise "Server error (<status>)".
        """
        message = None
        if isinstance(body, dict):
            message = body.get("message")
        if not message:
            message = SERVER_ERROR_TEMPLATE.format(status_code=status_code)
        return cls(str(message), status_code=status_code, body=body)


class NetworkError(JobStatusClientError):
    """
    No response was received.

    Covers connection refused, DNS failures, dropped connections and timeouts.
    The message is fixed so it never looks like a server-provided one.
    """

    default_error_code = ErrorCode.NETWORK_ERROR.value

    def __init__(self, original_error: Optional[BaseException] = None):
        super().__init__(
            ERROR_MESSAGES[ErrorCode.NETWORK_ERROR],
            original_error=original_error
        )


class LocalError(JobStatusClientError):
    """The request could not be constructed or issued."""

    default_error_code = ErrorCode.LOCAL_ERROR.value

    @classmethod
    def from_exception(cls, exception: BaseException) -> "LocalError":
        """Wrap an exception, falling back to a generic message when it has none."""
        message = str(exception) or ERROR_MESSAGES[ErrorCode.LOCAL_ERROR]
        return cls(message, original_error=exception)
