"""Exception hierarchy for the SDK utility generator.

Fatal kinds (workspace, remote call, empty response, file write) abort a run
and are wrapped once by the workflow into ``SdkFileCreationError``. The
integration kinds are raised by the integration skill and recovered by the
workflow, since the utility file already exists at that point.
"""

from typing import Any


class GeneratorError(Exception):
    """Base exception for all application-layer errors."""

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}


class NoWorkspaceOpenError(GeneratorError):
    """Raised when no usable workspace root is configured."""


class RemoteCallFailedError(GeneratorError):
    """Raised on transport or HTTP failures talking to the chat-completion endpoint."""

    def __init__(
        self,
        message: str = "",
        *,
        retryable: bool = False,
        status_code: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context=context)
        self.retryable = retryable
        self.status_code = status_code


class RemoteCallTimeoutError(RemoteCallFailedError):
    """The endpoint did not answer within the configured timeout."""


class NoContentInResponseError(GeneratorError):
    """The response parsed fine but carried no ``choices[0].message.content``."""


class FileWriteFailedError(GeneratorError):
    """Raised when the generated utility file cannot be persisted."""


class IntegrationRequestTimeoutError(GeneratorError):
    """The integration-instructions request timed out."""


class IntegrationRequestFailedError(GeneratorError):
    """The integration-instructions request failed for a reason other than a timeout."""


class SdkFileCreationError(GeneratorError):
    """Single error outcome of a failed generation run."""

    PREFIX = "Failed to create SDK file:"

    @classmethod
    def wrap(cls, cause: Exception) -> "SdkFileCreationError":
        detail = cause.message if isinstance(cause, GeneratorError) else str(cause)
        context = {"cause_type": type(cause).__name__}
        return cls(f"{cls.PREFIX} {detail}", context=context)
