from sdk_util_generator.core.application.exceptions.generator_exceptions import (
    FileWriteFailedError,
    GeneratorError,
    IntegrationRequestFailedError,
    IntegrationRequestTimeoutError,
    NoContentInResponseError,
    NoWorkspaceOpenError,
    RemoteCallFailedError,
    RemoteCallTimeoutError,
    SdkFileCreationError,
)

__all__ = [
    "FileWriteFailedError",
    "GeneratorError",
    "IntegrationRequestFailedError",
    "IntegrationRequestTimeoutError",
    "NoContentInResponseError",
    "NoWorkspaceOpenError",
    "RemoteCallFailedError",
    "RemoteCallTimeoutError",
    "SdkFileCreationError",
]
