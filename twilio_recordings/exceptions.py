"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class TwilioRecordingsError(Exception):
    """Base exception for all application-specific errors."""


class ConfigurationError(TwilioRecordingsError):
    """Raised for issues related to configuration loading or validation."""


class ResourceUnavailable(TwilioRecordingsError):
    """Raised when a temporary file cannot be allocated."""


class StorageReleasedError(ResourceUnavailable):
    """Raised when temp storage is used after it has been released."""


class FetchFailed(TwilioRecordingsError):
    """
    Raised when a recording could not be retrieved, either because the server
    answered with a non-success status or because the transport failed.
    """

    def __init__(self, identifier: str, cause: Exception | str):
        self.identifier = identifier
        self.cause = cause
        super().__init__(f"Failed to fetch recording '{identifier}': {cause}")


class JoinFailed(TwilioRecordingsError):
    """Raised when the downloaded recordings could not be concatenated."""

    def __init__(self, cause: Exception | str):
        self.cause = cause
        super().__init__(f"Failed to join recordings: {cause}")
