"""
twilio-recordings: download Twilio call recordings concurrently and join them
into a single file.
"""

__version__ = "1.0.0"

from twilio_recordings.core.session import TwilioRecordings  # noqa: E402
from twilio_recordings.exceptions import (  # noqa: E402
    FetchFailed,
    JoinFailed,
    ResourceUnavailable,
    StorageReleasedError,
    TwilioRecordingsError,
)

__all__ = [
    "FetchFailed",
    "JoinFailed",
    "ResourceUnavailable",
    "StorageReleasedError",
    "TwilioRecordings",
    "TwilioRecordingsError",
    "__version__",
]
