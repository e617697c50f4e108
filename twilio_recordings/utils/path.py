"""
Utilities for handling file-safe identifiers and recording URLs.
"""

import re

API_BASE_URL = "https://api.twilio.com"
API_VERSION = "2010-04-01"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9]")


def sanitize(raw: str) -> str:
    """
    Strips every character that is not an ASCII letter or digit.

    The result is safe to embed in a filename: separators and '..' sequences
    are removed, so "../etc/passwd" becomes "etcpasswd". An all-symbol input
    yields an empty string.
    """
    return _UNSAFE_CHARS.sub("", raw)


def recording_url(
    account_sid: str, recording_sid: str, base_url: str = API_BASE_URL
) -> str:
    """Builds the .mp3 media URL for a recording. The SID is used as given."""
    return (
        f"{base_url}/{API_VERSION}/Accounts/{account_sid}"
        f"/Recordings/{recording_sid}.mp3"
    )

