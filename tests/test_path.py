"""Tests for identifier sanitization and URL construction."""

import pytest

from twilio_recordings.core.session import TwilioRecordings
from twilio_recordings.utils.path import recording_url, sanitize


def test_sanitize_removes_path_traversal() -> None:
    assert sanitize("../etc/passwd") == "etcpasswd"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("RE93fcf1c3912aea0db664914147789e10", "RE93fcf1c3912aea0db664914147789e10"),
        ("..\\..\\windows\\system32", "windowssystem32"),
        ("a b;rm -rf /", "abrmrf"),
        ("$(whoami)", "whoami"),
        ("../..", ""),
        ("", ""),
        ("réc✓ording", "rcording"),
    ],
)
def test_sanitize_keeps_only_alphanumerics(raw: str, expected: str) -> None:
    assert sanitize(raw) == expected


@pytest.mark.parametrize("raw", ["a/b/c", "x..y", "__--..//", "RE-1_2.3"])
def test_sanitize_output_is_alphanumeric_subsequence(raw: str) -> None:
    result = sanitize(raw)

    assert all(ch.isascii() and ch.isalnum() for ch in result)
    remaining = iter(raw)
    assert all(ch in remaining for ch in result)


def test_sanitize_is_exposed_on_session() -> None:
    assert TwilioRecordings.sanitize("../etc/passwd") == "etcpasswd"


def test_recording_url_uses_fixed_template() -> None:
    assert (
        recording_url("ACxyz", "REabc")
        == "https://api.twilio.com/2010-04-01/Accounts/ACxyz/Recordings/REabc.mp3"
    )


def test_recording_url_does_not_sanitize_identifier() -> None:
    assert recording_url("ACxyz", "RE a/b").endswith("/Recordings/RE a/b.mp3")


def test_recording_url_accepts_base_url_override() -> None:
    assert recording_url("AC1", "RE1", "http://localhost:8080") == (
        "http://localhost:8080/2010-04-01/Accounts/AC1/Recordings/RE1.mp3"
    )
