"""Shared pytest fixtures for the twilio-recordings tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers import StubFetcher, ok
from twilio_recordings.core.session import TwilioRecordings

ACCOUNT_SID = "ACeb4e7b38952d70a91bc4a4acea8dc9e0"
RECORDING_SIDS = [
    "RE93fcf1c3912aea0db664914147789e10",
    "REcd5c5bec7ff667d5c3f1502d04ccb79e",
    "REf7b24375cdbbbb42f58828f2fdf7b5a9",
    "RE23c45b6262e256a455b1ee296af53fbb",
]
API_URL = f"https://api.twilio.com/2010-04-01/Accounts/{ACCOUNT_SID}/Recordings/"


def url_for(sid: str) -> str:
    return f"{API_URL}{sid}.mp3"


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "tmp"
    directory.mkdir()
    return directory


@pytest.fixture
def bodies() -> dict[str, bytes]:
    """Distinct payloads of 10, 20, 30 and 40 bytes keyed by recording SID."""
    return {
        sid: bytes([index + 1]) * (10 * (index + 1))
        for index, sid in enumerate(RECORDING_SIDS)
    }


@pytest.fixture
def stub_fetcher(bodies: dict[str, bytes]) -> StubFetcher:
    # Later recordings finish first so completion order is the reverse of
    # session order.
    delays = {
        url_for(sid): 0.01 * (len(RECORDING_SIDS) - index)
        for index, sid in enumerate(RECORDING_SIDS)
    }
    return StubFetcher(
        {url_for(sid): ok(body) for sid, body in bodies.items()}, delays=delays
    )


@pytest.fixture
def recordings(tmp_dir: Path, stub_fetcher: StubFetcher) -> TwilioRecordings:
    return TwilioRecordings(
        ACCOUNT_SID, RECORDING_SIDS, tmp_dir=tmp_dir, fetcher=stub_fetcher
    )
