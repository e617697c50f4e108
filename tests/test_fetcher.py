"""Tests for the aiohttp transport against a local HTTP server."""

from __future__ import annotations

import asyncio
from pathlib import Path

import aiohttp
import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer as LocalServer

from twilio_recordings.api.fetcher import AiohttpFetcher, FetchResponse
from twilio_recordings.core.session import TwilioRecordings
from twilio_recordings.exceptions import FetchFailed
from twilio_recordings.models.config import DownloadConfig

RECORDINGS = {"REa": b"abc", "REb": b"\x00\x01defg", "REc": b"hi"}


async def _serve_recording(request: web.Request) -> web.Response:
    sid = request.match_info["filename"].removesuffix(".mp3")
    if sid not in RECORDINGS:
        return web.Response(status=404, text="Not Found")
    return web.Response(body=RECORDINGS[sid], content_type="audio/mpeg")


def _recordings_app() -> web.Application:
    app = web.Application()
    app.router.add_get(
        "/2010-04-01/Accounts/{account}/Recordings/{filename}", _serve_recording
    )
    return app


def _url(server: LocalServer, sid: str) -> str:
    return str(server.make_url(f"/2010-04-01/Accounts/AC1/Recordings/{sid}.mp3"))


@pytest.mark.asyncio
async def test_fetch_returns_status_and_body() -> None:
    fetcher = AiohttpFetcher(max_connections=2)
    async with LocalServer(_recordings_app()) as server:
        try:
            response = await fetcher.fetch(_url(server, "REa"))
        finally:
            await fetcher.close()

    assert response == FetchResponse(status=200, body=b"abc")
    assert response.ok


@pytest.mark.asyncio
async def test_fetch_missing_recording_is_not_ok() -> None:
    fetcher = AiohttpFetcher()
    async with LocalServer(_recordings_app()) as server:
        try:
            response = await fetcher.fetch(_url(server, "REmissing"))
        finally:
            await fetcher.close()

    assert response.status == 404
    assert not response.ok


@pytest.mark.asyncio
async def test_unreachable_host_raises_transport_error() -> None:
    fetcher = AiohttpFetcher(connect_timeout=1)
    async with LocalServer(_recordings_app()) as server:
        url = _url(server, "REa")
    try:
        with pytest.raises(aiohttp.ClientError):
            await fetcher.fetch(url)
    finally:
        await fetcher.close()


def test_fetcher_is_reusable_across_event_loops() -> None:
    fetcher = AiohttpFetcher()

    async def fetch_once() -> FetchResponse:
        async with LocalServer(_recordings_app()) as server:
            try:
                return await fetcher.fetch(_url(server, "REb"))
            finally:
                await fetcher.close()

    first = asyncio.run(fetch_once())
    second = asyncio.run(fetch_once())

    assert first == second == FetchResponse(status=200, body=b"\x00\x01defg")


@pytest.mark.asyncio
async def test_session_downloads_and_joins_over_http(tmp_path: Path) -> None:
    async with LocalServer(_recordings_app()) as server:
        config = DownloadConfig(api_base_url=f"http://{server.host}:{server.port}")
        recordings = TwilioRecordings(
            "AC1", ["REc", "REa", "REb"], tmp_dir=tmp_path, config=config
        )

        output = await recordings.download_and_join_async()

    assert Path(output).read_bytes() == b"hi" + b"abc" + b"\x00\x01defg"
    assert list(tmp_path.iterdir()) == [Path(output)]


@pytest.mark.asyncio
async def test_session_reports_missing_recording_over_http(tmp_path: Path) -> None:
    async with LocalServer(_recordings_app()) as server:
        config = DownloadConfig(api_base_url=f"http://{server.host}:{server.port}")
        recordings = TwilioRecordings(
            "AC1", ["REa", "REgone"], tmp_dir=tmp_path, config=config
        )

        with pytest.raises(FetchFailed) as excinfo:
            await recordings.download_async()

    assert excinfo.value.identifier == "REgone"
    assert "404" in str(excinfo.value.cause)
    assert Path(recordings.filenames()[0]).read_bytes() == b"abc"
