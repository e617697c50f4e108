"""
Downloads every recording of a session into its temp file.
"""

import asyncio
import logging
from typing import Sequence

import aiofiles

from twilio_recordings.api.fetcher import Fetcher
from twilio_recordings.exceptions import FetchFailed, ResourceUnavailable
from twilio_recordings.storage.temp_storage import TempFileHandle

log = logging.getLogger(__name__)


class FetchOrchestrator:
    """
    Issues one retrieval per recording and writes each body to its own file.

    With several recordings, every request is started before any response is
    awaited and the call returns only after all of them have settled. A single
    recording is fetched directly without a task.

    When `close_fetcher` is set the fetcher is closed after every download;
    otherwise its lifetime belongs to whoever created it.
    """

    def __init__(self, fetcher: Fetcher, close_fetcher: bool = True):
        self.fetcher = fetcher
        self.close_fetcher = close_fetcher

    async def _fetch_one(self, url: str, handle: TempFileHandle) -> int:
        """Fetches `url` into `handle`'s file and returns the bytes written."""
        try:
            response = await self.fetcher.fetch(url)
        except Exception as e:
            raise FetchFailed(handle.identifier, e) from e

        if not response.ok:
            raise FetchFailed(handle.identifier, f"HTTP {response.status} for {url}")

        try:
            async with aiofiles.open(handle.path, "wb") as f:
                await f.write(response.body)
        except OSError as e:
            raise ResourceUnavailable(
                f"Could not write '{handle.identifier}' to {handle.path}: {e}"
            ) from e
        handle.close()
        log.debug(
            f"Saved '{handle.identifier}' ({len(response.body)} bytes) to "
            f"{handle.path}"
        )
        return len(response.body)

    async def download(
        self, urls: Sequence[str], handles: Sequence[TempFileHandle]
    ) -> int:
        """
        Fetches each URL into the handle at the same position.

        Args:
            urls: Recording URLs in session order.
            handles: Temp file handles in session order.

        Returns:
            Total number of bytes written.

        Raises:
            FetchFailed: For the first recording, in session order, whose
                retrieval failed. Files of successful retrievals stay on disk.
            ResourceUnavailable: If a body could not be written to its temp file.
        """
        if len(urls) != len(handles):
            raise ValueError(
                f"Got {len(urls)} URLs but {len(handles)} temp file handles."
            )
        if not urls:
            return 0

        try:
            if len(urls) == 1:
                return await self._fetch_one(urls[0], handles[0])

            log.debug(f"Fetching {len(urls)} recordings concurrently...")
            tasks = [
                asyncio.create_task(self._fetch_one(url, handle))
                for url, handle in zip(urls, handles)
            ]
            results = await asyncio.gather(*tasks, return_exceptions=True)
        finally:
            if self.close_fetcher:
                await self.fetcher.close()

        failures = [r for r in results if isinstance(r, BaseException)]
        for failure in failures:
            log.debug(f"Retrieval failed: {failure}")
        if failures:
            log.warning(f"{len(failures)} of {len(urls)} recordings failed to download.")
            raise failures[0]
        return sum(results)
