"""
The public entry point: a session that downloads a set of Twilio recordings
and joins them into a single file.
"""

import asyncio
import logging
import os
import tempfile
from typing import Iterable

from twilio_recordings.api.fetcher import AiohttpFetcher, Fetcher
from twilio_recordings.core.orchestrator import FetchOrchestrator
from twilio_recordings.media.joiner import Joiner
from twilio_recordings.models.config import DownloadConfig
from twilio_recordings.storage.temp_storage import TempStorage
from twilio_recordings.utils.path import recording_url, sanitize

log = logging.getLogger(__name__)


class TwilioRecordings:
    """
    Downloads recordings of one Twilio account and concatenates them in order.

    Usage:
        recordings = TwilioRecordings("AC...", ["RE...", "RE..."])
        output_path = recordings.download_and_join()

    Temp files are removed automatically after a successful join. After any
    failure they are kept for inspection; call cleanup() (or use the session
    as a context manager) to remove them.
    """

    def __init__(
        self,
        account_sid: str,
        recording_sids: Iterable[str],
        tmp_dir: str | os.PathLike | None = None,
        fetcher: Fetcher | None = None,
        config: DownloadConfig | None = None,
    ):
        """
        Args:
            account_sid: The account the recordings belong to.
            recording_sids: Recording SIDs in the order they should be joined.
                Duplicates are fetched and stored independently.
            tmp_dir: Directory for temp files. Defaults to `config.tmp_dir`,
                then to the system temp directory.
            fetcher: Retrieval primitive. Defaults to an AiohttpFetcher tuned
                from `config`, which the session closes after each download.
                A fetcher passed in here is never closed by the session; the
                caller owns it.
            config: Optional settings (base URL, transport limits, tmp_dir).
        """
        if not account_sid:
            raise ValueError("An account SID is required.")

        self._config = config or DownloadConfig()
        self._account_sid = account_sid
        self._recording_sids = tuple(recording_sids)
        self._sanitized_sids = tuple(sanitize(sid) for sid in self._recording_sids)
        self._tmp_dir = str(tmp_dir or self._config.tmp_dir or tempfile.gettempdir())

        self._urls = tuple(
            recording_url(account_sid, sid, self._config.api_base_url)
            for sid in self._recording_sids
        )
        self._storage = TempStorage(self._sanitized_sids, self._tmp_dir)
        self._fetcher = fetcher or AiohttpFetcher(
            max_connections=self._config.max_connections,
            connect_timeout=self._config.connect_timeout,
            read_timeout=self._config.read_timeout,
        )
        self._orchestrator = FetchOrchestrator(
            self._fetcher, close_fetcher=fetcher is None
        )
        self._joiner = Joiner()

    def __enter__(self) -> "TwilioRecordings":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()

    def __repr__(self) -> str:
        return (
            f"TwilioRecordings(account_sid={self._account_sid!r}, "
            f"recordings={len(self._recording_sids)}, tmp_dir={self._tmp_dir!r})"
        )

    @staticmethod
    def sanitize(raw: str) -> str:
        """Strips everything but ASCII letters and digits from `raw`."""
        return sanitize(raw)

    @property
    def account_sid(self) -> str:
        return self._account_sid

    @property
    def recording_sids(self) -> tuple[str, ...]:
        return self._recording_sids

    @property
    def sanitized_sids(self) -> tuple[str, ...]:
        return self._sanitized_sids

    @property
    def tmp_dir(self) -> str:
        return self._tmp_dir

    @property
    def storage(self) -> TempStorage:
        return self._storage

    def urls(self) -> list[str]:
        """The media URL of every recording, in session order."""
        return list(self._urls)

    def filenames(self) -> list[str]:
        """
        The temp file path of every recording, in session order.

        The files are created on the first call and reused afterwards.
        """
        return self._storage.paths()

    async def download_async(self) -> int:
        """
        Downloads every recording into its temp file.

        Returns:
            Total number of bytes downloaded.

        Raises:
            ResourceUnavailable: If temp files could not be created.
            FetchFailed: If any retrieval failed.
        """
        handles = [
            self._storage.handle_for(slot) for slot in range(len(self._urls))
        ]
        log.debug(
            f"Downloading {len(handles)} recording(s) for account "
            f"{self._account_sid} into {self._tmp_dir}"
        )
        return await self._orchestrator.download(self._urls, handles)

    def download(self) -> int:
        """Blocking form of download_async()."""
        return asyncio.run(self.download_async())

    def join(self, output: str | os.PathLike | None = None) -> str:
        """
        Concatenates the downloaded recordings, in session order, into `output`
        (or into a new temp file when omitted) and then removes the per-recording
        temp files.

        Returns:
            The path of the joined file.

        Raises:
            JoinFailed: If concatenation failed; temp files are left in place.
        """
        input_paths = self.filenames()
        output_path = str(output) if output else self._storage.allocate_output()
        self._joiner.join(input_paths, output_path)
        self.cleanup()
        log.info(f"Joined {len(input_paths)} recording(s) into {output_path}")
        return output_path

    async def download_and_join_async(self) -> str:
        await self.download_async()
        return self.join()

    def download_and_join(self) -> str:
        """Downloads every recording, then joins them into a new temp file."""
        self.download()
        return self.join()

    def cleanup(self) -> None:
        """Removes all per-recording temp files. Safe to call repeatedly."""
        self._storage.release_all()
