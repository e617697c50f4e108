"""
The HTTP retrieval primitive used by the fetch orchestrator.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

import aiohttp

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchResponse:
    """Status code and complete body of one retrieval."""

    status: int
    body: bytes

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class Fetcher(Protocol):
    """Anything that can GET a URL and hand back its status and body."""

    async def fetch(self, url: str) -> FetchResponse: ...

    async def close(self) -> None: ...


class AiohttpFetcher:
    """
    Fetches URLs through a pooled aiohttp ClientSession.

    The session is created on first use and recreated if it has been closed,
    so one instance can serve several event loops in turn as long as close()
    is awaited before each loop ends.
    """

    def __init__(
        self,
        max_connections: int = 8,
        connect_timeout: float = 15.0,
        read_timeout: float = 90.0,
    ):
        """
        Args:
            max_connections: Upper bound on simultaneous sockets to the API host.
            connect_timeout: Seconds allowed to establish a connection.
            read_timeout: Seconds allowed between reads of the response body.
        """
        self.max_connections = max_connections
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self._session: aiohttp.ClientSession | None = None
        self._lock: asyncio.Lock | None = None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._lock is None:
            self._lock = asyncio.Lock()
        async with self._lock:
            if self._session is None or self._session.closed:
                connector = aiohttp.TCPConnector(
                    limit=self.max_connections,
                    limit_per_host=self.max_connections,
                    ttl_dns_cache=300,
                    enable_cleanup_closed=True,
                )
                timeout = aiohttp.ClientTimeout(
                    total=None,
                    sock_connect=self.connect_timeout,
                    sock_read=self.read_timeout,
                )
                self._session = aiohttp.ClientSession(
                    connector=connector, timeout=timeout
                )
                log.debug(
                    f"Created HTTP session with limit={self.max_connections}"
                )
        return self._session

    async def fetch(self, url: str) -> FetchResponse:
        """
        Performs a GET and reads the whole body into memory.

        Transport errors (aiohttp.ClientError, asyncio.TimeoutError) propagate
        to the caller; a non-2xx status does not raise here.
        """
        session = await self._get_session()
        async with session.get(url, allow_redirects=True) as response:
            body = await response.read()
            log.debug(f"GET {url} -> {response.status} ({len(body)} bytes)")
            return FetchResponse(status=response.status, body=body)

    async def close(self) -> None:
        """Gracefully closes the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()
            log.debug("HTTP session closed.")
        self._session = None
        self._lock = None
