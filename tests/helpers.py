"""In-memory stand-ins for the HTTP layer."""

from __future__ import annotations

import asyncio

from twilio_recordings.api.fetcher import FetchResponse


class StubFetcher:
    """Fetcher stub serving canned responses, optionally delayed or failing per URL."""

    def __init__(
        self,
        responses: dict[str, FetchResponse | Exception],
        delays: dict[str, float] | None = None,
    ) -> None:
        self.responses = responses
        self.delays = delays or {}
        self.calls: list[str] = []
        self.completed: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.close_calls = 0

    async def fetch(self, url: str) -> FetchResponse:
        self.calls.append(url)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(url, 0))
            result = self.responses[url]
            if isinstance(result, Exception):
                raise result
            return result
        finally:
            self.in_flight -= 1
            self.completed.append(url)

    async def close(self) -> None:
        self.close_calls += 1


def ok(body: bytes) -> FetchResponse:
    return FetchResponse(status=200, body=body)
