"""
HTTP Layer.

This package handles retrieving recording media from the Twilio API.
"""

from .fetcher import AiohttpFetcher, Fetcher, FetchResponse

__all__ = ["AiohttpFetcher", "FetchResponse", "Fetcher"]
