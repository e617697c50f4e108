"""
Utility helpers shared across layers.
"""

from .path import recording_url, sanitize

__all__ = ["recording_url", "sanitize"]
