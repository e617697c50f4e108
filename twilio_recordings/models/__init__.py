"""
Data Models Layer.

This package contains the Pydantic model that defines the application's
configuration.
"""

from .config import DownloadConfig

__all__ = ["DownloadConfig"]
