"""
Storage Layer.

This package handles all data persistence: the configuration file and the
temporary files that hold recordings between download and join.
"""

from .config_manager import ConfigManager
from .temp_storage import StorageState, TempFileHandle, TempStorage

__all__ = ["ConfigManager", "StorageState", "TempFileHandle", "TempStorage"]
