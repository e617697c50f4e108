"""
Media Processing Layer.

This package joins downloaded recordings and checks the integrity of the
resulting file.
"""

from .integrity import joined_audio_length
from .joiner import Joiner, concatenate_files

__all__ = ["Joiner", "concatenate_files", "joined_audio_length"]
