"""
Sanity check for a joined recording: it must still parse as MP3 audio.
"""

import logging

from mutagen import MutagenError
from mutagen.mp3 import MP3

log = logging.getLogger(__name__)


def joined_audio_length(path: str) -> float | None:
    """
    Returns the playable length in seconds of the joined file at `path`, or
    None when mutagen cannot find MP3 frames in it.

    Twilio serves every recording as MPEG audio, so a join of valid
    recordings always has a frame header at the start. Concatenated frames
    are not re-muxed, so the length is mutagen's estimate from the first
    frame header and the file size.
    """
    try:
        info = MP3(path).info
    except MutagenError as e:
        log.warning(f"Joined recording '{path}' is not readable as MP3: {e}")
        return None

    if info.length <= 0:
        log.warning(f"Joined recording '{path}' contains no audio frames.")
        return None
    log.debug(f"Joined recording '{path}': {info.length:.1f}s at {info.bitrate} bps")
    return info.length
