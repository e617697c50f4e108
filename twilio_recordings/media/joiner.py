"""
Byte-exact, ordered concatenation of downloaded recordings.
"""

import logging
import os
import shutil
from typing import Sequence

from twilio_recordings.exceptions import JoinFailed

log = logging.getLogger(__name__)

COPY_BUFFER_SIZE = 1048576  # 1 MB


def concatenate_files(input_paths: Sequence[str], output_path: str) -> int:
    """
    Writes the contents of `input_paths`, in order, to `output_path`.

    Nothing is inserted between inputs. An existing output file is truncated.

    Returns:
        The number of bytes written.

    Raises:
        OSError: If an input cannot be read or the output cannot be written.
    """
    with open(output_path, "wb") as out:
        for path in input_paths:
            with open(path, "rb") as src:
                shutil.copyfileobj(src, out, COPY_BUFFER_SIZE)
        return out.tell()


class Joiner:
    """Joins a session's temp files into one output file."""

    def join(self, input_paths: Sequence[str], output_path: str) -> str:
        """
        Concatenates `input_paths` into `output_path`.

        Returns:
            The output path.

        Raises:
            JoinFailed: If the concatenation could not be completed.
        """
        try:
            size = concatenate_files(input_paths, output_path)
        except OSError as e:
            raise JoinFailed(e) from e
        log.debug(
            f"Joined {len(input_paths)} file(s) into "
            f"'{os.path.basename(output_path)}' ({size} bytes)"
        )
        return output_path
