"""
Lifecycle management for the temporary files that hold downloaded recordings
until they are joined.
"""

import logging
import os
import tempfile
from dataclasses import dataclass, field
from enum import Enum
from typing import BinaryIO, Sequence

from twilio_recordings.exceptions import ResourceUnavailable, StorageReleasedError

log = logging.getLogger(__name__)

TEMP_SUFFIX = ".mp3"
OUTPUT_PREFIX = "joined_"
MAX_PREFIX_LENGTH = 64


class StorageState(Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    RELEASED = "released"


@dataclass
class TempFileHandle:
    """A managed temp file: where it lives and, while open, its write handle."""

    slot: int
    identifier: str
    path: str
    file: BinaryIO | None = field(default=None, repr=False)

    @property
    def closed(self) -> bool:
        return self.file is None or self.file.closed

    def close(self) -> None:
        if self.file is not None and not self.file.closed:
            self.file.close()
        self.file = None


class TempStorage:
    """
    Owns one uniquely named temp file per recording slot, plus an optional
    output file for the join.

    Handles are keyed by slot (the identifier's position in the session), so
    repeated identifiers each get their own file. State moves strictly
    UNINITIALIZED -> INITIALIZED -> RELEASED; a released storage never
    allocates again.

    Initialization is not guarded against concurrent callers. Callers must
    not overlap ensure_initialized() calls on the same instance.
    """

    def __init__(self, identifiers: Sequence[str], tmp_dir: str):
        """
        Args:
            identifiers: Sanitized identifiers, in session order.
            tmp_dir: Directory in which all temp files are created.
        """
        self.identifiers = tuple(identifiers)
        self.tmp_dir = tmp_dir
        self.state = StorageState.UNINITIALIZED
        self._handles: dict[int, TempFileHandle] = {}
        self._output: TempFileHandle | None = None

    @property
    def handles(self) -> list[TempFileHandle]:
        """Currently tracked per-recording handles, in slot order."""
        return [self._handles[slot] for slot in sorted(self._handles)]

    def _create(self, prefix: str, identifier: str) -> tuple[int, str]:
        try:
            return tempfile.mkstemp(prefix=prefix, suffix=TEMP_SUFFIX, dir=self.tmp_dir)
        except OSError as e:
            raise ResourceUnavailable(
                f"Could not create temp file for '{identifier}' in "
                f"'{self.tmp_dir}': {e}"
            ) from e

    def ensure_initialized(self) -> None:
        """
        Creates the per-recording temp files if that has not happened yet.

        Slots that already have a handle (e.g. from an earlier attempt that
        failed part-way) are kept; only missing slots are allocated.

        Raises:
            ResourceUnavailable: If the OS refuses to create a temp file.
        """
        if self.state is not StorageState.UNINITIALIZED:
            return

        for slot, identifier in enumerate(self.identifiers):
            if slot in self._handles:
                continue
            fd, path = self._create(
                f"{identifier[:MAX_PREFIX_LENGTH]}_", identifier
            )
            self._handles[slot] = TempFileHandle(
                slot=slot, identifier=identifier, path=path, file=os.fdopen(fd, "wb")
            )
            log.debug(f"Allocated temp file for '{identifier}': {path}")

        self.state = StorageState.INITIALIZED

    def _check_not_released(self) -> None:
        if self.state is StorageState.RELEASED:
            raise StorageReleasedError(
                "Temp storage has already been released for this session."
            )

    def handle_for(self, slot: int) -> TempFileHandle:
        self._check_not_released()
        self.ensure_initialized()
        return self._handles[slot]

    def path_for(self, slot: int) -> str:
        """Returns the temp file path for the recording at `slot`."""
        return self.handle_for(slot).path

    def paths(self) -> list[str]:
        """Returns all temp file paths in slot order."""
        self._check_not_released()
        self.ensure_initialized()
        return [handle.path for handle in self.handles]

    def allocate_output(self) -> str:
        """
        Creates (once) a temp file to receive the joined output and returns its
        path. The file itself survives release_all(); only its handle is closed.
        """
        self._check_not_released()
        if self._output is None:
            fd, path = self._create(OUTPUT_PREFIX, "joined output")
            self._output = TempFileHandle(
                slot=-1, identifier="joined", path=path, file=os.fdopen(fd, "wb")
            )
            # The joiner reopens the file by path.
            self._output.close()
            log.debug(f"Allocated join output file: {path}")
        return self._output.path

    def release_all(self) -> None:
        """
        Closes and deletes every per-recording temp file and forgets them.

        An auto-allocated output file has its handle closed but is kept on
        disk. Calling this with nothing tracked is a no-op.
        """
        if not self._handles and self._output is None:
            return

        removed = 0
        for slot in sorted(self._handles):
            handle = self._handles[slot]
            handle.close()
            try:
                os.remove(handle.path)
                removed += 1
            except FileNotFoundError:
                log.warning(f"Temp file already removed: {handle.path}")
        self._handles.clear()

        if self._output is not None:
            self._output.close()
            self._output = None

        self.state = StorageState.RELEASED
        log.debug(f"Released temp storage: removed {removed} file(s).")
