import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator

from stalewatch.core.common.enums import TimestampSource
from ..domain.interfaces import IDirectoryLister
from ..domain.models import FileObservation

logger = logging.getLogger(__name__)


class LocalDirectoryLister(IDirectoryLister):
    """
    Concrete implementation using os.scandir (one stat per entry, no recursion).
    """

    def __init__(self, timestamp_source: TimestampSource = TimestampSource.CREATED):
        self.timestamp_source = TimestampSource(timestamp_source)

    def list_files(self, root: Path) -> Iterator[FileObservation]:
        with os.scandir(root) as entries:
            for entry in entries:
                # Sub-directories (and anything else that is not a regular file) are skipped
                if not entry.is_file():
                    continue

                try:
                    stat = entry.stat()
                except FileNotFoundError:
                    # Picked up by the consumer between listing and stat
                    logger.debug(f"{entry.path} vanished during scan; skipping")
                    continue

                yield FileObservation(
                    path=Path(entry.path),
                    creation_time=self._read_timestamp(stat)
                )

    def _read_timestamp(self, stat: os.stat_result) -> datetime:
        if self.timestamp_source == TimestampSource.MODIFIED:
            raw = stat.st_mtime
        else:
            # st_birthtime exists on macOS/BSD and Windows (3.12+).
            # Elsewhere st_ctime is the closest available value (creation time on Windows).
            raw = getattr(stat, "st_birthtime", None)
            if raw is None:
                raw = stat.st_ctime

        return datetime.fromtimestamp(raw, tz=timezone.utc)
