import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from stalewatch.core.common.enums import ScanStatus

from ..domain.interfaces import IDirectoryLister
from ..domain.models import ScanOutcome
from ..data.directory_lister import LocalDirectoryLister

logger = logging.getLogger(__name__)

class DirectoryScanner:
    """
    Counts the stale files directly inside one directory.
    Bad paths and I/O failures come back as statuses, never as exceptions.
    """

    def __init__(self, lister: Optional[IDirectoryLister] = None):
        self.lister = lister or LocalDirectoryLister()

    def scan(self, path: str, cutoff: datetime) -> ScanOutcome:
        root = Path(path)

        # 1. Validate the configured path
        try:
            if not root.is_dir():
                reason = "does not exist" if not root.exists() else "is not a directory"
                logger.warning(f"Scan path {reason}: {path}")
                return ScanOutcome.failed(ScanStatus.PATH_INVALID, f"Path {reason}: {path}")
        except OSError as e:
            # e.g. EACCES on a parent directory
            logger.error(f"Cannot inspect {path}: {e}")
            return ScanOutcome.failed(ScanStatus.SCAN_ERROR, f"Cannot inspect {path}: {e}")

        if cutoff.tzinfo is None:
            cutoff = cutoff.replace(tzinfo=timezone.utc)

        # 2. Read and order the entries (oldest first, for readable diagnostics)
        try:
            observations = sorted(self.lister.list_files(root), key=lambda o: o.creation_time)
        except OSError as e:
            logger.error(f"Failed to list {path}: {e}")
            return ScanOutcome.failed(ScanStatus.SCAN_ERROR, f"Failed to list {path}: {e}")

        # 3. Classify. A file created exactly at the cutoff is still fresh.
        stale_count = 0
        for observation in observations:
            is_stale = observation.creation_time < cutoff
            if is_stale:
                stale_count += 1
            logger.debug(
                f"{observation.path.name}: created {observation.creation_time.isoformat()} "
                f"{'STALE' if is_stale else 'fresh'}"
            )

        logger.info(f"{path}: {stale_count}/{len(observations)} files older than {cutoff.isoformat()}")
        return ScanOutcome(stale_count=stale_count, status=ScanStatus.OK)
