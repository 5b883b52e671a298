from datetime import datetime, timezone
from typing import Iterable, List, Optional

from stalewatch.core.common.enums import TimestampSource
from ..domain.models import ScanRequest, ScanResult
from ..data.directory_lister import LocalDirectoryLister
from .orchestrator import ScanOrchestrator
from .scanner import DirectoryScanner

def evaluate_folders(requests: Iterable[ScanRequest],
                     now: Optional[datetime] = None,
                     timestamp_source: TimestampSource = TimestampSource.CREATED) -> List[ScanResult]:
    """
    Public Service API: count stale files for every configured folder.

    Args:
        requests: (path, interval) pairs from the configuration store.
        now: Reference instant. Defaults to the current UTC time.
        timestamp_source: Which file timestamp counts as "creation".
    """
    if now is None:
        now = datetime.now(timezone.utc)

    scanner = DirectoryScanner(LocalDirectoryLister(timestamp_source))
    return ScanOrchestrator(scanner).run(requests, now)
