import logging
from datetime import datetime
from typing import Iterable, List, Optional

from stalewatch.core.common.enums import ScanStatus

from ..domain.models import (
    STALE_COUNT_SENTINEL,
    InvalidIntervalError,
    ScanRequest,
    ScanResult,
)
from ..data.interval_parser import compute_cutoff, parse_interval
from .scanner import DirectoryScanner

logger = logging.getLogger(__name__)


class ScanOrchestrator:
    """
    Runs the scanner over a batch of configured folders.
    Every request yields exactly one ScanResult, in input order; one bad
    entry never stops the rest of the batch.
    """

    def __init__(self, scanner: Optional[DirectoryScanner] = None):
        self.scanner = scanner or DirectoryScanner()

    def run(self, requests: Iterable[ScanRequest], now: datetime) -> List[ScanResult]:
        results = [self._evaluate(request, now) for request in requests]

        failed = sum(1 for r in results if not r.ok)
        logger.info(f"Scan batch complete. {len(results) - failed}/{len(results)} folders OK.")
        return results

    def _evaluate(self, request: ScanRequest, now: datetime) -> ScanResult:
        # 1. Parse the threshold
        try:
            spec = parse_interval(request.interval)
        except InvalidIntervalError as e:
            logger.error(f"Skipping {request.directory_path}: {e}")
            return ScanResult(
                directory_path=request.directory_path,
                interval=request.interval,
                cutoff=None,
                stale_count=STALE_COUNT_SENTINEL,
                status=ScanStatus.INVALID_INTERVAL,
                scanned_at=now,
                detail=str(e)
            )

        # 2. Resolve cutoff and scan
        cutoff = compute_cutoff(now, spec)
        try:
            outcome = self.scanner.scan(request.directory_path, cutoff)
        except Exception as e:
            # Scanner contract is to return statuses, but a faulty lister must not sink the batch
            logger.exception(f"Unexpected failure scanning {request.directory_path}")
            return ScanResult(
                directory_path=request.directory_path,
                interval=request.interval,
                cutoff=cutoff,
                stale_count=STALE_COUNT_SENTINEL,
                status=ScanStatus.SCAN_ERROR,
                scanned_at=now,
                detail=f"Unexpected scan failure: {e}"
            )

        return ScanResult(
            directory_path=request.directory_path,
            interval=request.interval,
            cutoff=cutoff,
            stale_count=outcome.stale_count,
            status=outcome.status,
            scanned_at=now,
            detail=outcome.detail
        )
