from datetime import datetime
from typing import List, Optional
from uuid import UUID

from stalewatch.features.staleness.domain.models import ScanResult
from stalewatch.features.metric_reporting.domain.models import ReportSummary
from ..data.repository import SqlRunHistoryRepo

class RunHistoryService:
    """
    Facade for the Run History Feature.
    """
    def __init__(self):
        self.repo = SqlRunHistoryRepo()

    def record_run(self,
                   results: List[ScanResult],
                   started_at: datetime,
                   summary: Optional[ReportSummary] = None) -> UUID:
        return self.repo.record_run(results, started_at, summary)

    def latest_results(self, directory_path: str, limit: int = 10) -> List[ScanResult]:
        return self.repo.latest_results(directory_path, limit)

# Singleton Instance for easy import
history = RunHistoryService()
