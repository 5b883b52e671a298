from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from stalewatch.features.staleness.domain.models import ScanResult
from stalewatch.features.metric_reporting.domain.models import ReportSummary

class IRunHistoryRepository(ABC):
    """
    Contract for keeping past scan runs.
    """

    @abstractmethod
    def record_run(self,
                   results: List[ScanResult],
                   started_at: datetime,
                   summary: Optional[ReportSummary] = None) -> UUID:
        """
        Stores one run and all of its results in one transaction.
        Returns the new run id.
        """
        pass

    @abstractmethod
    def latest_results(self, directory_path: str, limit: int = 10) -> List[ScanResult]:
        """
        Most recent results for a folder, newest first.
        """
        pass
