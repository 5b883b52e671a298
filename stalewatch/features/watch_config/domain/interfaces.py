from abc import ABC, abstractmethod
from typing import List

from stalewatch.features.staleness.domain.models import ScanRequest

class IWatchConfigSource(ABC):
    """
    Contract for wherever the list of watched folders lives.
    """
    @abstractmethod
    def load(self) -> List[ScanRequest]:
        """
        Returns the configured folders in their configured order.
        Interval strings are passed through unparsed.
        """
        pass
