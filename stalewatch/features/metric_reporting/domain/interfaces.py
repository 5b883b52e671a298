from abc import ABC, abstractmethod
from .models import MetricSample

class IMetricClient(ABC):
    """
    Contract for the monitoring backend.
    Abstracts away CloudWatch (or any other sink) from the reporting logic.
    """

    @abstractmethod
    def submit(self, sample: MetricSample) -> None:
        """
        Publishes a single sample.

        Raises:
            TransportError: If the backend rejects the sample or is unreachable.
        """
        pass
