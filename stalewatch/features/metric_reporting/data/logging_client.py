import logging
from typing import List

from ..domain.interfaces import IMetricClient
from ..domain.models import MetricSample

logger = logging.getLogger(__name__)

class LoggingMetricClient(IMetricClient):
    """Dry-run sink: logs samples instead of sending them."""

    def __init__(self, namespace: str = ""):
        self.namespace = namespace
        self.samples: List[MetricSample] = []

    def submit(self, sample: MetricSample) -> None:
        self.samples.append(sample)
        logger.info(
            f"[dry-run] {self.namespace}/{sample.metric_name} = {sample.value} {sample.unit} "
            f"@ {sample.timestamp.isoformat()} {sample.dimensions}"
        )
