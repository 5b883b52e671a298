from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List


class TransportError(RuntimeError):
    """
    The metric backend rejected a sample or could not be reached.
    """


@dataclass(frozen=True)
class HostIdentity:
    instance_id: str
    instance_name: str

    def __post_init__(self):
        if not self.instance_id or not self.instance_name:
            raise ValueError("Host identity needs both an instance id and an instance name.")


@dataclass(frozen=True)
class MetricSample:
    """
    One data point, dimensioned by host and folder.
    """
    metric_name: str
    value: int
    timestamp: datetime
    dimensions: Dict[str, str]
    unit: str = "Count"


@dataclass
class ReportSummary:
    """
    Report returned after a reporting batch completes.
    """
    submitted: int = 0
    skipped: int = 0
    failed: int = 0
    # Samples never attempted because an earlier submission failed
    aborted: int = 0
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.failed == 0
