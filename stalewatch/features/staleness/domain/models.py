from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from stalewatch.core.common.enums import IntervalUnit, ScanStatus

# Legacy wire value for "no count available". Existing dashboards key on it.
STALE_COUNT_SENTINEL = -1


class InvalidIntervalError(ValueError):
    """
    Raised when an interval string does not match <N><unit>.
    """
    def __init__(self, raw):
        self.raw = raw
        super().__init__(f"Invalid time interval: {raw!r} (expected <number><s|m|h|d|w|M|y>)")


@dataclass(frozen=True)
class IntervalSpec:
    """
    Value Object for a parsed age threshold, e.g. "3d" -> (3, DAY).
    """
    magnitude: int
    unit: IntervalUnit

    def __post_init__(self):
        if self.magnitude <= 0:
            raise ValueError(f"Interval magnitude must be positive: {self.magnitude}")


@dataclass(frozen=True)
class ScanRequest:
    """
    One configured folder to check. Validation is deferred to the orchestrator
    so that a bad entry becomes a result instead of an exception.
    """
    directory_path: str
    interval: str


@dataclass(frozen=True)
class FileObservation:
    path: Path
    creation_time: datetime


@dataclass(frozen=True)
class ScanOutcome:
    """
    What the scanner found in a single directory.
    """
    stale_count: int
    status: ScanStatus
    detail: str = ""

    @classmethod
    def failed(cls, status: ScanStatus, detail: str) -> "ScanOutcome":
        return cls(stale_count=STALE_COUNT_SENTINEL, status=status, detail=detail)


@dataclass(frozen=True)
class ScanResult:
    """
    Report for one ScanRequest. Exactly one is produced per request.
    """
    directory_path: str
    interval: str
    cutoff: Optional[datetime]
    stale_count: int
    status: ScanStatus
    scanned_at: datetime
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.status == ScanStatus.OK
