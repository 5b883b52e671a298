# File: stalewatch/core/common/enums.py

from enum import Enum, unique

@unique
class IntervalUnit(str, Enum):
    SECOND = "s"
    MINUTE = "m"
    HOUR = "h"
    DAY = "d"
    WEEK = "w"
    MONTH = "M"
    YEAR = "y"

@unique
class ScanStatus(str, Enum):
    OK = "ok"
    PATH_INVALID = "path_invalid"
    INVALID_INTERVAL = "invalid_interval"
    SCAN_ERROR = "scan_error"

@unique
class TimestampSource(str, Enum):
    CREATED = "created"
    MODIFIED = "modified"
