import calendar
import re
from datetime import datetime, timedelta

from stalewatch.core.common.enums import IntervalUnit
from ..domain.models import IntervalSpec, InvalidIntervalError

# Whole-string match; the unit letter is case-sensitive (m = minutes, M = months)
INTERVAL_PATTERN = re.compile(r"([0-9]+)([smhdwMy])")

FIXED_UNITS = {
    IntervalUnit.SECOND: timedelta(seconds=1),
    IntervalUnit.MINUTE: timedelta(minutes=1),
    IntervalUnit.HOUR: timedelta(hours=1),
    IntervalUnit.DAY: timedelta(days=1),
    IntervalUnit.WEEK: timedelta(days=7),
}


def parse_interval(raw: str) -> IntervalSpec:
    """
    Parses "<N><unit>" into an IntervalSpec.

    Raises:
        InvalidIntervalError: For anything that is not exactly digits followed
            by one of s, m, h, d, w, M, y, or whose magnitude is zero.
    """
    if not isinstance(raw, str):
        raise InvalidIntervalError(raw)

    match = INTERVAL_PATTERN.fullmatch(raw)
    if match is None:
        raise InvalidIntervalError(raw)

    magnitude = int(match.group(1))
    if magnitude == 0:
        raise InvalidIntervalError(raw)

    return IntervalSpec(magnitude=magnitude, unit=IntervalUnit(match.group(2)))


def _subtract_months(moment: datetime, months: int) -> datetime:
    # Day of month is clamped to the end of the target month (Mar 31 - 1M -> Feb 28/29)
    total = moment.year * 12 + (moment.month - 1) - months
    year, month_index = divmod(total, 12)
    month = month_index + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def compute_cutoff(now: datetime, spec: IntervalSpec) -> datetime:
    """
    Returns the instant before which a file counts as stale.
    Months and years use calendar arithmetic, not fixed lengths.
    """
    if spec.unit in FIXED_UNITS:
        return now - FIXED_UNITS[spec.unit] * spec.magnitude
    if spec.unit == IntervalUnit.MONTH:
        return _subtract_months(now, spec.magnitude)
    if spec.unit == IntervalUnit.YEAR:
        return _subtract_months(now, spec.magnitude * 12)

    raise ValueError(f"Unsupported interval unit: {spec.unit}")
