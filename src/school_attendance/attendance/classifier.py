"""Status classifier: (scan instant, configured start time, day) -> status.

Pure functions. The cutoff is the day's local midnight plus the start time
(seconds and milliseconds zero) plus an optional grace period. A scan strictly
after the cutoff is LATE, anything at or before it is PRESENT. A missing or
malformed start time falls back to 08:00, so classification never fails.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta
from typing import Optional

from ..common.datetime_utils import epoch_millis
from ..core.constants import DEFAULT_START_TIME
from ..core.enums import AttendanceStatus
from .factory import AttendanceStrategyFactory
from .strategies.base import StatusDecision

_START_TIME_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})(?::\d{2})?\s*$")


def parse_start_time(value: Optional[str]) -> Optional[time]:
    """Parse "HH:MM" (24h). Returns None when absent or malformed."""

    if not value:
        return None
    match = _START_TIME_RE.match(str(value))
    if not match:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        return None
    return time(hour, minute)


_FALLBACK_START = parse_start_time(DEFAULT_START_TIME)


def cutoff_millis(local_date: date, start_time: Optional[str], *, grace_minutes: int = 0) -> int:
    start = parse_start_time(start_time) or _FALLBACK_START
    cutoff = datetime.combine(local_date, start) + timedelta(minutes=max(0, int(grace_minutes)))
    return epoch_millis(cutoff)


def decide(
    now_ms: int,
    start_time: Optional[str],
    local_date: date,
    *,
    grace_minutes: int = 0,
    factory: Optional[AttendanceStrategyFactory] = None,
) -> StatusDecision:
    cutoff_ms = cutoff_millis(local_date, start_time, grace_minutes=grace_minutes)
    strategy = (factory or AttendanceStrategyFactory()).for_checkin(now_ms=now_ms, cutoff_ms=cutoff_ms)
    return strategy.decide_checkin(now_ms=now_ms, cutoff_ms=cutoff_ms)


def classify(now_ms: int, start_time: Optional[str], local_date: date, *, grace_minutes: int = 0) -> AttendanceStatus:
    return decide(now_ms, start_time, local_date, grace_minutes=grace_minutes).status
