from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class OnTimeStrategy(AttendanceStrategy):
    """Scan at or before the cutoff."""

    def decide_checkin(self, *, now_ms: int, cutoff_ms: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT)
