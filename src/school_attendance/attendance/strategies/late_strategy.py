from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Scan after the cutoff."""

    def decide_checkin(self, *, now_ms: int, cutoff_ms: int) -> StatusDecision:
        minutes_late = max(1, (now_ms - cutoff_ms) // 60_000)
        return StatusDecision(status=AttendanceStatus.LATE, note=f"Late by {minutes_late} min")
