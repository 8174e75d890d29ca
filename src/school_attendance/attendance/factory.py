from __future__ import annotations

from dataclasses import dataclass

from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.on_time_strategy import OnTimeStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_checkin(self, *, now_ms: int, cutoff_ms: int) -> AttendanceStrategy:
        # Tie-break: a scan exactly at the cutoff is on time.
        if now_ms <= cutoff_ms:
            return OnTimeStrategy()
        return LateStrategy()
