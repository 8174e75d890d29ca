from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import PersonType


@dataclass(frozen=True)
class DailyPartition:
    """Present/late/absent grouping of one classification for one day.

    ``present`` and ``late`` come from the day's events, including people who
    have since left the roster. ``absent`` is the current roster minus
    everyone who attended, so after roster deletions the three sizes need not
    add up to the roster size.
    """

    calendar_date: str
    person_type: PersonType
    present: frozenset[str]
    late: frozenset[str]
    absent: frozenset[str]

    @property
    def attended(self) -> frozenset[str]:
        return self.present | self.late

    def counts(self) -> dict:
        return {
            "present": len(self.present),
            "late": len(self.late),
            "absent": len(self.absent),
        }


@dataclass(frozen=True)
class DailySummary:
    """One point of the rolling history (absent is against today's roster)."""

    calendar_date: str
    weekday: str
    present_count: int
    late_count: int
    absent_count: int

    @property
    def total_recorded(self) -> int:
        return self.present_count + self.late_count
