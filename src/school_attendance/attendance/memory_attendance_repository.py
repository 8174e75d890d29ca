from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import PersonType
from ..core.exceptions import DuplicateAttendanceError
from .model import AttendanceEvent
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    """Event log indexed by (person_id, calendar_date) for O(1) duplicate checks."""

    def __init__(self):
        self._by_person_date: dict[tuple[str, str], AttendanceEvent] = {}
        self._events: list[AttendanceEvent] = []

    def get_for_person_and_date(self, person_id: str, calendar_date: str) -> Optional[AttendanceEvent]:
        return self._by_person_date.get((person_id, calendar_date))

    def append(self, event: AttendanceEvent) -> None:
        key = (event.person_id, event.calendar_date)
        if key in self._by_person_date:
            raise DuplicateAttendanceError(f"{event.person_id} already recorded on {event.calendar_date}")
        self._by_person_date[key] = event
        self._events.append(event)

    def list_on(self, calendar_date: str, person_type: Optional[PersonType] = None) -> Sequence[AttendanceEvent]:
        return self.list_between(calendar_date, calendar_date, person_type)

    def list_between(
        self,
        start_date: str,
        end_date: str,
        person_type: Optional[PersonType] = None,
    ) -> Sequence[AttendanceEvent]:
        # ISO dates compare correctly as strings.
        items = [
            e
            for e in self._events
            if start_date <= e.calendar_date <= end_date and (person_type is None or e.person_type == person_type)
        ]
        items.sort(key=lambda e: e.occurred_at_ms)
        return items

    def list_all(self) -> Sequence[AttendanceEvent]:
        return list(self._events)
