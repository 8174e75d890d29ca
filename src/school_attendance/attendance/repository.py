from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import PersonType
from .model import AttendanceEvent


class AttendanceRepository(Protocol):
    """Append-only event store. There is deliberately no update or delete."""

    def get_for_person_and_date(self, person_id: str, calendar_date: str) -> Optional[AttendanceEvent]:
        raise NotImplementedError

    def append(self, event: AttendanceEvent) -> None:
        """Store a new event.

        Raises DuplicateAttendanceError if the person already has an event
        on ``event.calendar_date``.
        """

        raise NotImplementedError

    def list_on(self, calendar_date: str, person_type: Optional[PersonType] = None) -> Sequence[AttendanceEvent]:
        raise NotImplementedError

    def list_between(
        self,
        start_date: str,
        end_date: str,
        person_type: Optional[PersonType] = None,
    ) -> Sequence[AttendanceEvent]:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceEvent]:
        raise NotImplementedError
