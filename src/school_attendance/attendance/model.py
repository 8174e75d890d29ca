from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Optional, Union

from ..common.datetime_utils import local_datetime
from ..core.enums import AttendanceStatus, PersonType, RejectReason
from ..people.model import Person


@dataclass(frozen=True)
class AttendanceEvent:
    """Thực thể miền (domain): Một lần điểm danh (immutable, append-only).

    ``person_type`` is captured when the event is written and is never
    re-derived from the live roster, so historical reports stay stable.
    """

    event_id: str
    person_id: str
    person_type: PersonType
    status: AttendanceStatus
    occurred_at_ms: int
    calendar_date: str
    note: Optional[str] = None

    @property
    def occurred_at(self) -> datetime:
        return local_datetime(self.occurred_at_ms)


@dataclass(frozen=True)
class Accepted:
    event: AttendanceEvent
    person: Person

    accepted: ClassVar[bool] = True

    @property
    def message(self) -> str:
        return f"Marked {self.event.status.value}: {self.person.display_name}"


@dataclass(frozen=True)
class Rejected:
    reason: RejectReason
    existing: Optional[AttendanceEvent] = None
    person: Optional[Person] = None

    accepted: ClassVar[bool] = False

    @property
    def message(self) -> str:
        if self.reason == RejectReason.ALREADY_RECORDED and self.person:
            return f"{self.person.display_name} is already present!"
        return "Unknown ID Card"


IngestOutcome = Union[Accepted, Rejected]
