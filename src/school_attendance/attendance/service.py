from __future__ import annotations

import logging
import threading
import uuid
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import calendar_date as calendar_date_of
from ..common.datetime_utils import local_date, now_millis
from ..core.enums import PersonType, RejectReason
from ..core.exceptions import DuplicateAttendanceError
from ..people.registry import IdentityRegistry
from ..school.service import SchoolConfigService
from . import classifier
from .factory import AttendanceStrategyFactory
from .model import Accepted, AttendanceEvent, IngestOutcome, Rejected
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceLedger:
    """Use case: turn a scanned identifier into at most one event per person per day.

    ``ingest`` is the only write path. The check-then-append sequence runs
    under a lock so concurrent scans (threaded Flask) cannot both pass the
    duplicate check; the repository's unique key covers other processes.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        registry: IdentityRegistry,
        school: SchoolConfigService,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        grace_minutes: int = 0,
        id_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
    ):
        self._attendance = attendance
        self._registry = registry
        self._school = school
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._grace_minutes = int(grace_minutes)
        self._new_id = id_factory
        self._lock = threading.Lock()

    def ingest(self, identifier: Optional[str], now_ms: int | None = None) -> IngestOutcome:
        now_ms = now_millis() if now_ms is None else int(now_ms)
        today = calendar_date_of(now_ms)

        person = self._registry.resolve(identifier)
        if not person:
            logger.warning("Rejected scan %r: unknown identifier", identifier)
            return Rejected(reason=RejectReason.UNKNOWN_IDENTIFIER)

        with self._lock:
            existing = self._attendance.get_for_person_and_date(person.person_id, today)
            if existing:
                return self._already_recorded(person, existing)

            decision = classifier.decide(
                now_ms,
                self._school.effective_start_time(),
                local_date(now_ms),
                grace_minutes=self._grace_minutes,
                factory=self._factory,
            )
            event = AttendanceEvent(
                event_id=self._new_id(),
                person_id=person.person_id,
                person_type=person.person_type,
                status=decision.status,
                occurred_at_ms=now_ms,
                calendar_date=today,
                note=decision.note,
            )
            try:
                self._attendance.append(event)
            except DuplicateAttendanceError:
                existing = self._attendance.get_for_person_and_date(person.person_id, today)
                if existing is None:
                    raise
                return self._already_recorded(person, existing)

        logger.info("Recorded %s %s as %s on %s", person.person_type.value, person.person_id, event.status.value, today)
        return Accepted(event=event, person=person)

    def events_on(self, calendar_date: str, person_type: Optional[PersonType] = None) -> Sequence[AttendanceEvent]:
        return self._attendance.list_on(calendar_date, person_type)

    def events_between(
        self,
        start_date: str,
        end_date: str,
        person_type: Optional[PersonType] = None,
    ) -> Sequence[AttendanceEvent]:
        return self._attendance.list_between(start_date, end_date, person_type)

    def event_for(self, person_id: str, calendar_date: str) -> Optional[AttendanceEvent]:
        return self._attendance.get_for_person_and_date(person_id, calendar_date)

    @staticmethod
    def _already_recorded(person, existing: AttendanceEvent) -> Rejected:
        logger.warning("Rejected scan for %s: already recorded on %s", person.person_id, existing.calendar_date)
        return Rejected(reason=RejectReason.ALREADY_RECORDED, existing=existing, person=person)
