from __future__ import annotations

import csv
import io
from collections import defaultdict
from typing import Optional

from ..attendance.service import AttendanceLedger
from ..classes.service import ClassService
from ..common.datetime_utils import date_range, format_iso_date, parse_iso_date
from ..common.validators import require_iso_date, require_positive_int
from ..core.constants import DEFAULT_REPORT_DAYS, MAX_REPORT_DAYS
from ..core.enums import AttendanceStatus, PersonType
from ..people.registry import IdentityRegistry
from ..people.repository import PersonRepository
from ..school.service import SchoolConfigService
from .model import DailyPartition, DailySummary


class AttendanceReportService:
    """Read-only aggregation over the roster and the attendance ledger."""

    def __init__(
        self,
        ledger: AttendanceLedger,
        registry: IdentityRegistry,
        people: PersonRepository,
        classes: ClassService,
        school: SchoolConfigService,
        *,
        report_days: int = DEFAULT_REPORT_DAYS,
    ):
        self._ledger = ledger
        self._registry = registry
        self._people = people
        self._classes = classes
        self._school = school
        self._report_days = int(report_days)

    def partition_for_day(self, calendar_date, person_type: PersonType) -> DailyPartition:
        day = require_iso_date(calendar_date, "Date")
        events = self._ledger.events_on(day, person_type)

        present = frozenset(e.person_id for e in events if e.status == AttendanceStatus.PRESENT)
        late = frozenset(e.person_id for e in events if e.status == AttendanceStatus.LATE)
        known = self._registry.known_ids(person_type)

        return DailyPartition(
            calendar_date=day,
            person_type=person_type,
            present=present,
            late=late,
            absent=known - present - late,
        )

    def historical_series(self, end_date, num_days: int, person_type: PersonType) -> list[DailySummary]:
        """Counts per status for ``num_days`` days ending at ``end_date``, oldest first.

        Past days are measured against today's roster size (no historical
        roster snapshots exist), so ``absent_count`` is clamped at zero.
        """

        end = parse_iso_date(require_iso_date(end_date, "End date"))
        num_days = require_positive_int(num_days, "Number of days", maximum=MAX_REPORT_DAYS)
        days = date_range(end, num_days)

        counts: dict[str, dict[AttendanceStatus, int]] = defaultdict(lambda: defaultdict(int))
        events = self._ledger.events_between(format_iso_date(days[0]), format_iso_date(end), person_type)
        for e in events:
            counts[e.calendar_date][e.status] += 1

        population = len(self._registry.known_ids(person_type))
        series: list[DailySummary] = []
        for d in days:
            key = format_iso_date(d)
            present = counts[key][AttendanceStatus.PRESENT]
            late = counts[key][AttendanceStatus.LATE]
            series.append(
                DailySummary(
                    calendar_date=key,
                    weekday=d.strftime("%a"),
                    present_count=present,
                    late_count=late,
                    absent_count=max(0, population - (present + late)),
                )
            )
        return series

    def day_rows(self, calendar_date, person_type: PersonType) -> list[dict]:
        """Display rows for everyone currently on the roster of one type."""

        day = require_iso_date(calendar_date, "Date")
        by_person = {e.person_id: e for e in self._ledger.events_on(day, person_type)}

        if person_type == PersonType.STUDENT:
            people = [
                (s.person_id, s.name, f"{s.roll_number} • {s.grade}".strip(" •"), s.avatar_url)
                for s in self._people.list_students()
            ]
        else:
            people = [(t.person_id, t.name, t.subject, t.avatar_url) for t in self._people.list_teachers()]

        rows = []
        for person_id, name, detail, avatar_url in people:
            event = by_person.get(person_id)
            rows.append(
                {
                    "person_id": person_id,
                    "name": name,
                    "detail": detail,
                    "avatar_url": avatar_url,
                    "status": event.status.value if event else "ABSENT",
                    "time": event.occurred_at.strftime("%H:%M") if event else None,
                    "note": (event.note or "") if event else "",
                }
            )
        return rows

    def dashboard(self, today, *, num_days: Optional[int] = None) -> dict:
        day = require_iso_date(today, "Date")
        students = self._people.list_students()
        partition = self.partition_for_day(day, PersonType.STUDENT)
        series = self.historical_series(day, num_days or self._report_days, PersonType.STUDENT)
        details = self._school.get_details()

        return {
            "date": day,
            "school_name": details.name,
            "start_time": details.start_time,
            "students": len(students),
            "teachers": len(self._people.list_teachers()),
            "classes": len(self._classes.list_classes()),
            "present_today": len(partition.attended),
            "late_today": len(partition.late),
            "absent_today": max(0, len(students) - len(partition.attended)),
            "series": [series_row(s) for s in series],
        }

    def series_csv(self, end_date, num_days: int, person_type: PersonType) -> bytes:
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=["date", "weekday", "present", "late", "absent"])
        writer.writeheader()
        for s in self.historical_series(end_date, num_days, person_type):
            writer.writerow(series_row(s))
        return out.getvalue().encode("utf-8-sig")


def series_row(s: DailySummary) -> dict:
    return {
        "date": s.calendar_date,
        "weekday": s.weekday,
        "present": s.present_count,
        "late": s.late_count,
        "absent": s.absent_count,
    }
