"""Whole-store load/save as a JSON-friendly dict (backup, restore, migration).

Round-trips every stored field of the school profile, classes, students,
teachers and the attendance log.
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import TYPE_CHECKING

from ..attendance.model import AttendanceEvent
from ..classes.model import ClassSection
from ..core.enums import AttendanceStatus, PersonType
from ..core.exceptions import DuplicateAttendanceError, ValidationError
from ..people.model import Student, Teacher
from ..school.model import SchoolDetails

if TYPE_CHECKING:
    from ..container import Container

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1


def _event_to_dict(e: AttendanceEvent) -> dict:
    data = asdict(e)
    data["person_type"] = e.person_type.value
    data["status"] = e.status.value
    return data


def _event_from_dict(data: dict) -> AttendanceEvent:
    return AttendanceEvent(
        event_id=str(data["event_id"]),
        person_id=str(data["person_id"]),
        person_type=PersonType(data["person_type"]),
        status=AttendanceStatus(data["status"]),
        occurred_at_ms=int(data["occurred_at_ms"]),
        calendar_date=str(data["calendar_date"]),
        note=data.get("note"),
    )


def export_snapshot(container: "Container") -> dict:
    school = container.school_repo.get()
    return {
        "version": SNAPSHOT_VERSION,
        "school": asdict(school) if school else None,
        "classes": [asdict(c) for c in container.classes_repo.list_all()],
        "students": [asdict(s) for s in container.people_repo.list_students()],
        "teachers": [asdict(t) for t in container.people_repo.list_teachers()],
        "attendance": [_event_to_dict(e) for e in container.attendance_repo.list_all()],
    }


def import_snapshot(container: "Container", data: dict) -> dict:
    """Load a snapshot into the configured store.

    Roster, classes and school are upserted. Events are appended; an event for
    a person-day that already has one is skipped, so the one-event-per-day
    rule still holds after a merge.
    """

    if not isinstance(data, dict) or data.get("version") != SNAPSHOT_VERSION:
        raise ValidationError("Unsupported snapshot format")

    try:
        if data.get("school"):
            container.school_repo.save(SchoolDetails(**data["school"]))
        for item in data.get("classes", []):
            container.classes_repo.add(ClassSection(**item))
        for item in data.get("students", []):
            container.people_repo.add_student(Student(**item))
        for item in data.get("teachers", []):
            container.people_repo.add_teacher(Teacher(**item))
        events = [_event_from_dict(item) for item in data.get("attendance", [])]
    except (TypeError, KeyError, ValueError) as e:
        raise ValidationError(f"Malformed snapshot: {e}") from e

    imported = skipped = 0
    for event in events:
        try:
            container.attendance_repo.append(event)
            imported += 1
        except DuplicateAttendanceError:
            skipped += 1

    summary = {
        "classes": len(data.get("classes", [])),
        "students": len(data.get("students", [])),
        "teachers": len(data.get("teachers", [])),
        "events_imported": imported,
        "events_skipped": skipped,
    }
    logger.info("Imported snapshot: %s", summary)
    return summary
