from __future__ import annotations

from typing import Optional, Sequence

import mysql.connector

from ..core.enums import AttendanceStatus, PersonType
from ..core.exceptions import DuplicateAttendanceError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_iso_date, db_cursor, fetchall, fetchone
from .model import AttendanceEvent
from .repository import AttendanceRepository

_COLUMNS = "event_id, person_id, person_type, status, occurred_at_ms, calendar_date, note"


def _to_event(r: dict) -> AttendanceEvent:
    return AttendanceEvent(
        event_id=r["event_id"],
        person_id=r["person_id"],
        person_type=PersonType(r["person_type"]),
        status=AttendanceStatus(r["status"]),
        occurred_at_ms=int(r["occurred_at_ms"]),
        calendar_date=as_iso_date(r["calendar_date"]),
        note=r.get("note"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_person_and_date(self, person_id: str, calendar_date: str) -> Optional[AttendanceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_events
                WHERE person_id=%s AND calendar_date=%s
                """,
                (person_id, calendar_date),
            )
            r = fetchone(cur)
            return _to_event(r) if r else None

    def append(self, event: AttendanceEvent) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"""
                    INSERT INTO attendance_events({_COLUMNS})
                    VALUES(%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        event.event_id,
                        event.person_id,
                        event.person_type.value,
                        event.status.value,
                        event.occurred_at_ms,
                        event.calendar_date,
                        event.note,
                    ),
                )
        except mysql.connector.IntegrityError as e:
            # uq_attendance_person_day: another process recorded this person first.
            raise DuplicateAttendanceError(str(e)) from e

    def list_on(self, calendar_date: str, person_type: Optional[PersonType] = None) -> Sequence[AttendanceEvent]:
        return self.list_between(calendar_date, calendar_date, person_type)

    def list_between(
        self,
        start_date: str,
        end_date: str,
        person_type: Optional[PersonType] = None,
    ) -> Sequence[AttendanceEvent]:
        sql = f"SELECT {_COLUMNS} FROM attendance_events WHERE calendar_date BETWEEN %s AND %s"
        params: list = [start_date, end_date]
        if person_type is not None:
            sql += " AND person_type=%s"
            params.append(person_type.value)
        sql += " ORDER BY occurred_at_ms"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_to_event(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[AttendanceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_events ORDER BY occurred_at_ms")
            return [_to_event(r) for r in fetchall(cur)]
