from __future__ import annotations

import csv
import io
from datetime import date, datetime

import pytest

from school_attendance.common.datetime_utils import epoch_millis
from school_attendance.core.enums import PersonType
from school_attendance.core.exceptions import ValidationError


def ms(*args) -> int:
    return epoch_millis(datetime(*args))


@pytest.fixture()
def roster(container):
    s1 = container.roster_service.add_student(name="S1", roll_number="1", grade="10", section="A")
    s2 = container.roster_service.add_student(name="S2", roll_number="2", grade="10", section="A")
    t1 = container.roster_service.add_teacher(name="T1", subject="Physics")
    return s1, s2, t1


def test_partition_for_day(container, roster):
    s1, s2, t1 = roster
    container.attendance_ledger.ingest(s1.person_id, ms(2026, 2, 2, 7, 55))
    container.attendance_ledger.ingest(t1.person_id, ms(2026, 2, 2, 8, 10))

    students = container.report_service.partition_for_day("2026-02-02", PersonType.STUDENT)
    teachers = container.report_service.partition_for_day(date(2026, 2, 2), PersonType.TEACHER)

    assert students.present == {s1.person_id}
    assert students.late == frozenset()
    assert students.absent == {s2.person_id}
    assert teachers.late == {t1.person_id}
    assert teachers.counts() == {"present": 0, "late": 1, "absent": 0}


def test_partition_keeps_attendees_removed_from_roster(container, roster):
    s1, s2, _ = roster
    container.attendance_ledger.ingest(s1.person_id, ms(2026, 2, 2, 7, 55))
    container.roster_service.remove_person(s1.person_id)

    partition = container.report_service.partition_for_day("2026-02-02", PersonType.STUDENT)

    assert partition.present == {s1.person_id}
    assert partition.absent == {s2.person_id}
    assert partition.attended == {s1.person_id}


def test_partition_rejects_bad_date(container):
    with pytest.raises(ValidationError):
        container.report_service.partition_for_day("02/02/2026", PersonType.STUDENT)


def test_historical_series_is_oldest_first(container, roster):
    s1, s2, _ = roster
    ledger = container.attendance_ledger
    ledger.ingest(s1.person_id, ms(2026, 1, 31, 7, 0))
    ledger.ingest(s1.person_id, ms(2026, 2, 2, 7, 0))
    ledger.ingest(s2.person_id, ms(2026, 2, 2, 9, 0))

    series = container.report_service.historical_series("2026-02-02", 3, PersonType.STUDENT)

    assert [s.calendar_date for s in series] == ["2026-01-31", "2026-02-01", "2026-02-02"]
    assert [s.weekday for s in series] == ["Sat", "Sun", "Mon"]
    assert [(s.present_count, s.late_count, s.absent_count) for s in series] == [
        (1, 0, 1),
        (0, 0, 2),
        (1, 1, 0),
    ]
    assert series[-1].total_recorded == 2


def test_historical_series_single_day(container, roster):
    series = container.report_service.historical_series(date(2026, 2, 2), 1, PersonType.TEACHER)

    assert len(series) == 1
    assert series[0].absent_count == 1


def test_historical_series_clamps_absent_at_zero(container, roster):
    s1, s2, _ = roster
    container.attendance_ledger.ingest(s1.person_id, ms(2026, 2, 1, 7, 0))
    container.attendance_ledger.ingest(s2.person_id, ms(2026, 2, 1, 7, 0))
    container.roster_service.remove_person(s1.person_id)
    container.roster_service.remove_person(s2.person_id)

    series = container.report_service.historical_series("2026-02-01", 1, PersonType.STUDENT)

    assert series[0].present_count == 2
    assert series[0].absent_count == 0


@pytest.mark.parametrize("num_days", [0, -3, 367, "seven"])
def test_historical_series_rejects_out_of_range_window(container, num_days):
    with pytest.raises(ValidationError):
        container.report_service.historical_series("2026-02-02", num_days, PersonType.STUDENT)


def test_day_rows_mark_absent_people(container, roster):
    s1, s2, _ = roster
    container.attendance_ledger.ingest(s1.person_id, ms(2026, 2, 2, 8, 5))

    rows = {r["person_id"]: r for r in container.report_service.day_rows("2026-02-02", PersonType.STUDENT)}

    assert rows[s1.person_id]["status"] == "LATE"
    assert rows[s1.person_id]["time"] == "08:05"
    assert rows[s1.person_id]["note"] == "Late by 5 min"
    assert rows[s2.person_id]["status"] == "ABSENT"
    assert rows[s2.person_id]["time"] is None
    assert rows[s2.person_id]["detail"] == "2 • 10"


def test_dashboard_counts(container, roster):
    s1, _, _ = roster
    container.class_service.ensure_defaults()
    container.attendance_ledger.ingest(s1.person_id, ms(2026, 2, 2, 8, 5))

    dash = container.report_service.dashboard("2026-02-02")

    assert dash["students"] == 2
    assert dash["teachers"] == 1
    assert dash["classes"] == 3
    assert dash["present_today"] == 1
    assert dash["late_today"] == 1
    assert dash["absent_today"] == 1
    assert dash["start_time"] == "08:00"
    assert len(dash["series"]) == 7
    assert dash["series"][-1] == {"date": "2026-02-02", "weekday": "Mon", "present": 0, "late": 1, "absent": 1}


def test_series_csv_has_bom_and_header(container, roster):
    s1, _, _ = roster
    container.attendance_ledger.ingest(s1.person_id, ms(2026, 2, 2, 7, 0))

    data = container.report_service.series_csv("2026-02-02", 2, PersonType.STUDENT)

    assert data.startswith(b"\xef\xbb\xbf")
    rows = list(csv.reader(io.StringIO(data.decode("utf-8-sig"))))
    assert rows[0] == ["date", "weekday", "present", "late", "absent"]
    assert rows[1:] == [["2026-02-01", "Sun", "0", "0", "2"], ["2026-02-02", "Mon", "1", "0", "1"]]
