from __future__ import annotations

import re

from school_attendance.core.constants import MAX_START_TIME_LENGTH
from school_attendance.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use
from school_attendance.main import SCHEMA_PATH


def test_schema_ships_inside_the_package():
    assert SCHEMA_PATH.is_file()
    assert SCHEMA_PATH.parent.name == "database"
    assert SCHEMA_PATH.parent.parent.name == "school_attendance"


def test_schema_statements():
    sql = _strip_create_db_and_use(SCHEMA_PATH.read_text(encoding="utf-8"))
    statements = list(_iter_sql_statements(sql))

    assert all(s.upper().startswith("CREATE TABLE IF NOT EXISTS") for s in statements)
    assert any("uq_attendance_person_day" in s for s in statements)


def test_start_time_column_fits_accepted_values():
    sql = SCHEMA_PATH.read_text(encoding="utf-8")
    width = int(re.search(r"start_time VARCHAR\((\d+)\)", sql).group(1))

    assert width >= MAX_START_TIME_LENGTH
