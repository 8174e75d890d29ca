from __future__ import annotations

from typing import Optional, Sequence, Union

from ..core.enums import PersonType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Student, Teacher
from .repository import PersonRepository

_STUDENT_COLUMNS = (
    "person_id, name, roll_number, grade, section, parent_name, parent_contact, "
    "dob, blood_group, address, avatar_url, created_at_ms"
)
_TEACHER_COLUMNS = "person_id, name, subject, contact, email, qualification, avatar_url, created_at_ms"


def _to_student(row: dict) -> Student:
    return Student(
        person_id=row["person_id"],
        name=row["name"],
        roll_number=row["roll_number"],
        grade=row.get("grade") or "",
        section=row.get("section") or "",
        created_at_ms=int(row["created_at_ms"]),
        parent_name=row.get("parent_name") or "",
        parent_contact=row.get("parent_contact") or "",
        dob=row.get("dob") or "",
        blood_group=row.get("blood_group") or "",
        address=row.get("address") or "",
        avatar_url=row.get("avatar_url") or "",
    )


def _to_teacher(row: dict) -> Teacher:
    return Teacher(
        person_id=row["person_id"],
        name=row["name"],
        created_at_ms=int(row["created_at_ms"]),
        subject=row.get("subject") or "",
        contact=row.get("contact") or "",
        email=row.get("email") or "",
        qualification=row.get("qualification") or "",
        avatar_url=row.get("avatar_url") or "",
    )


class MySQLPersonRepository(PersonRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, person_id: str) -> Optional[Union[Student, Teacher]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_STUDENT_COLUMNS} FROM students WHERE person_id=%s", (person_id,))
            row = fetchone(cur)
            if row:
                return _to_student(row)

            cur.execute(f"SELECT {_TEACHER_COLUMNS} FROM teachers WHERE person_id=%s", (person_id,))
            row = fetchone(cur)
            return _to_teacher(row) if row else None

    def list_students(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_STUDENT_COLUMNS} FROM students ORDER BY created_at_ms")
            return [_to_student(r) for r in fetchall(cur)]

    def list_teachers(self) -> Sequence[Teacher]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_TEACHER_COLUMNS} FROM teachers ORDER BY created_at_ms")
            return [_to_teacher(r) for r in fetchall(cur)]

    def ids_by_type(self, person_type: PersonType) -> frozenset[str]:
        table = "students" if person_type == PersonType.STUDENT else "teachers"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT person_id FROM {table}")
            return frozenset(r["person_id"] for r in fetchall(cur))

    def add_student(self, student: Student) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO students({_STUDENT_COLUMNS})
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    name=VALUES(name), roll_number=VALUES(roll_number), grade=VALUES(grade),
                    section=VALUES(section), parent_name=VALUES(parent_name),
                    parent_contact=VALUES(parent_contact), dob=VALUES(dob),
                    blood_group=VALUES(blood_group), address=VALUES(address),
                    avatar_url=VALUES(avatar_url)
                """,
                (
                    student.person_id,
                    student.name,
                    student.roll_number,
                    student.grade,
                    student.section,
                    student.parent_name,
                    student.parent_contact,
                    student.dob,
                    student.blood_group,
                    student.address,
                    student.avatar_url,
                    student.created_at_ms,
                ),
            )

    def add_teacher(self, teacher: Teacher) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO teachers({_TEACHER_COLUMNS})
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    name=VALUES(name), subject=VALUES(subject), contact=VALUES(contact),
                    email=VALUES(email), qualification=VALUES(qualification),
                    avatar_url=VALUES(avatar_url)
                """,
                (
                    teacher.person_id,
                    teacher.name,
                    teacher.subject,
                    teacher.contact,
                    teacher.email,
                    teacher.qualification,
                    teacher.avatar_url,
                    teacher.created_at_ms,
                ),
            )

    def delete_by_id(self, person_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE person_id=%s", (person_id,))
            deleted = cur.rowcount
            cur.execute("DELETE FROM teachers WHERE person_id=%s", (person_id,))
            return (deleted + cur.rowcount) > 0
