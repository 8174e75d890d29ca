from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import ClassSection
from .repository import ClassRepository


class MySQLClassRepository(ClassRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[ClassSection]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT class_id, grade, section, class_teacher_id
                FROM class_sections
                ORDER BY grade, section
                """
            )
            return [
                ClassSection(
                    class_id=r["class_id"],
                    grade=r["grade"],
                    section=r["section"],
                    class_teacher_id=r.get("class_teacher_id"),
                )
                for r in fetchall(cur)
            ]

    def add(self, cls: ClassSection) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO class_sections(class_id, grade, section, class_teacher_id)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    grade=VALUES(grade), section=VALUES(section), class_teacher_id=VALUES(class_teacher_id)
                """,
                (cls.class_id, cls.grade, cls.section, cls.class_teacher_id),
            )

    def delete_by_id(self, class_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM class_sections WHERE class_id=%s", (class_id,))
            return cur.rowcount > 0
