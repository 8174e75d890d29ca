from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import SchoolDetails
from .repository import SchoolRepository

_SINGLETON_ID = 1


class MySQLSchoolRepository(SchoolRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self) -> Optional[SchoolDetails]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT name, address, established_year, logo_url, start_time
                FROM school_details
                WHERE school_id=%s
                """,
                (_SINGLETON_ID,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return SchoolDetails(
                name=row["name"],
                address=row.get("address") or "",
                established_year=row.get("established_year") or "",
                logo_url=row.get("logo_url") or "",
                start_time=row.get("start_time") or "",
            )

    def save(self, details: SchoolDetails) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO school_details(school_id, name, address, established_year, logo_url, start_time)
                VALUES(%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    name=VALUES(name), address=VALUES(address), established_year=VALUES(established_year),
                    logo_url=VALUES(logo_url), start_time=VALUES(start_time)
                """,
                (
                    _SINGLETON_ID,
                    details.name,
                    details.address,
                    details.established_year,
                    details.logo_url,
                    details.start_time,
                ),
            )
