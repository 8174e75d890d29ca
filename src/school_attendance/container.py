from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .attendance.factory import AttendanceStrategyFactory
from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceLedger
from .cards.service import CardService
from .classes.memory_class_repository import InMemoryClassRepository
from .classes.mysql_class_repository import MySQLClassRepository
from .classes.repository import ClassRepository
from .classes.service import ClassService
from .core.constants import DEFAULT_LATE_GRACE_MINUTES, DEFAULT_REPORT_DAYS, DEFAULT_START_TIME
from .database.connection import DBConfig, DatabaseConnection
from .people.memory_person_repository import InMemoryPersonRepository
from .people.mysql_person_repository import MySQLPersonRepository
from .people.registry import IdentityRegistry
from .people.repository import PersonRepository
from .people.service import RosterService
from .reports.service import AttendanceReportService
from .school.memory_school_repository import InMemorySchoolRepository
from .school.mysql_school_repository import MySQLSchoolRepository
from .school.repository import SchoolRepository
from .school.service import SchoolConfigService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    people_repo: PersonRepository
    classes_repo: ClassRepository
    school_repo: SchoolRepository
    attendance_repo: AttendanceRepository

    registry: IdentityRegistry
    roster_service: RosterService
    class_service: ClassService
    school_service: SchoolConfigService
    attendance_ledger: AttendanceLedger
    report_service: AttendanceReportService
    card_service: CardService


def build_container(settings: Any) -> Container:
    """Wire repositories and services from a settings module (or any object with the same attributes)."""

    backend = str(getattr(settings, "STORAGE_BACKEND", "mysql")).lower()
    conn: Optional[DatabaseConnection] = None

    if backend == "memory":
        people_repo = InMemoryPersonRepository()
        classes_repo = InMemoryClassRepository()
        school_repo = InMemorySchoolRepository()
        attendance_repo = InMemoryAttendanceRepository()
    elif backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
        people_repo = MySQLPersonRepository(conn)
        classes_repo = MySQLClassRepository(conn)
        school_repo = MySQLSchoolRepository(conn)
        attendance_repo = MySQLAttendanceRepository(conn)
    else:
        raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")

    registry = IdentityRegistry(people_repo)
    class_service = ClassService(classes_repo)
    roster_service = RosterService(people_repo, class_service)
    school_service = SchoolConfigService(
        school_repo,
        default_start_time=getattr(settings, "DEFAULT_START_TIME", DEFAULT_START_TIME),
    )
    attendance_ledger = AttendanceLedger(
        attendance_repo,
        registry,
        school_service,
        strategy_factory=AttendanceStrategyFactory(),
        grace_minutes=int(getattr(settings, "LATE_GRACE_MINUTES", DEFAULT_LATE_GRACE_MINUTES)),
    )
    report_service = AttendanceReportService(
        attendance_ledger,
        registry,
        people_repo,
        class_service,
        school_service,
        report_days=int(getattr(settings, "REPORT_DAYS", DEFAULT_REPORT_DAYS)),
    )
    card_service = CardService(roster_service, school_service)

    return Container(
        conn=conn,
        people_repo=people_repo,
        classes_repo=classes_repo,
        school_repo=school_repo,
        attendance_repo=attendance_repo,
        registry=registry,
        roster_service=roster_service,
        class_service=class_service,
        school_service=school_service,
        attendance_ledger=attendance_ledger,
        report_service=report_service,
        card_service=card_service,
    )
