"""Example: use the service layer directly (no Flask, in-memory store).

Controllers are a thin layer; the business rules live in the services.
"""

from datetime import datetime
from types import SimpleNamespace

from school_attendance.common.datetime_utils import epoch_millis
from school_attendance.container import build_container
from school_attendance.core.enums import PersonType


def main():
    container = build_container(SimpleNamespace(STORAGE_BACKEND="memory", DEFAULT_START_TIME="08:00"))
    alice = container.roster_service.add_student(name="Alice", roll_number="1", grade="10", section="A")
    container.roster_service.add_student(name="Bob", roll_number="2", grade="10", section="A")

    outcome = container.attendance_ledger.ingest(alice.person_id, epoch_millis(datetime(2025, 1, 6, 7, 55)))
    print(outcome.message)

    again = container.attendance_ledger.ingest(alice.person_id, epoch_millis(datetime(2025, 1, 6, 9, 0)))
    print(again.message)

    partition = container.report_service.partition_for_day("2025-01-06", PersonType.STUDENT)
    print(partition.counts())


if __name__ == "__main__":
    main()
