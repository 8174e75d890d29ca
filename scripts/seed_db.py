"""Seed a demo school: profile, default classes and a few students/teachers."""

from __future__ import annotations

import importlib

from school_attendance.config import get_settings_module
from school_attendance.container import build_container

DEMO_STUDENTS = """\
Aarav Shah, 101, 10, A
Maya Cohen, 102, 11, Science
Leo Martins, 103, 12, Commerce
"""


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings)

    if container.school_repo.get() is None:
        container.school_service.update_details(
            name="Riverdale High",
            address="123 Riverdale Ln, New York",
            established_year="1998",
            start_time="08:00",
        )
    container.class_service.ensure_defaults()

    if not container.roster_service.list_students():
        container.roster_service.bulk_add_students(DEMO_STUDENTS)
    if not container.roster_service.list_teachers():
        container.roster_service.add_teacher(name="Grace Hopper", subject="Computer Science")

    print(
        "OK: Seeded demo school -> "
        f"students={len(container.roster_service.list_students())} "
        f"teachers={len(container.roster_service.list_teachers())} "
        f"classes={len(container.class_service.list_classes())}"
    )


if __name__ == "__main__":
    main()
