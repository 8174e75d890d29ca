from __future__ import annotations

import pytest

from school_attendance.core.enums import PersonType
from school_attendance.core.exceptions import NotFoundError, ValidationError


def test_add_student_generates_id_and_avatar(container):
    student = container.roster_service.add_student(name="  Ana Lopez ", roll_number="7", grade="10", section="A")

    assert student.name == "Ana Lopez"
    assert len(student.person_id) == 36
    assert student.avatar_url.startswith("https://ui-avatars.com/api/?name=Ana%20Lopez")
    assert container.roster_service.get(student.person_id) == student


def test_ids_are_never_reused(container):
    a = container.roster_service.add_student(name="A", roll_number="1")
    container.roster_service.remove_person(a.person_id)
    b = container.roster_service.add_student(name="A", roll_number="1")

    assert a.person_id != b.person_id


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "", "roll_number": "1"},
        {"name": "   ", "roll_number": "1"},
        {"name": "Ana", "roll_number": ""},
    ],
)
def test_add_student_requires_name_and_roll(container, kwargs):
    with pytest.raises(ValidationError):
        container.roster_service.add_student(**kwargs)

    assert container.roster_service.list_students() == []


def test_add_teacher(container):
    teacher = container.roster_service.add_teacher(name="Mr. Smith", subject="Physics", email="s@example.org")

    assert container.roster_service.list_teachers() == [teacher]
    assert container.registry.resolve(teacher.person_id).person_type == PersonType.TEACHER


def test_bulk_add_matches_classes(container):
    container.class_service.ensure_defaults()
    text = "\n".join(
        [
            "Ana, 1, 10, A",
            "Ben, 2, 11",
            "Cara, 3, 9, B",
            "Dan, 4",
            ", 5, 10",
            "",
            "Eve, 6, 12, Arts",
        ]
    )

    added = container.roster_service.bulk_add_students(text)

    assert [(s.name, s.roll_number, s.grade, s.section) for s in added] == [
        ("Ana", "1", "Class 10", "A"),
        ("Ben", "2", "Class 11", "Science"),
        ("Cara", "3", "Class 9", "B"),
        ("Eve", "6", "Class 12", "Commerce"),
    ]
    assert len(container.roster_service.list_students()) == 4


def test_bulk_add_defaults_section(container):
    added = container.roster_service.bulk_add_students("Ana, 1, 8")

    assert added[0].grade == "Class 8"
    assert added[0].section == "A"


def test_remove_person_keeps_history_out_of_roster(container):
    s1 = container.roster_service.add_student(name="S1", roll_number="1")

    container.roster_service.remove_person(s1.person_id)

    assert container.registry.resolve(s1.person_id) is None
    with pytest.raises(NotFoundError):
        container.roster_service.get(s1.person_id)


def test_remove_unknown_person(container):
    with pytest.raises(NotFoundError):
        container.roster_service.remove_person("missing")


def test_registry_resolve_and_known_ids(container):
    s1 = container.roster_service.add_student(name="S1", roll_number="1")
    t1 = container.roster_service.add_teacher(name="T1")

    person = container.registry.resolve(f" {s1.person_id} ")

    assert person.person_id == s1.person_id
    assert person.person_type == PersonType.STUDENT
    assert person.display_name == "S1"
    assert container.registry.resolve("") is None
    assert container.registry.resolve(None) is None
    assert container.registry.resolve("unknown") is None
    assert container.registry.known_ids(PersonType.STUDENT) == {s1.person_id}
    assert container.registry.known_ids(PersonType.TEACHER) == {t1.person_id}
