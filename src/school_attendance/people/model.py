from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import PersonType


@dataclass(frozen=True)
class Person:
    """Identity view used by the attendance core.

    The identifier is the exact string encoded in the person's QR card.
    """

    person_id: str
    person_type: PersonType
    display_name: str


@dataclass(frozen=True)
class Student:
    """Thực thể miền (domain): Học sinh."""

    person_id: str
    name: str
    roll_number: str
    grade: str
    section: str
    created_at_ms: int
    parent_name: str = ""
    parent_contact: str = ""
    dob: str = ""
    blood_group: str = ""
    address: str = ""
    avatar_url: str = ""

    def as_person(self) -> Person:
        return Person(person_id=self.person_id, person_type=PersonType.STUDENT, display_name=self.name)


@dataclass(frozen=True)
class Teacher:
    """Thực thể miền (domain): Giáo viên."""

    person_id: str
    name: str
    created_at_ms: int
    subject: str = ""
    contact: str = ""
    email: str = ""
    qualification: str = ""
    avatar_url: str = ""

    def as_person(self) -> Person:
        return Person(person_id=self.person_id, person_type=PersonType.TEACHER, display_name=self.name)
