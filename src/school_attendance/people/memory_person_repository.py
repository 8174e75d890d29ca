from __future__ import annotations

from typing import Optional, Sequence, Union

from ..core.enums import PersonType
from .model import Student, Teacher
from .repository import PersonRepository


class InMemoryPersonRepository(PersonRepository):
    def __init__(self):
        self._students: dict[str, Student] = {}
        self._teachers: dict[str, Teacher] = {}

    def get_by_id(self, person_id: str) -> Optional[Union[Student, Teacher]]:
        return self._students.get(person_id) or self._teachers.get(person_id)

    def list_students(self) -> Sequence[Student]:
        return list(self._students.values())

    def list_teachers(self) -> Sequence[Teacher]:
        return list(self._teachers.values())

    def ids_by_type(self, person_type: PersonType) -> frozenset[str]:
        if person_type == PersonType.STUDENT:
            return frozenset(self._students)
        return frozenset(self._teachers)

    def add_student(self, student: Student) -> None:
        self._students[student.person_id] = student

    def add_teacher(self, teacher: Teacher) -> None:
        self._teachers[teacher.person_id] = teacher

    def delete_by_id(self, person_id: str) -> bool:
        removed = self._students.pop(person_id, None) or self._teachers.pop(person_id, None)
        return removed is not None
