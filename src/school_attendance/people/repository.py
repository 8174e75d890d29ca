from __future__ import annotations

from typing import Optional, Protocol, Sequence, Union

from ..core.enums import PersonType
from .model import Student, Teacher


class PersonRepository(Protocol):
    """Repository interface for the roster (students and teachers).

    Note (DIP): services depend on this interface, never on a concrete database.
    """

    def get_by_id(self, person_id: str) -> Optional[Union[Student, Teacher]]:
        raise NotImplementedError

    def list_students(self) -> Sequence[Student]:
        raise NotImplementedError

    def list_teachers(self) -> Sequence[Teacher]:
        raise NotImplementedError

    def ids_by_type(self, person_type: PersonType) -> frozenset[str]:
        raise NotImplementedError

    def add_student(self, student: Student) -> None:
        raise NotImplementedError

    def add_teacher(self, teacher: Teacher) -> None:
        raise NotImplementedError

    def delete_by_id(self, person_id: str) -> bool:
        raise NotImplementedError
