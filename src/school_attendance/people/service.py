from __future__ import annotations

import logging
import uuid
from typing import Callable, Optional, Sequence, Union
from urllib.parse import quote

from ..classes.service import ClassService
from ..common.datetime_utils import now_millis
from ..common.validators import optional_text, require_non_empty
from ..core.constants import AVATAR_URL_TEMPLATE, DEFAULT_SECTION
from ..core.exceptions import NotFoundError
from .model import Student, Teacher
from .repository import PersonRepository

logger = logging.getLogger(__name__)


def default_avatar_url(name: str) -> str:
    return AVATAR_URL_TEMPLATE.format(name=quote(name))


class RosterService:
    """Use case: register and remove students/teachers (admin).

    Identifiers are generated here once and never reused; they are what the
    printed QR card encodes.
    """

    def __init__(
        self,
        people: PersonRepository,
        classes: ClassService,
        *,
        clock: Callable[[], int] = now_millis,
    ):
        self._people = people
        self._classes = classes
        self._clock = clock

    def get(self, person_id: str) -> Union[Student, Teacher]:
        record = self._people.get_by_id(person_id)
        if not record:
            raise NotFoundError("Person not found")
        return record

    def list_students(self) -> Sequence[Student]:
        return self._people.list_students()

    def list_teachers(self) -> Sequence[Teacher]:
        return self._people.list_teachers()

    def add_student(
        self,
        *,
        name: str,
        roll_number: str,
        grade: str = "",
        section: str = "",
        parent_name: str = "",
        parent_contact: str = "",
        dob: str = "",
        blood_group: str = "",
        address: str = "",
        avatar_url: str = "",
    ) -> Student:
        name = require_non_empty(name, "Name")
        student = Student(
            person_id=str(uuid.uuid4()),
            name=name,
            roll_number=require_non_empty(roll_number, "Roll number"),
            grade=optional_text(grade, "Grade"),
            section=optional_text(section, "Section"),
            created_at_ms=self._clock(),
            parent_name=optional_text(parent_name, "Parent name"),
            parent_contact=optional_text(parent_contact, "Parent contact"),
            dob=optional_text(dob, "Date of birth"),
            blood_group=optional_text(blood_group, "Blood group"),
            address=optional_text(address, "Address"),
            avatar_url=optional_text(avatar_url, "Avatar URL") or default_avatar_url(name),
        )
        self._people.add_student(student)
        logger.info("Registered student %s (%s)", student.name, student.person_id)
        return student

    def add_teacher(
        self,
        *,
        name: str,
        subject: str = "",
        contact: str = "",
        email: str = "",
        qualification: str = "",
        avatar_url: str = "",
    ) -> Teacher:
        name = require_non_empty(name, "Name")
        teacher = Teacher(
            person_id=str(uuid.uuid4()),
            name=name,
            created_at_ms=self._clock(),
            subject=optional_text(subject, "Subject"),
            contact=optional_text(contact, "Contact"),
            email=optional_text(email, "Email"),
            qualification=optional_text(qualification, "Qualification"),
            avatar_url=optional_text(avatar_url, "Avatar URL") or default_avatar_url(name),
        )
        self._people.add_teacher(teacher)
        logger.info("Registered teacher %s (%s)", teacher.name, teacher.person_id)
        return teacher

    def bulk_add_students(self, text: Optional[str]) -> list[Student]:
        """Add one student per line: ``Name, RollNo, Grade[, Section]``.

        Lines with fewer than three fields, or a blank name/roll number, are
        skipped. Grade and section are matched against the class list.
        """

        added: list[Student] = []
        for line in optional_text(text, "Text").splitlines():
            parts = [p.strip() for p in line.split(",")]
            if len(parts) < 3:
                continue
            name, roll, grade = parts[0], parts[1], parts[2]
            section = parts[3] if len(parts) > 3 else ""
            if not name or not roll:
                continue

            cls = self._classes.find_match(grade, section)
            added.append(
                self.add_student(
                    name=name,
                    roll_number=roll,
                    grade=f"Class {cls.grade if cls else grade}",
                    section=cls.section if cls else (section or DEFAULT_SECTION),
                )
            )

        logger.info("Bulk import added %d students", len(added))
        return added

    def remove_person(self, person_id: str) -> None:
        # Ledger events for this person stay; only the roster entry goes.
        if not self._people.delete_by_id(person_id):
            raise NotFoundError("Person not found")
        logger.info("Removed person %s from roster", person_id)
