from __future__ import annotations

import logging
import uuid
from typing import Optional, Sequence

from ..common.validators import optional_text, require_non_empty
from ..core.constants import DEFAULT_CLASSES
from ..core.exceptions import NotFoundError
from .model import ClassSection
from .repository import ClassRepository

logger = logging.getLogger(__name__)


class ClassService:
    """Use case: manage the academic structure (grades and sections)."""

    def __init__(self, classes: ClassRepository):
        self._classes = classes

    def list_classes(self) -> Sequence[ClassSection]:
        return self._classes.list_all()

    def add_class(self, *, grade: str, section: str, class_teacher_id: Optional[str] = None) -> ClassSection:
        cls = ClassSection(
            class_id=str(uuid.uuid4()),
            grade=require_non_empty(grade, "Grade"),
            section=require_non_empty(section, "Section"),
            class_teacher_id=optional_text(class_teacher_id, "Class teacher") or None,
        )
        self._classes.add(cls)
        logger.info("Added class %s", cls.label)
        return cls

    def remove_class(self, class_id: str) -> None:
        if not self._classes.delete_by_id(class_id):
            raise NotFoundError("Class not found")
        logger.info("Removed class %s", class_id)

    def find_match(self, grade: str, section: Optional[str] = None) -> Optional[ClassSection]:
        """Match grade+section first, then grade alone."""

        classes = self._classes.list_all()
        for cls in classes:
            if cls.grade == grade and (not section or cls.section == section):
                return cls
        for cls in classes:
            if cls.grade == grade:
                return cls
        return None

    def ensure_defaults(self) -> None:
        if self._classes.list_all():
            return
        for grade, section in DEFAULT_CLASSES:
            self.add_class(grade=grade, section=section)
