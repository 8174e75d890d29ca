from __future__ import annotations

from typing import Sequence

from .model import ClassSection
from .repository import ClassRepository


class InMemoryClassRepository(ClassRepository):
    def __init__(self):
        self._classes: dict[str, ClassSection] = {}

    def list_all(self) -> Sequence[ClassSection]:
        return list(self._classes.values())

    def add(self, cls: ClassSection) -> None:
        self._classes[cls.class_id] = cls

    def delete_by_id(self, class_id: str) -> bool:
        return self._classes.pop(class_id, None) is not None
