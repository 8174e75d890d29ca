from __future__ import annotations

from typing import Protocol, Sequence

from .model import ClassSection


class ClassRepository(Protocol):
    def list_all(self) -> Sequence[ClassSection]:
        raise NotImplementedError

    def add(self, cls: ClassSection) -> None:
        raise NotImplementedError

    def delete_by_id(self, class_id: str) -> bool:
        raise NotImplementedError
