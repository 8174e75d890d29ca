from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ClassSection:
    """Thực thể miền (domain): Lớp học (grade + section)."""

    class_id: str
    grade: str
    section: str
    class_teacher_id: Optional[str] = None

    @property
    def label(self) -> str:
        return f"{self.grade} - {self.section}"
