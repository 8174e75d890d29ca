from __future__ import annotations

from typing import Optional

from .model import SchoolDetails
from .repository import SchoolRepository


class InMemorySchoolRepository(SchoolRepository):
    def __init__(self, details: Optional[SchoolDetails] = None):
        self._details = details

    def get(self) -> Optional[SchoolDetails]:
        return self._details

    def save(self, details: SchoolDetails) -> None:
        self._details = details
