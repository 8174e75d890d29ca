from __future__ import annotations

from typing import Optional, Protocol

from .model import SchoolDetails


class SchoolRepository(Protocol):
    def get(self) -> Optional[SchoolDetails]:
        raise NotImplementedError

    def save(self, details: SchoolDetails) -> None:
        raise NotImplementedError
