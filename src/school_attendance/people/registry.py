from __future__ import annotations

from typing import Optional

from ..core.enums import PersonType
from .model import Person
from .repository import PersonRepository


class IdentityRegistry:
    """Answers "who is this identifier, and what type are they".

    A miss is a normal outcome (``None``), never an exception: the caller
    branches on it.
    """

    def __init__(self, people: PersonRepository):
        self._people = people

    def resolve(self, identifier: Optional[str]) -> Optional[Person]:
        key = (identifier or "").strip()
        if not key:
            return None
        record = self._people.get_by_id(key)
        return record.as_person() if record else None

    def known_ids(self, person_type: PersonType) -> frozenset[str]:
        """Live snapshot of currently registered ids of one classification."""
        return self._people.ids_by_type(person_type)
