# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Person data access.
Ordered in-memory store of people, snapshotted to the key/value store
after every write. NO business rules here — pure CRUD.
"""

from typing import Optional

from roster.core.logging import get_logger
from roster.models.domain import Person
from roster.models.normalize import normalize_people
from roster.repositories.storage import KeyValueStore

logger = get_logger(__name__)


class PersonRepository:
    """People in insertion order, persisted under a single key."""

    def __init__(self, store: KeyValueStore, key: str) -> None:
        self._store = store
        self._key = key
        self._people: list[Person] = []

    # ── Read ──

    def get_all(self) -> list[Person]:
        return list(self._people)

    def get_by_id(self, person_id: str) -> Optional[Person]:
        for person in self._people:
            if person.id == person_id:
                return person
        return None

    def exists(self, person_id: str) -> bool:
        return self.get_by_id(person_id) is not None

    def count(self) -> int:
        return len(self._people)

    # ── Write ──

    def append(self, person: Person) -> None:
        self._people.append(person)
        self._persist()

    def replace(self, person: Person) -> bool:
        for idx, current in enumerate(self._people):
            if current.id == person.id:
                self._people[idx] = person
                self._persist()
                return True
        return False

    def delete(self, person_id: str) -> Optional[Person]:
        for idx, current in enumerate(self._people):
            if current.id == person_id:
                removed = self._people.pop(idx)
                self._persist()
                return removed
        return None

    # ── Persistence ──

    def load(self) -> int:
        """Replace contents with the stored snapshot. Returns the record count."""
        raw = self._store.load(self._key)
        if raw is not None and not isinstance(raw, list):
            logger.warning("Stored people under %s is not a list; starting empty", self._key)
        self._people = normalize_people(raw)
        return len(self._people)

    def _persist(self) -> None:
        self._store.save(self._key, [p.model_dump() for p in self._people])

    # ── Bulk / internal ──

    def clear(self) -> None:
        self._people.clear()
        self._persist()
