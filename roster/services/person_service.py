# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Person management — business logic for roster CRUD.
"""

from typing import Any, Optional

from roster.core.logging import get_logger
from roster.metrics.prometheus import PEOPLE_TOTAL
from roster.models.domain import Person
from roster.models.normalize import clamp_power
from roster.repositories.person_repository import PersonRepository
from roster.services.ids import new_id
from roster.services.membership_service import MembershipService

logger = get_logger(__name__)


class PersonService:
    """Business logic for people on the roster."""

    def __init__(
        self,
        person_repo: PersonRepository,
        membership: MembershipService,
    ) -> None:
        self._people = person_repo
        self._membership = membership

    # ── Commands ──

    def add(self, name: Optional[str] = None, power: Any = None) -> str:
        """
        Add a person and return the new id.

        An empty name becomes ``Person #<n>`` where ``n`` is the position the
        person will occupy, so default names can repeat after removals.
        """
        final_name = (name or "").strip()
        if final_name == "":
            final_name = f"Person #{self._people.count() + 1}"
        person = Person(id=new_id(), name=final_name, power=clamp_power(power))
        self._people.append(person)
        PEOPLE_TOTAL.set(self._people.count())
        logger.info("Person added: id=%s, power=%d", person.id, person.power)
        return person.id

    def update(self, person_id: str, name: str, power: Any = None) -> Optional[Person]:
        """Replace name, and power only when given. Unknown ids are ignored."""
        current = self._people.get_by_id(person_id)
        if current is None:
            return None
        updated = Person(
            id=person_id,
            name=(name or "").strip(),
            power=clamp_power(power) if power is not None else current.power,
        )
        self._people.replace(updated)
        return updated

    def remove(self, person_id: str) -> bool:
        """
        Remove a person, first dropping them from every team.
        Returns whether any team membership changed. Idempotent.
        """
        changed = self._membership.remove_member_everywhere(person_id)
        removed = self._people.delete(person_id)
        if removed is not None:
            PEOPLE_TOTAL.set(self._people.count())
            logger.info("Person removed: id=%s", person_id)
        return changed

    # ── Queries ──

    def list(self) -> list[Person]:
        return self._people.get_all()

    def get(self, person_id: str) -> Optional[Person]:
        return self._people.get_by_id(person_id)

    def count(self) -> int:
        return self._people.count()
