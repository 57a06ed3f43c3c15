# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Roster context — one explicitly constructed object holding the shared
repositories and services, handed to whichever layer needs them.
"""

import random
from dataclasses import dataclass
from typing import Optional

from roster.core.config import settings
from roster.core.logging import get_logger
from roster.metrics.prometheus import PEOPLE_TOTAL, TEAMS_TOTAL
from roster.repositories.person_repository import PersonRepository
from roster.repositories.storage import InMemoryStore, KeyValueStore, SQLStore
from roster.repositories.team_repository import TeamRepository
from roster.services.membership_service import MembershipService
from roster.services.organizer_service import OrganizerService
from roster.services.person_service import PersonService
from roster.services.team_service import TeamService

logger = get_logger(__name__)


@dataclass
class RosterContext:
    store: KeyValueStore
    person_repo: PersonRepository
    team_repo: TeamRepository
    membership: MembershipService
    people: PersonService
    teams: TeamService
    organizer: OrganizerService

    def load(self) -> None:
        """Load both snapshots from the store, normalizing whatever is found."""
        people_count = self.person_repo.load()
        teams_count = self.team_repo.load()
        PEOPLE_TOTAL.set(people_count)
        TEAMS_TOTAL.set(teams_count)
        logger.info("Roster loaded: people=%d, teams=%d", people_count, teams_count)

    def reset(self) -> None:
        """Drop all people and teams (persisted as empty snapshots)."""
        self.team_repo.clear()
        self.person_repo.clear()
        PEOPLE_TOTAL.set(0)
        TEAMS_TOTAL.set(0)


def build_store(backend: Optional[str] = None) -> KeyValueStore:
    backend = backend or settings.STORAGE_BACKEND
    if backend == "memory":
        return InMemoryStore()
    if backend == "sql":
        from roster.core.database import build_engine

        return SQLStore(build_engine())
    raise ValueError(f"Unknown storage backend '{backend}'")


def build_context(
    store: Optional[KeyValueStore] = None,
    rng: Optional[random.Random] = None,
    load: bool = True,
) -> RosterContext:
    """Wire repositories and services around ``store``."""
    store = store if store is not None else build_store()
    person_repo = PersonRepository(store, settings.PEOPLE_STORAGE_KEY)
    team_repo = TeamRepository(store, settings.TEAMS_STORAGE_KEY)
    membership = MembershipService(team_repo)
    context = RosterContext(
        store=store,
        person_repo=person_repo,
        team_repo=team_repo,
        membership=membership,
        people=PersonService(person_repo, membership),
        teams=TeamService(team_repo),
        organizer=OrganizerService(person_repo, team_repo, membership, rng=rng),
    )
    if load:
        context.load()
    return context
