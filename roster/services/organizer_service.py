# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Organizer — runs the balancing engine over the current roster
and applies its queue to team membership.
"""

import random
from typing import Any, Optional

from roster.core.logging import get_logger
from roster.metrics.prometheus import ASSIGNMENT_RUNS, ASSIGNMENTS_EMITTED
from roster.models.domain import Assignment
from roster.repositories.person_repository import PersonRepository
from roster.repositories.team_repository import TeamRepository
from roster.services.assignment import make_assignment_queue, team_power_totals
from roster.services.membership_service import MembershipService

logger = get_logger(__name__)


class OrganizerService:
    """Balanced organization of people into teams."""

    def __init__(
        self,
        person_repo: PersonRepository,
        team_repo: TeamRepository,
        membership: MembershipService,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._people = person_repo
        self._teams = team_repo
        self._membership = membership
        self._rng = rng

    # ── Commands ──

    def build_queue(self, rng: Optional[random.Random] = None) -> list[Assignment]:
        """Compute an assignment queue for the current snapshot. Raises ValueError."""
        queue = make_assignment_queue(
            self._people.get_all(), self._teams.get_all(), rng or self._rng
        )
        ASSIGNMENT_RUNS.labels(mode="preview").inc()
        ASSIGNMENTS_EMITTED.inc(len(queue))
        return queue

    def organize(self, rng: Optional[random.Random] = None) -> list[Assignment]:
        """
        Replace every team's membership with a fresh balanced queue,
        persisted once. The queue is computed before anything changes, so
        a ValueError leaves membership untouched.
        """
        queue = make_assignment_queue(
            self._people.get_all(), self._teams.get_all(), rng or self._rng
        )
        self._membership.apply_queue(queue)
        ASSIGNMENT_RUNS.labels(mode="apply").inc()
        ASSIGNMENTS_EMITTED.inc(len(queue))
        logger.info(
            "Roster organized: people=%d, teams=%d", len(queue), self._teams.count()
        )
        return queue

    # ── Queries ──

    def team_totals(self) -> list[dict[str, Any]]:
        teams = self._teams.get_all()
        totals = team_power_totals(self._people.get_all(), teams)
        return [
            {
                "team_id": t.id,
                "name": t.name,
                "color": t.color,
                "members_count": len(t.members),
                "power": totals[t.id],
            }
            for t in teams
        ]

    def get_stats(self) -> dict[str, Any]:
        """Aggregated roster statistics."""
        people = self._people.get_all()
        per_team = self.team_totals()
        powers = [t["power"] for t in per_team]
        return {
            "total_people": len(people),
            "total_teams": len(per_team),
            "total_power": sum(p.power for p in people),
            "unassigned_people": len(
                {p.id for p in people}
                - {pid for t in self._teams.get_all() for pid in t.members}
            ),
            "spread": (max(powers) - min(powers)) if powers else 0,
            "teams": per_team,
        }
