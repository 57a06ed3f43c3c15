# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Membership coordination — keeps team membership consistent
with the people on the roster.

Every compound operation reads, computes and commits in one
uninterrupted step, so no half-applied move is ever observable.
"""

from roster.core.logging import get_logger
from roster.metrics.prometheus import MEMBER_MOVES
from roster.models.domain import Assignment
from roster.repositories.team_repository import TeamRepository

logger = get_logger(__name__)


class MembershipService:
    """Cross-entity rules between people and team membership lists."""

    def __init__(self, team_repo: TeamRepository) -> None:
        self._teams = team_repo

    def remove_member_everywhere(self, person_id: str) -> bool:
        """Drop ``person_id`` from every team. Returns True if any team changed."""
        changed = [
            t.model_copy(update={"members": [m for m in t.members if m != person_id]})
            for t in self._teams.get_all()
            if person_id in t.members
        ]
        if not changed:
            return False
        self._teams.replace_many(changed)
        logger.info(
            "Member removed from %d teams", len(changed), extra={"person_id": person_id}
        )
        return True

    def move_member_between_teams(
        self, person_id: str, from_team_id: str, to_team_id: str
    ) -> None:
        """
        Move a member between teams. Idempotent on the destination.
        Raises KeyError if either team does not exist.
        """
        if from_team_id == to_team_id:
            return
        from_team = self._teams.get_by_id(from_team_id)
        to_team = self._teams.get_by_id(to_team_id)
        if from_team is None:
            raise KeyError(f"Team not found: '{from_team_id}'")
        if to_team is None:
            raise KeyError(f"Team not found: '{to_team_id}'")

        from_members = list(from_team.members)
        if person_id in from_members:
            from_members.remove(person_id)
        to_members = list(to_team.members)
        if person_id not in to_members:
            to_members.append(person_id)

        self._teams.replace_many([
            from_team.model_copy(update={"members": from_members}),
            to_team.model_copy(update={"members": to_members}),
        ])
        MEMBER_MOVES.inc()
        logger.info(
            "Member moved",
            extra={"person_id": person_id, "from_team_id": from_team_id, "to_team_id": to_team_id},
        )

    def assign_member(self, person_id: str, team_id: str) -> None:
        """Append ``person_id`` to a team if absent. Raises KeyError for unknown teams."""
        team = self._teams.get_by_id(team_id)
        if team is None:
            raise KeyError(f"Team not found: '{team_id}'")
        if person_id in team.members:
            return
        self._teams.replace(team.model_copy(update={"members": [*team.members, person_id]}))

    def apply_queue(self, queue: list[Assignment]) -> None:
        """
        Replace every team's membership with the placements in ``queue``,
        in queue order, committed as one write.
        Raises KeyError before changing anything if a target team is unknown.
        """
        members: dict[str, list[str]] = {t.id: [] for t in self._teams.get_all()}
        for step in queue:
            if step.team_id not in members:
                raise KeyError(f"Team not found: '{step.team_id}'")
            if step.person.id not in members[step.team_id]:
                members[step.team_id].append(step.person.id)
        self._teams.replace_many([
            t.model_copy(update={"members": members[t.id]}) for t in self._teams.get_all()
        ])

    def clear_all_members(self) -> None:
        """Empty every team's membership, e.g. before a fresh balanced assignment."""
        teams = self._teams.get_all()
        self._teams.replace_many([t.model_copy(update={"members": []}) for t in teams])
        logger.info("Cleared members of %d teams", len(teams))
