# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Team management — naming and color defaults, color uniqueness.
"""

from typing import Optional

from roster.core.logging import get_logger
from roster.metrics.prometheus import COLOR_CONFLICTS, TEAMS_TOTAL
from roster.models.domain import Team
from roster.models.palette import TEAM_COLORS
from roster.repositories.team_repository import TeamRepository
from roster.services.ids import new_id

logger = get_logger(__name__)


class TeamService:
    """Business logic for teams."""

    def __init__(self, team_repo: TeamRepository) -> None:
        self._teams = team_repo

    # ── Commands ──

    def add(self, name: Optional[str] = None, color: Optional[str] = None) -> str:
        """
        Add an empty team and return its id. An omitted color, or one
        already taken by another team, becomes the next free palette color.
        """
        if color is None:
            color = self.next_default_color()
        elif color != "" and self.color_in_use(color):
            self._reject_color(color)
            color = self.next_default_color()
        team = Team(
            id=new_id(),
            name=name if name else self.next_default_name(),
            color=color,
            members=[],
        )
        self._teams.append(team)
        TEAMS_TOTAL.set(self._teams.count())
        logger.info("Team added: id=%s, color=%s", team.id, team.color or "-")
        return team.id

    def update(
        self,
        team_id: str,
        name: Optional[str] = None,
        color: Optional[str] = None,
        members: Optional[list[str]] = None,
    ) -> Optional[Team]:
        """
        Partially update a team. A color held by another team is rejected
        (previous color kept) while name and members still apply.
        Unknown ids are ignored.
        """
        current = self._teams.get_by_id(team_id)
        if current is None:
            return None

        changes: dict = {}
        if name is not None:
            changes["name"] = name
        if members is not None:
            changes["members"] = [str(m) for m in members]
        if color is not None:
            if color == "" or not self.color_in_use(color, team_id):
                changes["color"] = color
            else:
                self._reject_color(color)

        updated = current.model_copy(update=changes)
        self._teams.replace(updated)
        return updated

    def remove(self, team_id: str) -> bool:
        removed = self._teams.delete(team_id)
        if removed is None:
            return False
        TEAMS_TOTAL.set(self._teams.count())
        logger.info("Team removed: id=%s", team_id)
        return True

    def _reject_color(self, color: str) -> None:
        COLOR_CONFLICTS.inc()
        logger.warning(
            "Color %s is already in use by another team. Ignoring color change.", color
        )

    # ── Queries ──

    def color_in_use(self, color: str, exclude_id: Optional[str] = None) -> bool:
        """Whether ``color`` is taken by a team other than ``exclude_id``."""
        return any(t.id != exclude_id and t.color == color for t in self._teams.get_all())

    def next_default_color(self, exclude_id: Optional[str] = None) -> str:
        """First palette color not in use, or "" when the palette is exhausted."""
        for color in TEAM_COLORS:
            if not self.color_in_use(color, exclude_id):
                return color
        return ""

    def next_default_name(self) -> str:
        return f"Team #{self._teams.count() + 1}"

    def list(self) -> list[Team]:
        return self._teams.get_all()

    def get(self, team_id: str) -> Optional[Team]:
        return self._teams.get_by_id(team_id)

    def count(self) -> int:
        return self._teams.count()
