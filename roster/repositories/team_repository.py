# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Team data access.
Ordered in-memory store of teams, snapshotted after every write.
"""

from typing import Optional

from roster.core.logging import get_logger
from roster.models.domain import Team
from roster.models.normalize import normalize_teams
from roster.repositories.storage import KeyValueStore

logger = get_logger(__name__)


class TeamRepository:
    """Teams in insertion order, persisted under a single key."""

    def __init__(self, store: KeyValueStore, key: str) -> None:
        self._store = store
        self._key = key
        self._teams: list[Team] = []

    # ── Read ──

    def get_all(self) -> list[Team]:
        return list(self._teams)

    def get_by_id(self, team_id: str) -> Optional[Team]:
        for team in self._teams:
            if team.id == team_id:
                return team
        return None

    def exists(self, team_id: str) -> bool:
        return self.get_by_id(team_id) is not None

    def count(self) -> int:
        return len(self._teams)

    # ── Write ──

    def append(self, team: Team) -> None:
        self._teams.append(team)
        self._persist()

    def replace(self, team: Team) -> bool:
        return self.replace_many([team]) == 1

    def replace_many(self, teams: list[Team]) -> int:
        """Swap in several updated teams, then persist once."""
        by_id = {t.id: t for t in teams}
        replaced = 0
        for idx, current in enumerate(self._teams):
            if current.id in by_id:
                self._teams[idx] = by_id[current.id]
                replaced += 1
        if replaced:
            self._persist()
        return replaced

    def delete(self, team_id: str) -> Optional[Team]:
        for idx, current in enumerate(self._teams):
            if current.id == team_id:
                removed = self._teams.pop(idx)
                self._persist()
                return removed
        return None

    # ── Persistence ──

    def load(self) -> int:
        raw = self._store.load(self._key)
        if raw is not None and not isinstance(raw, list):
            logger.warning("Stored teams under %s is not a list; starting empty", self._key)
        self._teams = normalize_teams(raw)
        return len(self._teams)

    def _persist(self) -> None:
        self._store.save(self._key, [t.model_dump() for t in self._teams])

    # ── Bulk / internal ──

    def clear(self) -> None:
        self._teams.clear()
        self._persist()
