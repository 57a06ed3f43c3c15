# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Decode step at the persistence boundary.

Stored snapshots are never trusted: every field of every record is
defaulted or coerced independently, so partially-shaped or legacy data
still loads.
"""

import math
from typing import Any

from roster.models.domain import Person, Team
from roster.models.palette import TEAM_COLORS
from roster.services.ids import new_id


def clamp_power(value: Any) -> int:
    """Floor ``value`` and clamp it to at least 1; anything non-numeric is 1."""
    if value is None or isinstance(value, bool):
        return 1
    try:
        power = math.floor(float(value))
    except (TypeError, ValueError, OverflowError):
        return 1
    return max(1, power)


def _as_mapping(raw: Any) -> dict[str, Any]:
    return raw if isinstance(raw, dict) else {}


def normalize_person(raw: Any) -> Person:
    obj = _as_mapping(raw)
    raw_id = obj.get("id")
    person_id = raw_id if isinstance(raw_id, str) and raw_id != "" else new_id()
    name = obj.get("name")
    return Person(
        id=person_id,
        name=str(name) if name is not None else "",
        power=clamp_power(obj.get("power")),
    )


def normalize_team(raw: Any, index: int) -> Team:
    """Normalize one stored team; ``index`` drives positional defaults."""
    obj = _as_mapping(raw)
    raw_id = obj.get("id")
    team_id = raw_id if isinstance(raw_id, str) and raw_id != "" else new_id()
    name = obj.get("name")
    if not isinstance(name, str) or name == "":
        name = f"Team #{index + 1}"
    color = obj.get("color")
    color = TEAM_COLORS[index % len(TEAM_COLORS)] if color is None else str(color)
    members = obj.get("members")
    members = [str(m) for m in members] if isinstance(members, list) else []
    return Team(id=team_id, name=name, color=color, members=members)


def normalize_people(raw: Any) -> list[Person]:
    if not isinstance(raw, list):
        return []
    return [normalize_person(item) for item in raw]


def normalize_teams(raw: Any) -> list[Team]:
    if not isinstance(raw, list):
        return []
    return [normalize_team(item, idx) for idx, item in enumerate(raw)]
