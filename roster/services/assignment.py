# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Balanced assignment — pure computation, no side effects.

Greedy longest-processing-time-first: heaviest people are placed first,
each onto the team with the lowest running power total. Ties between
equally-loaded teams are broken at random so the first team is not
systematically favoured.
"""

import random
from typing import Optional, Sequence

from roster.models.domain import Assignment, Person, Team


def make_assignment_queue(
    people: Sequence[Person],
    teams: Sequence[Team],
    rng: Optional[random.Random] = None,
) -> list[Assignment]:
    """
    Return one assignment per person, in placement order.
    Pure function — never mutates its inputs, no I/O, no metrics, no logging.
    Raises ValueError on an empty team set, missing or duplicate team ids,
    or a missing people sequence.
    """
    if not teams:
        raise ValueError("make_assignment_queue: teams must be a non-empty sequence")
    if people is None:
        raise ValueError("make_assignment_queue: people must be a sequence")

    totals: dict[str, int] = {}
    for team in teams:
        team_id = getattr(team, "id", None)
        if not isinstance(team_id, str) or team_id == "":
            raise ValueError("make_assignment_queue: each team must have a non-empty id")
        if team_id in totals:
            raise ValueError(f"make_assignment_queue: duplicate team id detected: {team_id}")
        totals[team_id] = 0

    chooser = rng or random
    # sorted() is stable, so equal powers keep their input order
    by_power = sorted(people, key=lambda p: p.power, reverse=True)

    queue: list[Assignment] = []
    for person in by_power:
        lowest = min(totals.values())
        candidates = [tid for tid, total in totals.items() if total == lowest]
        team_id = chooser.choice(candidates)
        queue.append(Assignment(person=person, team_id=team_id))
        totals[team_id] += person.power
    return queue


def team_power_totals(people: Sequence[Person], teams: Sequence[Team]) -> dict[str, int]:
    """Sum member power per team id; member ids with no matching person count 0."""
    power_by_id = {p.id: p.power for p in people}
    return {
        t.id: sum(power_by_id.get(pid, 0) for pid in t.members)
        for t in teams
    }
