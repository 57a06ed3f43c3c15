# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO FastAPI dependency.
"""

from pydantic import BaseModel, Field


class Person(BaseModel):
    """Someone on the roster. ``power`` is the workload weight used for balancing."""
    id: str = Field(..., min_length=1)
    name: str = ""
    power: int = Field(default=1, ge=1)


class Team(BaseModel):
    """A named team holding an ordered list of person ids."""
    id: str = Field(..., min_length=1)
    name: str = ""
    color: str = ""
    members: list[str] = Field(default_factory=list)


class Assignment(BaseModel):
    """One step of an assignment queue: place ``person`` into ``team_id``."""
    person: Person
    team_id: str
