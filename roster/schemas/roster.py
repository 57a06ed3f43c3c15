# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas — API contract definitions.
These are Pydantic models used ONLY at the controller (HTTP) boundary.
"""

from typing import Optional

from pydantic import BaseModel, Field

from roster.models.domain import Assignment, Team


# ── Person Schemas ──

class PersonCreateRequest(BaseModel):
    name: Optional[str] = Field(default=None, max_length=255, description="Display name")
    power: Optional[float] = Field(
        default=None, description="Workload weight; floored and clamped to >= 1"
    )


class PersonUpdateRequest(BaseModel):
    name: str = Field(..., max_length=255, description="Replaces the current name")
    power: Optional[float] = Field(
        default=None, description="Omit to keep the current power"
    )


class PersonDeleteResponse(BaseModel):
    status: str
    id: str
    teams_changed: bool


# ── Team Schemas ──

class TeamCreateRequest(BaseModel):
    name: Optional[str] = Field(default=None, max_length=255, description="Team name")
    color: Optional[str] = Field(
        default=None, max_length=64, description="Omit to take the next palette color"
    )


class TeamUpdateRequest(BaseModel):
    """Partial update model for PATCH /api/v1/teams/{id}."""
    name: Optional[str] = Field(default=None, max_length=255)
    color: Optional[str] = Field(default=None, max_length=64)
    members: Optional[list[str]] = Field(
        default=None, description="Full replacement of the member id list"
    )


class TeamUpdateResponse(BaseModel):
    team: Team
    warnings: list[str] = Field(default_factory=list)


# ── Membership Schemas ──

class MoveRequest(BaseModel):
    person_id: str = Field(..., min_length=1)
    from_team_id: str = Field(..., min_length=1)
    to_team_id: str = Field(..., min_length=1)


# ── Assignment Schemas ──

class AssignmentQueueResponse(BaseModel):
    count: int
    queue: list[Assignment]


class OrganizeResponse(AssignmentQueueResponse):
    teams: list[Team]

