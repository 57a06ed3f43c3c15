# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Team CRUD and membership endpoints.
Thin HTTP layer — delegates ALL logic to TeamService / MembershipService.
"""

from fastapi import APIRouter, Depends, HTTPException

from roster.core.dependencies import get_membership_service, get_team_service
from roster.models.domain import Team
from roster.schemas.roster import (
    MoveRequest,
    TeamCreateRequest,
    TeamUpdateRequest,
    TeamUpdateResponse,
)
from roster.services.membership_service import MembershipService
from roster.services.team_service import TeamService

router = APIRouter(prefix="/api/v1", tags=["Teams"])


@router.get("/teams", response_model=list[Team])
async def list_teams(service: TeamService = Depends(get_team_service)):
    return service.list()


@router.post("/teams", status_code=201, response_model=Team)
async def create_team(
    payload: TeamCreateRequest,
    service: TeamService = Depends(get_team_service),
):
    """Create an empty team; omitted color takes the next free palette color."""
    team_id = service.add(name=payload.name, color=payload.color)
    return service.get(team_id)


@router.post("/teams/clear-members", response_model=list[Team])
async def clear_members(
    service: TeamService = Depends(get_team_service),
    membership: MembershipService = Depends(get_membership_service),
):
    """Empty every team's membership."""
    membership.clear_all_members()
    return service.list()


@router.get("/teams/{team_id}", response_model=Team)
async def get_team(
    team_id: str,
    service: TeamService = Depends(get_team_service),
):
    team = service.get(team_id)
    if team is None:
        raise HTTPException(status_code=404, detail=f"Team not found: '{team_id}'")
    return team


@router.patch("/teams/{team_id}", response_model=TeamUpdateResponse)
async def update_team(
    team_id: str,
    payload: TeamUpdateRequest,
    service: TeamService = Depends(get_team_service),
):
    """Partially update a team. A color taken by another team is ignored with a warning."""
    team = service.update(
        team_id,
        name=payload.name,
        color=payload.color,
        members=payload.members,
    )
    if team is None:
        raise HTTPException(status_code=404, detail=f"Team not found: '{team_id}'")
    warnings: list[str] = []
    if payload.color is not None and team.color != payload.color:
        warnings.append(f"Color {payload.color} is already in use by another team")
    return {"team": team, "warnings": warnings}


@router.delete("/teams/{team_id}")
async def delete_team(
    team_id: str,
    service: TeamService = Depends(get_team_service),
):
    """Delete a team. Idempotent."""
    removed = service.remove(team_id)
    return {"status": "deleted", "id": team_id, "existed": removed}


@router.post("/moves", response_model=list[Team])
async def move_member(
    payload: MoveRequest,
    service: TeamService = Depends(get_team_service),
    membership: MembershipService = Depends(get_membership_service),
):
    """Move a person from one team to another (drag-and-drop drop target)."""
    try:
        membership.move_member_between_teams(
            payload.person_id, payload.from_team_id, payload.to_team_id
        )
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return service.list()
