# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Balanced assignment and roster stats endpoints.
Thin HTTP layer — delegates ALL logic to OrganizerService.
"""

from fastapi import APIRouter, Depends, HTTPException

from roster.core.dependencies import get_organizer_service, get_team_service
from roster.schemas.roster import AssignmentQueueResponse, OrganizeResponse
from roster.services.organizer_service import OrganizerService
from roster.services.team_service import TeamService

router = APIRouter(prefix="/api/v1", tags=["Assignments"])


@router.post("/assignments/queue", response_model=AssignmentQueueResponse)
async def preview_queue(
    service: OrganizerService = Depends(get_organizer_service),
):
    """Compute a balanced assignment queue without changing any team."""
    try:
        queue = service.build_queue()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"count": len(queue), "queue": queue}


@router.post("/assignments/apply", response_model=OrganizeResponse)
async def apply_queue(
    service: OrganizerService = Depends(get_organizer_service),
    teams: TeamService = Depends(get_team_service),
):
    """Clear all teams, then place every person per a fresh balanced queue."""
    try:
        queue = service.organize()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"count": len(queue), "queue": queue, "teams": teams.list()}


@router.get("/stats")
async def get_stats(service: OrganizerService = Depends(get_organizer_service)):
    """Headcount, power totals per team, and the spread between teams."""
    return service.get_stats()
