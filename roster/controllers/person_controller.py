# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Person CRUD endpoints.
Thin HTTP layer — delegates ALL logic to PersonService.
"""

from fastapi import APIRouter, Depends, HTTPException

from roster.core.dependencies import get_person_service
from roster.models.domain import Person
from roster.schemas.roster import (
    PersonCreateRequest,
    PersonDeleteResponse,
    PersonUpdateRequest,
)
from roster.services.person_service import PersonService

router = APIRouter(prefix="/api/v1", tags=["People"])


@router.get("/people", response_model=list[Person])
async def list_people(service: PersonService = Depends(get_person_service)):
    """List everyone on the roster, in insertion order."""
    return service.list()


@router.post("/people", status_code=201, response_model=Person)
async def create_person(
    payload: PersonCreateRequest,
    service: PersonService = Depends(get_person_service),
):
    """Add a person. Name and power are optional."""
    person_id = service.add(name=payload.name, power=payload.power)
    return service.get(person_id)


@router.get("/people/{person_id}", response_model=Person)
async def get_person(
    person_id: str,
    service: PersonService = Depends(get_person_service),
):
    person = service.get(person_id)
    if person is None:
        raise HTTPException(status_code=404, detail=f"Person not found: '{person_id}'")
    return person


@router.patch("/people/{person_id}", response_model=Person)
async def update_person(
    person_id: str,
    payload: PersonUpdateRequest,
    service: PersonService = Depends(get_person_service),
):
    """Rename a person; power changes only when supplied."""
    person = service.update(person_id, name=payload.name, power=payload.power)
    if person is None:
        raise HTTPException(status_code=404, detail=f"Person not found: '{person_id}'")
    return person


@router.delete("/people/{person_id}", response_model=PersonDeleteResponse)
async def delete_person(
    person_id: str,
    service: PersonService = Depends(get_person_service),
):
    """Remove a person and drop them from every team. Idempotent."""
    changed = service.remove(person_id)
    return {"status": "deleted", "id": person_id, "teams_changed": changed}
