# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection — wire repositories and services.
"""

from roster.core.context import RosterContext, build_context
from roster.services.organizer_service import OrganizerService
from roster.services.person_service import PersonService
from roster.services.team_service import TeamService
from roster.services.membership_service import MembershipService

# ── Singleton roster context (repositories + services) ──
_context = build_context()


# ── FastAPI dependency functions ──
def get_context() -> RosterContext:
    return _context


def get_person_service() -> PersonService:
    return _context.people


def get_team_service() -> TeamService:
    return _context.teams


def get_membership_service() -> MembershipService:
    return _context.membership


def get_organizer_service() -> OrganizerService:
    return _context.organizer
