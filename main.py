# type: ignore
# pyright: reportGeneralTypeIssues=false
# pyright: reportOptionalMemberAccess=false
"""
Roster Service
==============
Maintains a roster of people and a set of colored teams, keeps team
membership consistent with the roster, and balances people across teams
by workload ("power") with a greedy lowest-total-first assignment.

Port: 8005
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from roster.controllers import (
    assignment_controller,
    person_controller,
    system_controller,
    team_controller,
)
from roster.core.config import settings
from roster.core.dependencies import get_context
from roster.core.logging import get_logger
from roster.middleware import MetricsMiddleware, RequestIDMiddleware

logger = get_logger(__name__)


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    """Log startup and shutdown with the roster size."""
    context = get_context()
    logger.info(
        "Roster service starting — storage=%s, people=%d, teams=%d",
        settings.STORAGE_BACKEND, context.people.count(), context.teams.count(),
    )
    yield
    logger.info("Roster service shutting down")


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Roster Service",
    description="People, teams and power-balanced team assignment.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)


# ── Global exception handler ─────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "detail": str(exc), "request_id": req_id},
    )


app.include_router(system_controller.router)
app.include_router(person_controller.router)
app.include_router(team_controller.router)
app.include_router(assignment_controller.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=settings.SERVICE_PORT)
