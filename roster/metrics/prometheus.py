# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "roster_requests_total",
    "Total HTTP requests to roster service",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "roster_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "roster_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
PEOPLE_TOTAL = Gauge(
    "roster_people",
    "Number of people on the roster",
)
TEAMS_TOTAL = Gauge(
    "roster_teams",
    "Number of teams",
)
ASSIGNMENT_RUNS = Counter(
    "roster_assignment_runs_total",
    "Total assignment queues computed",
    ["mode"],
)
ASSIGNMENTS_EMITTED = Counter(
    "roster_assignments_emitted_total",
    "Total person-to-team assignments emitted",
)
MEMBER_MOVES = Counter(
    "roster_member_moves_total",
    "Total members moved between teams",
)
COLOR_CONFLICTS = Counter(
    "roster_color_conflicts_total",
    "Team color changes rejected because the color is taken",
)
STORAGE_FAILURES = Counter(
    "roster_storage_failures_total",
    "Persistence load/save failures",
    ["operation"],
)
