# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics: single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "timeoff_requests_total",
    "Total HTTP requests to the time-off tracker",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "timeoff_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "timeoff_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
MEMBERS_CREATED = Counter(
    "timeoff_members_created_total",
    "Total team members created",
)
MEMBERS_DELETED = Counter(
    "timeoff_members_deleted_total",
    "Total team members deleted",
)
ENTRIES_CREATED = Counter(
    "timeoff_entries_created_total",
    "Total time-off entries created",
)
ENTRIES_DELETED = Counter(
    "timeoff_entries_deleted_total",
    "Total time-off entries deleted",
    ["reason"],
)
ROTATION_SAVES = Counter(
    "timeoff_oncall_rotation_saves_total",
    "Total on-call rotation saves",
)
HOLIDAY_FETCHES = Counter(
    "timeoff_holiday_fetches_total",
    "Upstream holiday fetches by country and outcome",
    ["country", "outcome"],
)
