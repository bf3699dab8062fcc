"""
Prometheus Metrics for the chat backend.

DATA FLOW:
    This file                  presentation/api/metrics.py
    ─────────                  ───────────────────────────
    Define metrics ──────────► /metrics endpoint ──────────► Prometheus scraper

METRIC TYPES:
    - Gauge: Value goes up/down (pending departure notices)
    - Counter: Value only goes up (joins, evictions, sweeps, errors)
"""

from prometheus_client import (
    Gauge,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
PARTICIPANTS_JOINED_TOTAL = Counter(
    "chat_participants_joined_total", "Total number of successful joins"
)

PARTICIPANTS_EVICTED_TOTAL = Counter(
    "chat_participants_evicted_total",
    "Total number of participants evicted for inactivity",
)

SWEEPS_TOTAL = Counter(
    "chat_sweeps_total",
    "Total number of eviction sweeps by outcome",
    ["outcome"],
)

PENDING_DEPARTURES = Gauge(
    "chat_pending_departure_notices",
    "Evicted participants whose departure notice is not recorded yet",
)

ERRORS_TOTAL = Counter(
    "chat_errors_total",
    "Total number of errors returned to clients by kind",
    ["error_kind"],
)


# =============================================================================
# LABEL CONSTANTS
# =============================================================================
class SweepOutcome:
    """Outcome labels for chat_sweeps_total."""

    COMPLETED = "completed"
    FAILED = "failed"
    SKIPPED = "skipped"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def increment_participants_joined():
    PARTICIPANTS_JOINED_TOTAL.inc()


def increment_participants_evicted(count: int = 1):
    PARTICIPANTS_EVICTED_TOTAL.inc(count)


def increment_sweep(outcome: str):
    """Call once per sweep tick. Integration point: application/services/eviction_sweeper.py"""
    SWEEPS_TOTAL.labels(outcome=outcome).inc()


def set_pending_departures(count: int):
    PENDING_DEPARTURES.set(count)


def increment_error(error_kind: str):
    """Call when an error response is produced. Integration point: presentation/errors.py"""
    ERRORS_TOTAL.labels(error_kind=error_kind).inc()


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


__all__ = [
    "increment_participants_joined",
    "increment_participants_evicted",
    "increment_sweep",
    "set_pending_departures",
    "increment_error",
    "get_metrics_content",
    "SweepOutcome",
]
