"""Prometheus metrics for action invocations."""
from __future__ import annotations

from prometheus_client import Counter, Histogram

ACTIONS_STARTED = Counter(
    "actionflow_actions_started_total",
    "Number of action invocations started",
    labelnames=("action_type",),
)

ACTIONS_DONE = Counter(
    "actionflow_actions_done_total",
    "Action invocations that settled successfully",
    labelnames=("action_type",),
)

ACTIONS_FAILED = Counter(
    "actionflow_actions_failed_total",
    "Action invocations that raised or rejected",
    labelnames=("action_type",),
)

ROLLBACKS = Counter(
    "actionflow_rollbacks_total",
    "Dispatched actions rolled back after their invocation failed",
    labelnames=("action_type",),
)

ACTION_LATENCY = Histogram(
    "actionflow_action_latency_ms",
    "Time from invocation start to settlement (milliseconds)",
    labelnames=("action_type",),
    buckets=(0.1, 0.5, 1, 2, 5, 10, 20, 50, 100, 200, 500, 1000, 5000),
)
