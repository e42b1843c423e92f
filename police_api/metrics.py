# police_api/metrics.py
from __future__ import annotations
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST, REGISTRY

# Police API metrics
API_CALLS_TOTAL = Counter(
    "police_api_calls_total",
    "Calls made to the Police API",
    ["endpoint", "outcome"]  # HTTP status code or 'exception'
)

API_LATENCY_SECONDS = Histogram(
    "police_api_latency_seconds",
    "Latency of Police API calls in seconds",
    ["endpoint"]
)


def observe_call(endpoint: str, outcome: str, duration: float) -> None:
    API_LATENCY_SECONDS.labels(endpoint=endpoint).observe(duration)
    API_CALLS_TOTAL.labels(endpoint=endpoint, outcome=outcome).inc()


def render_prometheus() -> bytes:
    """
    Use this in a web app to render /metrics.
    """
    return generate_latest(REGISTRY)


def content_type() -> str:
    return CONTENT_TYPE_LATEST
