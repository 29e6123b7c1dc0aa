"""Prometheus metrics for inbound routes and upstream API calls."""

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "path", "status_code"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "HTTP request duration in seconds", ["path"]
)
UPSTREAM_REQUEST_COUNT = Counter(
    "upstream_requests_total",
    "GET requests sent to the weather and backend APIs",
    ["host", "outcome"],
)


def observe_request(method: str, path: str, status_code: int, duration_s: float):
    REQUEST_COUNT.labels(method=method, path=path, status_code=status_code).inc()
    REQUEST_LATENCY.labels(path=path).observe(duration_s)


def observe_upstream(host: str, outcome) -> None:
    """Count one upstream call; ``outcome`` is a status code or ``"error"``."""
    UPSTREAM_REQUEST_COUNT.labels(host=host, outcome=str(outcome)).inc()


def render_latest() -> tuple[bytes, str]:
    return generate_latest(), CONTENT_TYPE_LATEST
