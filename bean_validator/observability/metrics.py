"""
Prometheus metrics for bean-validator

Counts validation calls, per-rule failures and configuration failures so a
service embedding the engine can see which fields reject the most input.
"""
import os

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)

# Private registry so embedding applications keep control of the default one
REGISTRY = CollectorRegistry()


validations_total = Counter(
    name="bean_validator_validations_total",
    documentation="Total number of validate() calls",
    labelnames=["type_name", "outcome"],  # outcome: valid, invalid
    registry=REGISTRY,
)

rule_failures_total = Counter(
    name="bean_validator_rule_failures_total",
    documentation="Total number of failed rules",
    labelnames=["type_name", "field_name", "rule_type"],
    registry=REGISTRY,
)

validator_not_found_total = Counter(
    name="bean_validator_validator_not_found_total",
    documentation="Rules referencing a rule type missing from the validator table",
    labelnames=["rule_type"],
    registry=REGISTRY,
)

validation_duration_seconds = Histogram(
    name="bean_validator_validation_duration_seconds",
    documentation="Time spent in validate() in seconds",
    labelnames=["type_name"],
    buckets=[0.00001, 0.00005, 0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05],
    registry=REGISTRY,
)

registered_validators = Gauge(
    name="bean_validator_registered_validators",
    documentation="Number of entries in the default validator table",
    registry=REGISTRY,
)


def generate_metrics() -> bytes:
    """Generate metrics in Prometheus text format"""
    return generate_latest(REGISTRY)


def get_content_type() -> str:
    """Content type for the Prometheus text format"""
    return CONTENT_TYPE_LATEST


def start_metrics_server(port: int | None = None) -> None:
    """
    Start HTTP server for Prometheus metrics

    Args:
        port: Port to listen on (defaults to env var METRICS_PORT or 8000)
    """
    # Imported lazily so importing this module never binds a port
    from prometheus_client import start_http_server

    metrics_port = port or int(os.getenv("METRICS_PORT", "8000"))
    start_http_server(metrics_port, registry=REGISTRY)


class track_duration:
    """
    Context manager for tracking operation duration

    Usage:
        with track_duration(validation_duration_seconds, type_name="UserDTO"):
            ...
    """

    def __init__(self, histogram: Histogram, **labels):
        self.histogram = histogram
        self.labels = labels
        self.timer = None

    def __enter__(self):
        self.timer = self.histogram.labels(**self.labels).time()
        self.timer.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.timer.__exit__(exc_type, exc_val, exc_tb)
        return False


def record_validation(type_name: str, failures: list[tuple[str, str]]) -> None:
    """
    Record the outcome of one validate() call.

    Args:
        type_name: Name of the validated class
        failures: (field_name, rule_type) pairs for every failed rule
    """
    outcome = "invalid" if failures else "valid"
    validations_total.labels(type_name=type_name, outcome=outcome).inc()

    for field_name, rule_type in failures:
        rule_failures_total.labels(
            type_name=type_name, field_name=field_name, rule_type=rule_type
        ).inc()
