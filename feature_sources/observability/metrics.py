"""
Prometheus metrics for data source conversions

Counts conversions in each direction and codec failures on a private
registry, so importing this module never touches the global registry.
"""
from prometheus_client import (
    Counter,
    CollectorRegistry,
    generate_latest,
)


REGISTRY = CollectorRegistry()


# =======================
# CONVERSION METRICS
# =======================

conversions_total = Counter(
    name="feature_sources_conversions_total",
    documentation="Total number of data source conversions",
    labelnames=["direction", "source_type", "status"],  # direction: from_spec, to_spec, from_row, to_row
    registry=REGISTRY,
)

codec_errors_total = Counter(
    name="feature_sources_codec_errors_total",
    documentation="Total number of blobs that failed to deserialize",
    labelnames=["operation"],
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    counter.labels(**labels).inc(value)


def get_sample_value(sample_name: str, **labels) -> float:
    """Current value of a labelled sample, 0.0 if never recorded."""
    value = REGISTRY.get_sample_value(sample_name, labels)
    return value or 0.0


def record_conversion(direction: str, source_type: str, success: bool = True) -> None:
    """
    Record a single conversion.

    Args:
        direction: from_spec, to_spec, from_row or to_row
        source_type: Source type name
        success: Whether the conversion succeeded
    """
    status = "success" if success else "failure"
    increment_counter(conversions_total, direction=direction, source_type=source_type, status=status)


def record_codec_error(operation: str) -> None:
    """Record a blob that could not be deserialized."""
    increment_counter(codec_errors_total, operation=operation)
