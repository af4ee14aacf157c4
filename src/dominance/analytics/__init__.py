"""Aggregation of decoded records into dominance figures."""

from dominance.analytics.aggregator import (
    AggregateResult,
    RecordShare,
    aggregate,
    format_percentage,
    to_percentage,
)

__all__ = [
    "AggregateResult",
    "RecordShare",
    "aggregate",
    "format_percentage",
    "to_percentage",
]
