"""
Aggregation Helpers — Fast Statistics for Representations

These are the `aggregate` capabilities consumed by FeaTrend, PAA and the
seasonal profile. Every helper maps a non-empty sequence of numbers to a
single float and never modifies its input.
"""

from typing import Callable, Dict, Sequence, Union

import numpy as np

from tsrepr.errors import InvalidAggregateError, InvalidParameterError


AggregationFn = Callable[[Sequence[float]], float]


def _checked(values: Sequence[float], name: str) -> np.ndarray:
    """Copy values to float64, refusing empty input."""
    arr = np.array(values, dtype=np.float64)
    if arr.size == 0:
        raise InvalidAggregateError(f"{name} called on an empty sequence")
    return arr


def max_agg(values: Sequence[float]) -> float:
    """Maximum value."""
    return float(np.max(_checked(values, "max_agg")))


def min_agg(values: Sequence[float]) -> float:
    """Minimum value."""
    return float(np.min(_checked(values, "min_agg")))


def mean_agg(values: Sequence[float]) -> float:
    """Arithmetic mean."""
    return float(np.mean(_checked(values, "mean_agg")))


def sum_agg(values: Sequence[float]) -> float:
    """Sum of all values."""
    return float(np.sum(_checked(values, "sum_agg")))


def median_agg(values: Sequence[float]) -> float:
    """
    Median value.

    Even-length input returns the mean of the two middle values.
    Works on a private copy, the caller's ordering is preserved.
    """
    return float(np.median(_checked(values, "median_agg")))


# Name -> capability, used by configuration and the engine
AGGREGATIONS: Dict[str, AggregationFn] = {
    "max": max_agg,
    "min": min_agg,
    "mean": mean_agg,
    "sum": sum_agg,
    "median": median_agg,
}


def resolve_aggregate(aggregate: Union[str, AggregationFn]) -> AggregationFn:
    """
    Turn an aggregation name or callable into a callable.

    Args:
        aggregate: One of AGGREGATIONS' keys, or any callable

    Raises:
        InvalidParameterError: If the name is unknown or the value is not callable
    """
    if isinstance(aggregate, str):
        try:
            return AGGREGATIONS[aggregate]
        except KeyError:
            raise InvalidParameterError(
                f"Unknown aggregation '{aggregate}'. "
                f"Expected one of: {sorted(AGGREGATIONS)}"
            ) from None

    if not callable(aggregate):
        raise InvalidParameterError(
            f"aggregate must be a name or a callable, got {type(aggregate).__name__}"
        )

    return aggregate


def aggregate_name(aggregate: Union[str, AggregationFn]) -> str:
    """Readable name of an aggregation, for records and logs."""
    if isinstance(aggregate, str):
        return aggregate
    for name, fn in AGGREGATIONS.items():
        if fn is aggregate:
            return name
    return getattr(aggregate, "__name__", repr(aggregate))
