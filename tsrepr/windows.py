"""
Windowed Representations — Smoothing, PAA and Seasonal Profile

Independent windowed-aggregation utilities:
- moving_average: sliding-sum smoothing consumed by FeaTrend
- repr_paa: Piecewise Aggregate Approximation
- repr_seas_profile: aggregated seasonal profile

All functions are stateless and never modify their input.
"""

from typing import Union

import numpy as np

from tsrepr.aggregation import AggregationFn, resolve_aggregate
from tsrepr.encoding.bits import SeriesLike, as_series
from tsrepr.errors import InvalidLengthError, InvalidParameterError


def moving_average(x: SeriesLike, order: int) -> np.ndarray:
    """
    Simple moving average of a series.

    out[0] = mean(x[0:order])
    out[i] = out[i-1] + x[i+order]/order - x[i-1]/order

    The window sum is updated in O(1) per step instead of recomputed.

    Args:
        x: Numeric series, strictly longer than order
        order: Window size (>= 1)

    Returns:
        Smoothed series of length len(x) - order
    """
    if order < 1:
        raise InvalidParameterError(f"order must be >= 1, got {order}")

    values = as_series(x, min_length=1)
    n = len(values)
    if n <= order:
        raise InvalidLengthError(
            f"Series of length {n} is too short for moving average of order {order}"
        )

    n_ma = n - order
    repr_ma = np.empty(n_ma, dtype=np.float64)
    repr_ma[0] = values[:order].sum() / order

    # Applied step by step: rounding must follow the recurrence exactly
    for i in range(1, n_ma):
        repr_ma[i] = repr_ma[i - 1] + values[i + order] / order - values[i - 1] / order

    return repr_ma


def repr_paa(
    x: SeriesLike,
    q: int,
    aggregate: Union[str, AggregationFn] = "mean",
) -> np.ndarray:
    """
    PAA — Piecewise Aggregate Approximation.

    Consecutive pieces of q values are aggregated into one value each.
    A trailing partial piece (len(x) % q != 0) is aggregated on its own.

    Args:
        x: Non-empty numeric series
        q: Length of a piece (>= 1)
        aggregate: Aggregation name or callable (default: mean)

    Returns:
        Array of ceil(len(x) / q) aggregated values
    """
    if q < 1:
        raise InvalidParameterError(f"q must be >= 1, got {q}")

    values = as_series(x, min_length=1)
    func = resolve_aggregate(aggregate)

    return np.array(
        [float(func(values[start:start + q])) for start in range(0, len(values), q)],
        dtype=np.float64,
    )


def repr_seas_profile(
    x: SeriesLike,
    freq: int,
    aggregate: Union[str, AggregationFn] = "mean",
) -> np.ndarray:
    """
    Seasonal profile of a series.

    Value i aggregates x[i], x[i + freq], x[i + 2*freq], ... over the
    complete seasons only; a trailing incomplete season is ignored.

    Args:
        x: Numeric series with at least one complete season
        freq: Season length (>= 1)
        aggregate: Aggregation name or callable (default: mean)

    Returns:
        Array of length freq
    """
    if freq < 1:
        raise InvalidParameterError(f"freq must be >= 1, got {freq}")

    values = as_series(x, min_length=1)
    seasons = len(values) // freq
    if seasons == 0:
        raise InvalidLengthError(
            f"Series of length {len(values)} holds no complete season of length {freq}"
        )

    func = resolve_aggregate(aggregate)
    usable = values[:seasons * freq]

    return np.array(
        [float(func(usable[i::freq])) for i in range(freq)],
        dtype=np.float64,
    )
