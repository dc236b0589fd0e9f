"""
Bit Encoder — Clipping and Trending Representations

Turns a numeric series into a sequence of zeros and ones:
- clipping: 1 where the value is strictly above the GLOBAL mean
- trending: 1 where the series increases from one point to the next

Both are pure, vectorized and never modify the input.
"""

from typing import Sequence, Union

import numpy as np
import pandas as pd

from tsrepr.errors import InvalidLengthError, InvalidParameterError


SeriesLike = Union[Sequence[float], np.ndarray, pd.Series]


def as_series(x: SeriesLike, min_length: int = 1) -> np.ndarray:
    """
    Validate a series and return a private float64 copy.

    Args:
        x: 1-D sequence of finite numbers
        min_length: Minimum number of values required

    Returns:
        1-D numpy array (always a copy, the caller's data is untouched)

    Raises:
        InvalidParameterError: If x is not 1-D numeric or holds NaN/inf
        InvalidLengthError: If x has fewer than min_length values
    """
    if isinstance(x, pd.Series):
        x = x.to_numpy()

    try:
        values = np.array(x, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(f"Series must be numeric: {e}") from e

    if values.ndim != 1:
        raise InvalidParameterError(
            f"Series must be 1-dimensional, got shape {values.shape}"
        )

    if len(values) < min_length:
        raise InvalidLengthError(
            f"Series needs at least {min_length} value(s), got {len(values)}"
        )

    if not np.all(np.isfinite(values)):
        raise InvalidParameterError("Series contains NaN or infinite values")

    return values


def clipping(x: SeriesLike) -> np.ndarray:
    """
    Bit-level (clipping) representation of a series.

    bit[i] = 1 if x[i] > mean(x) else 0. Ties resolve to 0.

    Args:
        x: Non-empty numeric series

    Returns:
        Integer array of zeros and ones, same length as x
    """
    values = as_series(x, min_length=1)
    threshold = values.mean()

    return (values > threshold).astype(np.int64)


def trending(x: SeriesLike) -> np.ndarray:
    """
    Trend-level (trending) representation of a series.

    bit[i] = 1 if x[i] - x[i+1] < 0 (increasing step) else 0.
    Flat steps resolve to 0.

    Args:
        x: Numeric series with at least 2 values

    Returns:
        Integer array of zeros and ones, length len(x) - 1
    """
    values = as_series(x, min_length=2)

    return ((values[:-1] - values[1:]) < 0).astype(np.int64)
