"""
Feature Calculator — FeaClip, FeaTrend and FeaClipTrend

Derives fixed-length feature vectors from the run-length encoding of a
bit-level series:

    series -> clipping / trending -> runs -> feature vector

Empty run partitions (no runs of ones, or no runs of zeros) resolve to 0,
never to an error. All calculations are stateless and idempotent.
"""

from typing import List, Sequence, Tuple, Union

import numpy as np

from tsrepr.aggregation import AggregationFn, resolve_aggregate
from tsrepr.encoding.bits import SeriesLike, as_series, clipping, trending
from tsrepr.encoding.rle import Run, rle_encode, run_arrays
from tsrepr.errors import InvalidLengthError, InvalidParameterError
from tsrepr.windows import moving_average


# FeaClip slot names, in vector order
FEACLIP_NAMES: List[str] = [
    "max_ones",     # longest run of ones
    "sum_ones",     # total count of ones
    "max_zeros",    # longest run of zeros
    "crossings",    # number of runs - 1
    "first_zeros",  # first run length if it is zeros
    "last_zeros",   # last run length if it is zeros
    "first_ones",   # first run length if it is ones
    "last_ones",    # last run length if it is ones
]
FEACLIP_LENGTH: int = len(FEACLIP_NAMES)  # 8


def feaclip_feature_names() -> List[str]:
    """Return the ordered FeaClip feature names."""
    return list(FEACLIP_NAMES)


def featrend_feature_names(pieces: int = 2) -> List[str]:
    """Return the ordered FeaTrend feature names for `pieces` segments."""
    names = []
    for j in range(pieces):
        names.append(f"trend_ones_{j}")
        names.append(f"trend_zeros_{j}")
    return names


def feacliptrend_feature_names(pieces: int = 2) -> List[str]:
    """Return the ordered FeaClipTrend feature names."""
    return feaclip_feature_names() + featrend_feature_names(pieces)


def _partition(runs: Sequence[Run]) -> Tuple[np.ndarray, np.ndarray]:
    """Split run lengths into (ones, zeros), keeping the original order."""
    values, lengths = run_arrays(runs)
    return lengths[values == 1], lengths[values == 0]


def feaclip(x: SeriesLike) -> np.ndarray:
    """
    FeaClip representation of a series.

    Partition slots (0-2) come from the ones/zeros split of the runs;
    boundary slots (4-7) come from the identity of the first and last run.
    The two are computed independently: with a single run, that run is
    both first and last.

    Args:
        x: Non-empty numeric series

    Returns:
        Array of length 8, see FEACLIP_NAMES for the slot meaning
    """
    runs = rle_encode(clipping(x))
    n_runs = len(runs)
    ones, zeros = _partition(runs)

    representation = np.zeros(FEACLIP_LENGTH, dtype=np.float64)

    if ones.size > 0:
        representation[0] = ones.max()
        representation[1] = ones.sum()
    if zeros.size > 0:
        representation[2] = zeros.max()

    representation[3] = n_runs - 1

    first, last = runs[0], runs[-1]
    representation[4] = first.length if first.value == 0 else 0
    representation[5] = last.length if last.value == 0 else 0
    representation[6] = first.length if first.value == 1 else 0
    representation[7] = last.length if last.value == 1 else 0

    return representation


def featrend(
    x: SeriesLike,
    aggregate: Union[str, AggregationFn],
    pieces: int = 2,
    order: int = 4,
) -> np.ndarray:
    """
    FeaTrend representation of a series.

    The series is smoothed by a moving average of `order`, split into
    `pieces` equal segments of floor(len(sma) / pieces) values, and each
    segment is trend-encoded. Per segment j:

        repr[2j]     = aggregate(lengths of runs of ones)
        repr[2j + 1] = aggregate(lengths of runs of zeros)

    Note:
        Smoothed values past pieces * segment_length do not belong to any
        segment and are dropped. Choose len(x) - order divisible by
        pieces to use every value.

    Args:
        x: Numeric series
        aggregate: Aggregation name ("max", "sum", ...) or callable
        pieces: Number of segments (default: 2)
        order: Moving average order (default: 4)

    Returns:
        Array of length 2 * pieces

    Raises:
        InvalidLengthError: If a segment would hold fewer than 2 values
    """
    if pieces < 1:
        raise InvalidParameterError(f"pieces must be >= 1, got {pieces}")

    func = resolve_aggregate(aggregate)
    sma = moving_average(x, order)

    n_piece = len(sma) // pieces
    if n_piece < 2:
        raise InvalidLengthError(
            f"Smoothed series of length {len(sma)} cannot be split into "
            f"{pieces} segments of at least 2 values"
        )

    representation = np.zeros(2 * pieces, dtype=np.float64)

    for j in range(pieces):
        segment = sma[j * n_piece:(j + 1) * n_piece]
        ones, zeros = _partition(rle_encode(trending(segment)))

        if ones.size > 0:
            representation[2 * j] = float(func(ones.astype(np.float64)))
        if zeros.size > 0:
            representation[2 * j + 1] = float(func(zeros.astype(np.float64)))

    return representation


def feacliptrend(
    x: SeriesLike,
    aggregate: Union[str, AggregationFn],
    pieces: int = 2,
    order: int = 4,
) -> np.ndarray:
    """
    FeaClipTrend representation: FeaClip followed by FeaTrend.

    Returns:
        Array of length 8 + 2 * pieces
    """
    values = as_series(x, min_length=1)
    return np.concatenate((
        feaclip(values),
        featrend(values, aggregate, pieces=pieces, order=order),
    ))
