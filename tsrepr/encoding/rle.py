"""
Run-Length Codec — (value, length) Compression of Discrete Sequences

A run is a maximal block of equal consecutive values. Encoding is a single
left-to-right pass; adjacent runs never share a value and expanding the
runs reproduces the input exactly.

The codec is value-agnostic: it only needs equality, so it works for the
0/1 output of the bit encoders as well as labels or integers.
"""

from dataclasses import dataclass
from typing import Any, List, Sequence, Tuple

import numpy as np
import pandas as pd

from tsrepr.errors import InvalidLengthError


@dataclass(frozen=True)
class Run:
    """A block of `length` consecutive copies of `value`."""
    value: Any
    length: int


def _plain(value: Any) -> Any:
    """Unwrap numpy scalars so runs hold plain Python values."""
    if isinstance(value, np.generic):
        return value.item()
    return value


def rle_encode(seq: Sequence[Any]) -> List[Run]:
    """
    Run-length encode a non-empty sequence.

    Args:
        seq: Sequence of equality-comparable values (e.g. clipping output)

    Returns:
        List of maximal runs, in order

    Raises:
        InvalidLengthError: If seq is empty
    """
    if isinstance(seq, pd.Series):
        seq = seq.to_numpy()

    if len(seq) == 0:
        raise InvalidLengthError("Cannot run-length encode an empty sequence")

    runs: List[Run] = []
    prev = _plain(seq[0])
    length = 1

    for item in seq[1:]:
        item = _plain(item)
        if item == prev:
            length += 1
        else:
            runs.append(Run(value=prev, length=length))
            prev = item
            length = 1

    runs.append(Run(value=prev, length=length))

    return runs


def rle_decode(runs: Sequence[Run]) -> np.ndarray:
    """Expand runs back into the flat sequence they encode."""
    values, lengths = run_arrays(runs)
    return np.repeat(values, lengths)


def run_arrays(runs: Sequence[Run]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Column view of a run list.

    Returns:
        (values, lengths) as two aligned numpy arrays
    """
    values = np.array([run.value for run in runs])
    lengths = np.array([run.length for run in runs], dtype=np.int64)
    return values, lengths
