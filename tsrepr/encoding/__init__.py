"""
Encoding Module — Bit-Level and Run-Length Encoding

Public API:
- clipping: Binary encoding against the global mean
- trending: Binary encoding of pairwise increases
- Run: A (value, length) pair
- rle_encode / rle_decode: Run-length codec
"""

from .bits import as_series, clipping, trending
from .rle import Run, rle_encode, rle_decode, run_arrays

__all__ = [
    "as_series",
    "clipping",
    "trending",
    "Run",
    "rle_encode",
    "rle_decode",
    "run_arrays",
]
