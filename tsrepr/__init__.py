"""
tsrepr — Bit-Level Time Series Representations

Converts a numeric series into a compact fixed-length feature vector:

    series -> clipping / trending bits -> run-length encoding -> features

Public API:
- clipping, trending: Bit encoders
- rle_encode, rle_decode: Run-length codec
- feaclip, featrend, feacliptrend: Feature vectors
- moving_average, repr_paa, repr_seas_profile: Windowed representations
- RepresentationEngine: Parameter-bound batch extraction
"""

from .aggregation import (
    AGGREGATIONS,
    max_agg,
    min_agg,
    mean_agg,
    sum_agg,
    median_agg,
)
from .encoding import Run, clipping, trending, rle_encode, rle_decode
from .errors import InvalidAggregateError, InvalidLengthError, InvalidParameterError
from .features import (
    FeaClipFeatures,
    RepresentationEngine,
    RepresentationMethod,
    RepresentationRecord,
    feaclip,
    featrend,
    feacliptrend,
)
from .windows import moving_average, repr_paa, repr_seas_profile

__version__ = "0.1.0"

__all__ = [
    "AGGREGATIONS",
    "max_agg",
    "min_agg",
    "mean_agg",
    "sum_agg",
    "median_agg",
    "Run",
    "clipping",
    "trending",
    "rle_encode",
    "rle_decode",
    "InvalidAggregateError",
    "InvalidLengthError",
    "InvalidParameterError",
    "FeaClipFeatures",
    "RepresentationEngine",
    "RepresentationMethod",
    "RepresentationRecord",
    "feaclip",
    "featrend",
    "feacliptrend",
    "moving_average",
    "repr_paa",
    "repr_seas_profile",
]
