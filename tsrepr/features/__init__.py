"""
Features Module — Bit-Level Feature Extraction

Public API:
- RepresentationEngine: Applies a representation to one series or a matrix
- RepresentationRecord: Computed representation with metadata
- FeaClipFeatures: The eight named FeaClip features
- feaclip / featrend / feacliptrend: Vector calculators
"""

from .calculator import (
    FEACLIP_NAMES,
    feaclip,
    featrend,
    feacliptrend,
    feaclip_feature_names,
    featrend_feature_names,
    feacliptrend_feature_names,
)
from .engine import RepresentationEngine
from .schemas import (
    FeaClipFeatures,
    RepresentationMethod,
    RepresentationParams,
    RepresentationRecord,
)

__all__ = [
    "RepresentationEngine",
    "RepresentationRecord",
    "RepresentationMethod",
    "RepresentationParams",
    "FeaClipFeatures",
    "FEACLIP_NAMES",
    "feaclip",
    "featrend",
    "feacliptrend",
    "feaclip_feature_names",
    "featrend_feature_names",
    "feacliptrend_feature_names",
]
