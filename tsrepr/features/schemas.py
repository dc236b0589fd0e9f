"""
Representation Schemas — Feature Output Models

Named views of the feature vectors, plus the record returned by the
RepresentationEngine.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional, Sequence
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator, model_validator

from .calculator import FEACLIP_LENGTH, FEACLIP_NAMES


class RepresentationMethod(str, Enum):
    """Supported bit-level representations."""
    FEACLIP = "feaclip"
    FEATREND = "featrend"
    FEACLIPTREND = "feacliptrend"


class FeaClipFeatures(BaseModel):
    """
    The eight FeaClip features, by name.

    Partition features (max_ones, sum_ones, max_zeros) and boundary
    features (first_*/last_*) are independent: a single-run series
    fills both first_* and last_* from the same run.
    """
    max_ones: float = Field(0.0, ge=0, description="Longest run of ones")
    sum_ones: float = Field(0.0, ge=0, description="Number of ones")
    max_zeros: float = Field(0.0, ge=0, description="Longest run of zeros")
    crossings: float = Field(0.0, ge=0, description="Number of runs - 1")
    first_zeros: float = Field(0.0, ge=0, description="First run length if zeros, else 0")
    last_zeros: float = Field(0.0, ge=0, description="Last run length if zeros, else 0")
    first_ones: float = Field(0.0, ge=0, description="First run length if ones, else 0")
    last_ones: float = Field(0.0, ge=0, description="Last run length if ones, else 0")

    @classmethod
    def from_vector(cls, vector: Sequence[float]) -> "FeaClipFeatures":
        """Build from a FeaClip vector (slot order of FEACLIP_NAMES)."""
        if len(vector) != FEACLIP_LENGTH:
            raise ValueError(
                f"FeaClip vector must have {FEACLIP_LENGTH} values, got {len(vector)}"
            )
        return cls(**{name: float(v) for name, v in zip(FEACLIP_NAMES, vector)})

    def to_vector(self) -> List[float]:
        """Return the values in FeaClip slot order."""
        return [getattr(self, name) for name in FEACLIP_NAMES]


class RepresentationParams(BaseModel):
    """Parameters a representation was computed with."""
    pieces: Optional[int] = Field(None, ge=1, description="FeaTrend segments")
    order: Optional[int] = Field(None, ge=1, description="Moving average order")
    aggregate: Optional[str] = Field(None, description="Aggregation name")


class RepresentationRecord(BaseModel):
    """
    One computed representation with metadata.

    values[i] is the feature called feature_names[i].
    """
    record_id: str = Field(default_factory=lambda: str(uuid4()))
    series_id: str = Field(..., description="Identifier of the input series")
    method: RepresentationMethod
    computed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    params: RepresentationParams = Field(default_factory=RepresentationParams)
    feature_names: List[str]
    values: List[float]

    @field_validator("computed_at")
    @classmethod
    def validate_utc(cls, v: datetime) -> datetime:
        """Ensure timestamp is timezone-aware."""
        if v.tzinfo is None:
            raise ValueError("computed_at must be timezone-aware (UTC)")
        return v

    @model_validator(mode="after")
    def check_lengths(self) -> "RepresentationRecord":
        if len(self.values) != len(self.feature_names):
            raise ValueError(
                f"{len(self.values)} values for {len(self.feature_names)} feature names"
            )
        return self

    def as_dict(self) -> dict:
        """Feature name -> value mapping."""
        return dict(zip(self.feature_names, self.values))
