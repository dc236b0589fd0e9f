"""
Representation Engine — Feature Extraction Orchestrator

Binds FeaTrend parameters once and applies a representation to a single
series or to every row of a matrix of series.

Stateless and idempotent: the engine only stores parameters, every call
computes from scratch.
"""

import logging
from typing import List, Optional, Sequence, Union
from uuid import uuid4

import numpy as np
import pandas as pd

from tsrepr.aggregation import AggregationFn, aggregate_name, resolve_aggregate
from tsrepr.config import settings
from tsrepr.encoding.bits import SeriesLike, as_series
from tsrepr.errors import InvalidParameterError

from .calculator import (
    feaclip,
    featrend,
    feacliptrend,
    feaclip_feature_names,
    featrend_feature_names,
    feacliptrend_feature_names,
)
from .schemas import RepresentationMethod, RepresentationParams, RepresentationRecord

logger = logging.getLogger(__name__)


class RepresentationEngine:
    """
    Computes bit-level representations with fixed parameters.

    Parameters left as None fall back to the library settings
    (TSREPR_DEFAULT_PIECES, TSREPR_DEFAULT_ORDER, TSREPR_DEFAULT_AGGREGATE).
    """

    def __init__(
        self,
        pieces: Optional[int] = None,
        order: Optional[int] = None,
        aggregate: Union[str, AggregationFn, None] = None,
    ):
        """
        Initialize the engine.

        Args:
            pieces: FeaTrend segments
            order: Moving average order for FeaTrend
            aggregate: Aggregation name or callable for FeaTrend

        Raises:
            InvalidParameterError: If pieces/order < 1 or aggregate is unknown
        """
        self.pieces = settings.DEFAULT_PIECES if pieces is None else pieces
        self.order = settings.DEFAULT_ORDER if order is None else order
        if self.pieces < 1:
            raise InvalidParameterError(f"pieces must be >= 1, got {self.pieces}")
        if self.order < 1:
            raise InvalidParameterError(f"order must be >= 1, got {self.order}")

        aggregate = settings.DEFAULT_AGGREGATE if aggregate is None else aggregate
        self._aggregate = resolve_aggregate(aggregate)
        self.aggregate_name = aggregate_name(aggregate)

    def feature_names(self, method: Union[str, RepresentationMethod]) -> List[str]:
        """Ordered feature names produced by `method` with these parameters."""
        method = self._resolve_method(method)
        if method is RepresentationMethod.FEACLIP:
            return feaclip_feature_names()
        if method is RepresentationMethod.FEATREND:
            return featrend_feature_names(self.pieces)
        return feacliptrend_feature_names(self.pieces)

    def compute(
        self,
        series: SeriesLike,
        method: Union[str, RepresentationMethod] = RepresentationMethod.FEACLIPTREND,
        series_id: Optional[str] = None,
    ) -> RepresentationRecord:
        """
        Compute one representation of one series.

        Args:
            series: Numeric series
            method: Representation to compute (default: feacliptrend)
            series_id: Identifier stored in the record (default: random UUID)

        Returns:
            RepresentationRecord with named feature values
        """
        method = self._resolve_method(method)
        values = as_series(series)

        if method is not RepresentationMethod.FEACLIP:
            self._warn_on_dropped_values(len(values))

        vector = self._vector(values, method)

        record = RepresentationRecord(
            series_id=series_id if series_id is not None else str(uuid4()),
            method=method,
            params=self._params(method),
            feature_names=self.feature_names(method),
            values=vector.tolist(),
        )

        logger.debug(
            f"[RepresentationEngine] {method.value} for {record.series_id}: "
            f"{len(record.values)} features"
        )

        return record

    def compute_matrix(
        self,
        data: Union[pd.DataFrame, np.ndarray, Sequence[SeriesLike]],
        method: Union[str, RepresentationMethod] = RepresentationMethod.FEACLIPTREND,
    ) -> pd.DataFrame:
        """
        Compute a representation for every row of `data`.

        Args:
            data: DataFrame or 2-D array (one series per row), or a
                  sequence of series (lengths may differ)
            method: Representation to compute

        Returns:
            DataFrame with one row per series and one column per feature.
            A DataFrame input keeps its index.
        """
        method = self._resolve_method(method)

        if isinstance(data, pd.DataFrame):
            index = data.index
            rows = list(data.to_numpy(dtype=np.float64))
        else:
            rows = list(data)
            index = pd.RangeIndex(len(rows))

        series = [as_series(row) for row in rows]

        if method is not RepresentationMethod.FEACLIP:
            for length in sorted({len(s) for s in series}):
                self._warn_on_dropped_values(length)

        vectors = [self._vector(s, method) for s in series]
        columns = self.feature_names(method)

        logger.info(
            f"[RepresentationEngine] {method.value} computed for {len(vectors)} series"
        )

        if not vectors:
            return pd.DataFrame(columns=columns, index=index, dtype=np.float64)

        return pd.DataFrame(np.vstack(vectors), columns=columns, index=index)

    def _vector(self, values: np.ndarray, method: RepresentationMethod) -> np.ndarray:
        """Dispatch to the calculator."""
        if method is RepresentationMethod.FEACLIP:
            return feaclip(values)
        if method is RepresentationMethod.FEATREND:
            return featrend(values, self._aggregate, pieces=self.pieces, order=self.order)
        return feacliptrend(values, self._aggregate, pieces=self.pieces, order=self.order)

    def _params(self, method: RepresentationMethod) -> RepresentationParams:
        if method is RepresentationMethod.FEACLIP:
            return RepresentationParams()
        return RepresentationParams(
            pieces=self.pieces,
            order=self.order,
            aggregate=self.aggregate_name,
        )

    def _warn_on_dropped_values(self, length: int) -> None:
        """Log when FeaTrend segments leave smoothed values unused."""
        n_sma = length - self.order
        if n_sma <= 0:
            return
        dropped = n_sma % self.pieces
        if dropped:
            logger.warning(
                f"[RepresentationEngine] Series of length {length}: {dropped} "
                f"smoothed value(s) fall outside the {self.pieces} FeaTrend segments "
                f"and are ignored"
            )

    @staticmethod
    def _resolve_method(method: Union[str, RepresentationMethod]) -> RepresentationMethod:
        try:
            return RepresentationMethod(method)
        except ValueError:
            raise InvalidParameterError(
                f"Unknown representation '{method}'. "
                f"Expected one of: {[m.value for m in RepresentationMethod]}"
            ) from None
