"""
Feature Extraction Tests — FeaClip, FeaTrend, FeaClipTrend

Tests verify:
- FeaClip slot assignment against a reference built from the runs
- Boundary slots and partition slots are independent
- FeaTrend per-segment aggregation and remainder dropping
- Segment independence (one segment never leaks into another)
- Zero default for empty run partitions
- Fail-fast on short inputs
- Idempotency (same input = same output)
- Pydantic schema validation
"""

from datetime import datetime, timezone

import numpy as np
import pytest

from tsrepr.aggregation import max_agg, sum_agg
from tsrepr.encoding.bits import clipping, trending
from tsrepr.encoding.rle import rle_encode
from tsrepr.errors import InvalidLengthError, InvalidParameterError
from tsrepr.features.calculator import (
    FEACLIP_NAMES,
    feaclip,
    featrend,
    feacliptrend,
    feaclip_feature_names,
    featrend_feature_names,
    feacliptrend_feature_names,
)
from tsrepr.features.schemas import (
    FeaClipFeatures,
    RepresentationMethod,
    RepresentationRecord,
)
from tsrepr.windows import moving_average


def create_test_series(n_points: int = 100, seed: int = 42) -> np.ndarray:
    """Create a deterministic noisy sine wave."""
    rng = np.random.RandomState(seed)
    t = np.linspace(0, 4 * np.pi, n_points)
    return np.sin(t) + rng.normal(0.0, 0.3, n_points)


def reference_feaclip(x) -> list:
    """Straightforward FeaClip, written from the run list."""
    runs = rle_encode(clipping(x))
    ones = [r.length for r in runs if r.value == 1]
    zeros = [r.length for r in runs if r.value == 0]
    first, last = runs[0], runs[-1]
    return [
        max(ones) if ones else 0,
        sum(ones) if ones else 0,
        max(zeros) if zeros else 0,
        len(runs) - 1,
        first.length if first.value == 0 else 0,
        last.length if last.value == 0 else 0,
        first.length if first.value == 1 else 0,
        last.length if last.value == 1 else 0,
    ]


def recurrence_moving_average(x, order) -> np.ndarray:
    """out[i] = out[i-1] + x[i+order]/order - x[i-1]/order, one step at a time."""
    x = np.asarray(x, dtype=np.float64)
    out = [x[:order].sum() / order]
    for i in range(1, len(x) - order):
        out.append(out[-1] + x[i + order] / order - x[i - 1] / order)
    return np.array(out)


def reference_featrend(x, aggregate, pieces, order, smooth=moving_average) -> list:
    """Straightforward FeaTrend, written from the building blocks."""
    sma = smooth(x, order)
    n_piece = len(sma) // pieces
    result = []
    for j in range(pieces):
        runs = rle_encode(trending(sma[j * n_piece:(j + 1) * n_piece]))
        ones = [r.length for r in runs if r.value == 1]
        zeros = [r.length for r in runs if r.value == 0]
        result.append(aggregate(ones) if ones else 0)
        result.append(aggregate(zeros) if zeros else 0)
    return result


class TestFeaClip:
    """Test FeaClip representation."""

    def test_fixture_matches_reference(self):
        """[1,1,1,2,2,3,1,1] -> bits 00011100 -> runs (0,3),(1,3),(0,2)"""
        x = [1, 1, 1, 2, 2, 3, 1, 1]
        result = feaclip(x)

        assert result.tolist() == reference_feaclip(x)
        assert result.tolist() == [3, 3, 3, 2, 3, 2, 0, 0]

    def test_length_is_eight(self):
        assert len(feaclip(create_test_series())) == 8

    def test_ones_at_both_ends(self):
        """[3,1,1,3] -> bits 1001 -> runs (1,1),(0,2),(1,1)"""
        result = feaclip([3.0, 1.0, 1.0, 3.0])
        assert result.tolist() == [1, 2, 2, 2, 0, 0, 1, 1]

    def test_single_run_is_first_and_last(self):
        """Constant series: one run of zeros fills both boundary slots."""
        result = feaclip([5.0, 5.0, 5.0])
        assert result.tolist() == [0, 0, 3, 0, 3, 3, 0, 0]

    def test_single_element(self):
        assert feaclip([7.0]).tolist() == [0, 0, 1, 0, 1, 1, 0, 0]

    def test_crossings_slot_invariant(self):
        """Slot 3 equals the number of runs minus one."""
        for seed in range(10):
            x = create_test_series(seed=seed)
            assert feaclip(x)[3] == len(rle_encode(clipping(x))) - 1

    def test_random_series_match_reference(self):
        for seed in range(10):
            x = create_test_series(n_points=60, seed=seed)
            assert feaclip(x).tolist() == reference_feaclip(x)

    def test_sum_ones_counts_values_above_mean(self):
        x = create_test_series()
        assert feaclip(x)[1] == np.sum(x > x.mean())

    def test_empty_rejected(self):
        with pytest.raises(InvalidLengthError):
            feaclip([])

    def test_idempotency(self):
        x = create_test_series()
        np.testing.assert_array_equal(feaclip(x), feaclip(x))


class TestFeaTrend:
    """Test FeaTrend representation."""

    def test_known_values(self):
        """
        order=1 smooths [10,9,8,7,6,5,6,7,8,9] to [10,8,6,4,2,2,4,6,8].
        Segments of 4 (last value dropped): [10,8,6,4] and [2,2,4,6].
        """
        x = [10, 9, 8, 7, 6, 5, 6, 7, 8, 9]
        result = featrend(x, max_agg, pieces=2, order=1)
        assert result.tolist() == [0, 3, 2, 1]

    def test_monotone_series(self):
        """An increasing series has only runs of ones."""
        x = np.arange(1.0, 11.0)
        result = featrend(x, "sum", pieces=2, order=2)
        assert result.tolist() == [3, 0, 3, 0]

    def test_length_is_two_per_piece(self):
        x = create_test_series()
        for pieces in [1, 2, 4, 8]:
            assert len(featrend(x, "max", pieces=pieces)) == 2 * pieces

    def test_random_series_match_reference(self):
        for seed in range(5):
            x = create_test_series(seed=seed)
            for aggregate in (max_agg, sum_agg):
                expected = reference_featrend(x, aggregate, pieces=4, order=4)
                np.testing.assert_allclose(
                    featrend(x, aggregate, pieces=4, order=4), expected
                )

    def test_name_and_callable_agree(self):
        x = create_test_series()
        np.testing.assert_array_equal(
            featrend(x, "sum", pieces=3, order=5),
            featrend(x, sum_agg, pieces=3, order=5),
        )

    def test_custom_callable(self):
        """Any sequence -> float callable can aggregate."""
        x = create_test_series()
        result = featrend(x, lambda v: float(len(v)), pieces=2)
        assert np.all(result >= 0)

    def test_remainder_is_dropped(self):
        """Values past pieces * segment_length never affect the result."""
        x = create_test_series(n_points=25)  # sma length 21, segments of 10
        changed = x.copy()
        changed[-1] += 100.0

        np.testing.assert_array_equal(
            featrend(x, "max", pieces=2, order=4),
            featrend(changed, "max", pieces=2, order=4),
        )

    def test_segment_independence(self):
        """Altering segment 1 only changes slots 2 and 3."""
        x = create_test_series(n_points=24)  # sma length 20, segments [0:10], [10:20]
        changed = x.copy()
        changed[16] += 5.0  # moves sma[12:17] only

        before = featrend(x, "max", pieces=2, order=4)
        after = featrend(changed, "max", pieces=2, order=4)

        np.testing.assert_array_equal(before[:2], after[:2])

    def test_segment_change_reaches_its_slots(self):
        """
        order=1 smooths arange(22) to a strictly increasing series.
        Lowering x[15] by 100 lowers sma[14:16] only, breaking the rise
        inside segment 1 (sma[10:20]) with a single falling step.
        """
        x = np.arange(22.0)
        changed = x.copy()
        changed[15] -= 100.0

        before = featrend(x, "max", pieces=2, order=1)
        after = featrend(changed, "max", pieces=2, order=1)

        assert before.tolist() == [9, 0, 9, 0]
        assert after.tolist() == [9, 0, 5, 1]

    def test_quantized_series_match_recurrence_reference(self):
        """Ties between entering and leaving values must not flip trend bits."""
        rng = np.random.RandomState(11)
        for _ in range(20):
            x = rng.choice([0.0, 0.1, 0.2], size=40)
            expected = reference_featrend(
                x, max_agg, pieces=2, order=3, smooth=recurrence_moving_average
            )
            assert featrend(x, "max", pieces=2, order=3).tolist() == expected

    def test_empty_partition_defaults_to_zero(self):
        x = np.arange(20.0)
        result = featrend(x, "max", pieces=2, order=4)
        assert result[1] == 0
        assert result[3] == 0

    def test_too_many_pieces(self):
        """Segments shorter than 2 values cannot be trend-encoded."""
        with pytest.raises(InvalidLengthError):
            featrend(np.arange(10.0), "max", pieces=4, order=4)

    def test_order_too_large(self):
        with pytest.raises(InvalidLengthError):
            featrend([1.0, 2.0, 3.0, 4.0], "max", pieces=1, order=4)

    def test_invalid_pieces(self):
        with pytest.raises(InvalidParameterError):
            featrend(create_test_series(), "max", pieces=0)

    def test_unknown_aggregate(self):
        with pytest.raises(InvalidParameterError):
            featrend(create_test_series(), "variance")

    def test_idempotency(self):
        x = create_test_series()
        np.testing.assert_array_equal(
            featrend(x, "sum", pieces=4, order=4),
            featrend(x, "sum", pieces=4, order=4),
        )


class TestFeaClipTrend:
    """Test the concatenated representation."""

    def test_is_concatenation(self):
        x = create_test_series()
        result = feacliptrend(x, "max", pieces=3, order=4)

        assert len(result) == 8 + 2 * 3
        np.testing.assert_array_equal(result[:8], feaclip(x))
        np.testing.assert_array_equal(result[8:], featrend(x, "max", pieces=3, order=4))

    def test_default_parameters(self):
        assert len(feacliptrend(create_test_series(), "max")) == 12

    def test_input_not_modified(self):
        x = create_test_series()
        original = x.copy()
        feacliptrend(x, "sum")
        np.testing.assert_array_equal(x, original)


class TestFeatureNames:
    """Test canonical feature names."""

    def test_feaclip_names(self):
        assert feaclip_feature_names() == FEACLIP_NAMES
        assert len(feaclip_feature_names()) == 8

    def test_featrend_names(self):
        assert featrend_feature_names(2) == [
            "trend_ones_0", "trend_zeros_0", "trend_ones_1", "trend_zeros_1",
        ]

    def test_feacliptrend_names(self):
        names = feacliptrend_feature_names(3)
        assert len(names) == 14
        assert names[:8] == FEACLIP_NAMES


class TestFeatureSchemas:
    """Test Pydantic schema validation."""

    def test_feaclip_features_round_trip(self):
        vector = feaclip([1, 1, 1, 2, 2, 3, 1, 1])
        features = FeaClipFeatures.from_vector(vector)

        assert features.max_zeros == 3
        assert features.crossings == 2
        assert features.to_vector() == vector.tolist()

    def test_feaclip_features_wrong_length(self):
        with pytest.raises(ValueError):
            FeaClipFeatures.from_vector([1.0, 2.0])

    def test_feaclip_features_negative_rejected(self):
        with pytest.raises(ValueError):
            FeaClipFeatures(max_ones=-1.0)

    def test_record_lengths_must_match(self):
        with pytest.raises(ValueError):
            RepresentationRecord(
                series_id="s-1",
                method=RepresentationMethod.FEACLIP,
                feature_names=["a", "b"],
                values=[1.0],
            )

    def test_record_timestamp_required_utc(self):
        with pytest.raises(ValueError):
            RepresentationRecord(
                series_id="s-1",
                method="feaclip",
                computed_at=datetime(2026, 1, 1, 12, 0),  # Naive datetime
                feature_names=["a"],
                values=[1.0],
            )

    def test_record_valid(self):
        record = RepresentationRecord(
            series_id="s-1",
            method="featrend",
            computed_at=datetime.now(timezone.utc),
            feature_names=["trend_ones_0", "trend_zeros_0"],
            values=[2.0, 3.0],
        )

        assert record.method is RepresentationMethod.FEATREND
        assert record.as_dict() == {"trend_ones_0": 2.0, "trend_zeros_0": 3.0}
