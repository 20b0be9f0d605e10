"""Unit tests for AggregationService and RunningMoments."""
import numpy as np
import pytest

from faithprofile.catalog import DIMENSIONS, PROFILE_CATALOG, Dimension
from faithprofile.config import Settings
from faithprofile.engine import ScoringEngine
from faithprofile.services.aggregation_service import RunningMoments, default_segment_keys


class TestRunningMoments:
    """Streaming mean and co-moments."""

    def test_matches_numpy(self):
        rows = np.array([[1.0, 2.0, 5.0], [2.0, 4.0, 4.0], [3.0, 6.5, 1.0], [4.0, 7.0, 2.0]])
        moments = RunningMoments(3)
        for row in rows:
            moments.add(row)
        assert moments.n == 4
        np.testing.assert_allclose(moments.mean, rows.mean(axis=0))
        np.testing.assert_allclose(moments.stddev(), rows.std(axis=0))
        np.testing.assert_allclose(moments.correlation(), np.corrcoef(rows, rowvar=False))

    def test_merge_equals_single_pass(self):
        rows = np.array([[1.0, 3.0], [2.0, 1.0], [4.0, 4.0], [5.0, 2.5], [3.0, 3.0]])
        single = RunningMoments(2)
        for row in rows:
            single.add(row)
        left, right = RunningMoments(2), RunningMoments(2)
        for row in rows[:2]:
            left.add(row)
        for row in rows[2:]:
            right.add(row)
        merged = left.merge(right)
        assert merged.n == single.n
        np.testing.assert_allclose(merged.mean, single.mean)
        np.testing.assert_allclose(merged.comoment, single.comoment)

    def test_merge_into_empty(self):
        full = RunningMoments(2)
        full.add([1.0, 2.0])
        merged = RunningMoments(2).merge(full)
        assert merged.n == 1
        np.testing.assert_allclose(merged.mean, [1.0, 2.0])

    def test_zero_variance_correlation_is_zero(self):
        moments = RunningMoments(2)
        for x in (1.0, 2.0, 3.0):
            moments.add([x, 4.0])
        matrix = moments.correlation()
        assert matrix[0, 1] == 0.0
        assert matrix[1, 0] == 0.0
        assert matrix[1, 1] == 1.0
        assert not np.isnan(matrix).any()

    def test_width_mismatch(self):
        with pytest.raises(ValueError):
            RunningMoments(2).add([1.0, 2.0, 3.0])


class TestEmptyCollection:
    """No respondents is a defined result, not an error."""

    def test_no_data(self, engine):
        stats = engine.aggregate([])
        assert stats.n == 0
        assert all(stats.dimensions[d] is None for d in DIMENSIONS)
        assert all(value is None for value in stats.validated_means.values())
        assert stats.low_confidence
        assert stats.moderate_confidence
        assert stats.key_findings == []
        assert stats.segments == {}
        assert stats.to_population_parameters() is None
        for row in DIMENSIONS:
            for col in DIMENSIONS:
                assert stats.correlation_matrix[row][col] == (1.0 if row == col else 0.0)


class TestPopulationStats:
    """Statistics over scored respondents."""

    def test_mixed_population(self, engine, traditionalist_answers, pioneer_answers):
        stats = engine.aggregate([traditionalist_answers, pioneer_answers, traditionalist_answers])
        assert stats.n == 3
        religiosity = stats.dimensions[Dimension.RELIGIOSITY]
        # values 5.0, 2.8, 5.0
        assert religiosity.mean == pytest.approx(4.27)
        assert religiosity.median == 5.0
        assert religiosity.distribution == [0, 0, 1, 0, 2]
        assert stats.profile_histogram["gardien_tradition"] == 2
        assert stats.profile_histogram["pionnier_spirituel"] == 1
        assert set(stats.profile_histogram) == {p.id for p in PROFILE_CATALOG}
        assert stats.validated_means["crs5"] == pytest.approx(4.27)

    def test_correlation_symmetric_with_unit_diagonal(self, engine, traditionalist_answers, pioneer_answers):
        stats = engine.aggregate([traditionalist_answers, pioneer_answers, {}])
        for row in DIMENSIONS:
            assert stats.correlation_matrix[row][row] == 1.0
            for col in DIMENSIONS:
                assert stats.correlation_matrix[row][col] == stats.correlation_matrix[col][row]
                assert -1.0 <= stats.correlation_matrix[row][col] <= 1.0

    def test_identical_respondents_zero_correlation(self, engine, pioneer_answers):
        stats = engine.aggregate([pioneer_answers] * 5)
        assert stats.dimensions[Dimension.AI_OPENNESS].stddev == 0.0
        assert stats.correlation_matrix[Dimension.AI_OPENNESS][Dimension.RELIGIOSITY] == 0.0

    def test_accepts_generator(self, engine, pioneer_answers):
        stats = engine.aggregate(dict(pioneer_answers) for _ in range(4))
        assert stats.n == 4


class TestCaveats:
    """Sample-size flags are always computed."""

    def test_29_is_low_confidence(self, engine):
        stats = engine.aggregate([{}] * 29)
        assert stats.low_confidence
        assert stats.caveat.confidence_level == "low"

    def test_30_is_not_low_confidence(self, engine):
        stats = engine.aggregate([{}] * 30)
        assert not stats.low_confidence
        assert stats.moderate_confidence
        assert stats.caveat.confidence_level == "moderate"

    def test_100_is_high_confidence(self, engine):
        stats = engine.aggregate([{}] * 100)
        assert not stats.moderate_confidence
        assert stats.caveat.confidence_level == "high"

    def test_recalibration_ready(self):
        engine = ScoringEngine(Settings(_env_file=None, RECALIBRATION_THRESHOLD=10))
        assert not engine.aggregate([{}] * 9).recalibration_ready
        assert engine.aggregate([{}] * 10).recalibration_ready

    def test_measured_parameters(self, engine, traditionalist_answers, pioneer_answers):
        stats = engine.aggregate([traditionalist_answers, pioneer_answers])
        population = stats.to_population_parameters()
        assert population.source == "measured"
        assert population.n == 2
        assert population.dimensions[Dimension.RELIGIOSITY].mean == pytest.approx(3.9)


class TestSegments:
    """Per-segment statistics."""

    def test_default_segment_keys(self, traditionalist_answers):
        assert default_segment_keys(traditionalist_answers) == {
            "role": "clergy",
            "denomination": "catholique",
            "age": "66+",
        }

    def test_unanswered_axis_is_none(self):
        assert default_segment_keys({}) == {"role": "other", "denomination": None, "age": None}

    def test_segments_by_role(self, engine, traditionalist_answers, pioneer_answers):
        stats = engine.aggregate([traditionalist_answers, pioneer_answers, pioneer_answers])
        assert stats.segments["role"]["clergy"].n == 1
        assert stats.segments["role"]["laity"].n == 2
        assert stats.segments["role"]["clergy"].caveat.low_confidence
        assert stats.segments["denomination"]["protestant"].n == 2

    def test_custom_segment_function(self, engine, traditionalist_answers, pioneer_answers):
        stats = engine.aggregate(
            [traditionalist_answers, pioneer_answers],
            segment_key_fn=lambda answers: {"wave": "pilot"},
        )
        assert list(stats.segments) == ["wave"]
        assert stats.segments["wave"]["pilot"].n == 2

    def test_non_string_segments_keyed_by_text(self, engine, traditionalist_answers, pioneer_answers):
        stats = engine.aggregate(
            [traditionalist_answers, pioneer_answers, pioneer_answers],
            segment_key_fn=lambda answers: {"age": 30 if answers is traditionalist_answers else 7},
        )
        assert list(stats.segments["age"]) == ["30", "7"]
        assert stats.segments["age"]["7"].n == 2


class TestKeyFindings:
    """Deterministic findings over the population."""

    def test_segment_delta_finding(self, engine, traditionalist_answers, pioneer_answers):
        stats = engine.aggregate([traditionalist_answers, pioneer_answers])
        titles = [f.title for f in stats.key_findings]
        assert "Écart marqué selon role" in titles

    def test_correlation_finding(self, engine, traditionalist_answers, pioneer_answers):
        stats = engine.aggregate([traditionalist_answers, pioneer_answers, {}])
        assert any(f.type == "correlation" for f in stats.key_findings)

    def test_capped_and_deterministic(self, engine, traditionalist_answers, pioneer_answers):
        collection = [traditionalist_answers, pioneer_answers, {}] * 40
        first = engine.aggregate(collection)
        second = engine.aggregate(collection)
        assert len(first.key_findings) <= 6
        assert first.key_findings == second.key_findings

    def test_sample_size_finding(self, engine):
        stats = engine.aggregate([{}] * 100)
        assert [f.title for f in stats.key_findings] == ["Échantillon significatif"]
