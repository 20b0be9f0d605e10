"""Integration tests for the ScoringEngine facade."""
import pytest

import faithprofile
from faithprofile.catalog import DIMENSIONS, Dimension
from faithprofile.engine import ScoringEngine, get_engine
from faithprofile.exceptions import ConfigurationError
from faithprofile.schemas.population import DimensionParameters, PopulationParameters
from faithprofile.schemas.profile import ProfileSpectrum


class TestProfileSpectrum:
    """End-to-end scoring of a single respondent."""

    def test_full_result(self, engine, pioneer_answers):
        spectrum = engine.compute_profile_spectrum(pioneer_answers)
        assert isinstance(spectrum, ProfileSpectrum)
        assert spectrum.primary == spectrum.all_matches[0]
        assert spectrum.interpretation.headline.startswith("Pionnier Spirituel")
        assert 2 <= len(spectrum.interpretation.strengths) <= 4
        assert 1 <= len(spectrum.interpretation.unique_aspects) <= 3
        assert 1 <= len(spectrum.interpretation.blind_spots) <= 3
        assert len(spectrum.tensions) <= 3
        assert 1 <= len(spectrum.growth_areas) <= 2
        assert len(spectrum.insights) <= 4

    def test_empty_answers_never_fail(self, engine):
        """An empty answer set still yields a complete, neutral result."""
        spectrum = engine.compute_profile_spectrum({})
        for dimension in DIMENSIONS:
            assert spectrum.dimensions.value_of(dimension) == 3.0
        assert spectrum.primary.profile_id
        assert spectrum.sub_profile.profile_id

    def test_answers_not_mutated(self, engine, traditionalist_answers):
        snapshot = dict(traditionalist_answers)
        engine.compute_profile_spectrum(traditionalist_answers)
        assert traditionalist_answers == snapshot

    def test_deterministic(self, engine, traditionalist_answers):
        first = engine.compute_profile_spectrum(traditionalist_answers)
        second = engine.compute_profile_spectrum(traditionalist_answers)
        assert first.model_dump() == second.model_dump()

    def test_serialisable(self, engine, pioneer_answers):
        payload = engine.compute_profile_spectrum(pioneer_answers).model_dump(mode="json")
        assert payload["dimensions"]["ai_openness"]["value"] == 4.9

    def test_measured_population_changes_percentiles_only(self, engine, traditionalist_answers, pioneer_answers):
        population = engine.aggregate([traditionalist_answers, pioneer_answers]).to_population_parameters()
        provisional = engine.compute_profile_spectrum(traditionalist_answers)
        measured = engine.compute_profile_spectrum(traditionalist_answers, population)
        assert provisional.dimensions.as_values() == measured.dimensions.as_values()
        assert provisional.primary == measured.primary

    def test_population_covering_one_dimension(self, engine, pioneer_answers):
        """Dimensions the population omits use the provisional parameters."""
        population = PopulationParameters(
            dimensions={Dimension.RELIGIOSITY: DimensionParameters(mean=3.0, stddev=1.0)},
            source="measured",
        )
        provisional = engine.compute_profile_spectrum(pioneer_answers)
        partial = engine.compute_profile_spectrum(pioneer_answers, population)
        # 2.8 vs N(3.0, 1.0)
        assert partial.dimensions.get(Dimension.RELIGIOSITY).percentile == 42
        assert (
            partial.dimensions.get(Dimension.AI_OPENNESS).percentile
            == provisional.dimensions.get(Dimension.AI_OPENNESS).percentile
        )
        assert [a.dimension for a in partial.growth_areas] == [
            Dimension.ETHICAL_CONCERN,
            Dimension.SACRED_BOUNDARY,
        ]


class TestBiasCorrection:
    """Social-desirability answers lower susceptible dimensions."""

    def test_keyed_answers_lower_religiosity(self, engine, traditionalist_answers):
        biased = dict(traditionalist_answers)
        biased.update({
            "ctrl_mc_1": "false",
            "ctrl_mc_2": "true",
            "ctrl_mc_3": "false",
            "ctrl_mc_4": "true",
            "ctrl_mc_5": "false",
        })
        plain = engine.compute_profile_spectrum(traditionalist_answers).dimensions
        corrected = engine.compute_profile_spectrum(biased).dimensions
        # 5.0 − 10 × 0.8 × 0.05
        assert corrected.value_of(Dimension.RELIGIOSITY) == 4.6
        assert corrected.get(Dimension.RELIGIOSITY).confidence == 0.7
        assert plain.get(Dimension.RELIGIOSITY).confidence == 1.0


class TestValidatedScores:
    """Validated scales through the facade."""

    def test_documented_crs_example(self, engine):
        assert engine.compute_validated_scores({"crs_intellect": "souvent"}).crs5 == 3.2

    def test_resistance_from_dimensions(self, engine, pioneer_answers):
        assert engine.compute_validated_scores(pioneer_answers).resistance_index == -2.8


class TestConstruction:
    """Catalog validation at start-up."""

    def test_invalid_population_params_refused(self, settings):
        broken = settings.model_copy(update={
            "POPULATION_PARAMS": {k: v for k, v in settings.POPULATION_PARAMS.items() if k != "religiosity"},
        })
        with pytest.raises(ConfigurationError):
            ScoringEngine(broken)

    def test_default_engine_is_shared(self):
        assert get_engine() is get_engine()

    def test_module_level_functions(self, pioneer_answers):
        spectrum = faithprofile.compute_profile_spectrum(pioneer_answers)
        assert spectrum.primary.profile_id == "pionnier_spirituel"
        assert faithprofile.compute_validated_scores(pioneer_answers).ai_adoption == 4.9
        assert faithprofile.aggregate([pioneer_answers]).n == 1
