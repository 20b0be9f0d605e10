"""Unit tests for the static catalog and its validation."""
import pytest

from faithprofile.catalog import (
    DIMENSION_CONTRIBUTIONS,
    DIMENSIONS,
    EXPECTED_ITEMS,
    GROWTH_TEMPLATES,
    PROFILE_CATALOG,
    SUB_PROFILE_CATALOG,
    ProfileId,
    sub_profiles_of,
    validate_catalog,
)
from faithprofile.catalog.rules import ArrayLength, MatrixCell, MatrixDelegation, NumericScale
from faithprofile.catalog.score_maps import PREACHING_TASK_WEIGHTS
from faithprofile.exceptions import ConfigurationError
from faithprofile.schemas.profile import PrototypeBand


def _validate(settings, profiles=PROFILE_CATALOG, sub_profiles=SUB_PROFILE_CATALOG,
              contributions=DIMENSION_CONTRIBUTIONS, population_params=None):
    validate_catalog(
        profiles,
        sub_profiles,
        contributions,
        EXPECTED_ITEMS,
        GROWTH_TEMPLATES,
        population_params or settings.POPULATION_PARAMS,
        settings.BIAS_SENSITIVITY,
    )


class TestShippedCatalog:
    """The catalog that ships with the engine."""

    def test_is_valid(self, settings):
        _validate(settings)

    def test_eight_profiles_in_declaration_order(self):
        assert [p.id for p in PROFILE_CATALOG] == [p.value for p in ProfileId]

    def test_three_sub_profiles_each(self):
        assert len(SUB_PROFILE_CATALOG) == 24
        for profile in PROFILE_CATALOG:
            subs = sub_profiles_of(profile.id)
            assert len(subs) == 3
            assert all(sub.parent == profile.id for sub in subs)

    def test_every_dimension_has_a_table(self):
        for dimension in DIMENSIONS:
            assert DIMENSION_CONTRIBUTIONS[dimension]
            assert dimension in GROWTH_TEMPLATES


class TestValidationFailures:
    """Broken tables stop the engine with one aggregated error."""

    def test_missing_prototype_dimension(self, settings):
        broken = PROFILE_CATALOG[0].model_copy(
            update={"prototype": dict(list(PROFILE_CATALOG[0].prototype.items())[:6])}
        )
        with pytest.raises(ConfigurationError) as exc_info:
            _validate(settings, profiles=(broken,) + PROFILE_CATALOG[1:])
        assert any("missing dimensions" in p for p in exc_info.value.problems)

    def test_inverted_band(self, settings):
        prototype = dict(PROFILE_CATALOG[0].prototype)
        first = next(iter(prototype))
        prototype[first] = PrototypeBand(min=4.0, max=2.0, weight=1.0)
        broken = PROFILE_CATALOG[0].model_copy(update={"prototype": prototype})
        with pytest.raises(ConfigurationError) as exc_info:
            _validate(settings, profiles=(broken,) + PROFILE_CATALOG[1:])
        assert any("min 4.0 > max 2.0" in p for p in exc_info.value.problems)

    def test_unknown_sub_profile(self, settings):
        broken = PROFILE_CATALOG[0].model_copy(update={"sub_profiles": ("inexistant",)})
        with pytest.raises(ConfigurationError) as exc_info:
            _validate(settings, profiles=(broken,) + PROFILE_CATALOG[1:])
        assert any("unknown sub-profile 'inexistant'" in p for p in exc_info.value.problems)

    def test_duplicate_profile_id(self, settings):
        with pytest.raises(ConfigurationError):
            _validate(settings, profiles=PROFILE_CATALOG + (PROFILE_CATALOG[0],))

    def test_missing_contribution_table(self, settings):
        contributions = dict(DIMENSION_CONTRIBUTIONS)
        del contributions[DIMENSIONS[0]]
        with pytest.raises(ConfigurationError):
            _validate(settings, contributions=contributions)

    def test_non_positive_stddev(self, settings):
        params = {k: dict(v) for k, v in settings.POPULATION_PARAMS.items()}
        params["religiosity"]["stddev"] = 0.0
        with pytest.raises(ConfigurationError):
            _validate(settings, population_params=params)

    def test_problems_in_message(self, settings):
        with pytest.raises(ConfigurationError, match="Invalid scoring catalog"):
            _validate(settings, profiles=())


class TestRules:
    """Sub-score derivations used by the contribution tables."""

    def test_numeric_scale_inverted(self):
        assert NumericScale("x", invert=True)({"x": 1}) == 5

    def test_array_length_none_token(self):
        rule = ArrayLength("x", step=0.9, none_token="aucune")
        assert rule({"x": ["aucune"]}) == 1.0
        assert rule({"x": ["a", "b"]}) == pytest.approx(2.8)
        assert rule({"x": []}) is None

    def test_matrix_delegation(self):
        """Full delegation on every task → 5; none → 1."""
        rule = MatrixDelegation("m", PREACHING_TASK_WEIGHTS)
        assert rule({"m": {task: 3 for task in PREACHING_TASK_WEIGHTS}}) == 5.0
        assert rule({"m": {task: 0 for task in PREACHING_TASK_WEIGHTS}}) == 1.0
        assert rule({}) is None

    def test_matrix_cell(self):
        rule = MatrixCell("m", "redaction", intercept=5.0, slope=-4 / 3)
        assert rule({"m": {"redaction": 3}}) == pytest.approx(1.0)
        assert rule({"m": {"plan": 3}}) is None
