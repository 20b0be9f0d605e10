"""Unit tests for ClassifierService — nearest-prototype classification."""
import math

import pytest

from faithprofile.catalog import DIMENSIONS, PROFILE_CATALOG, Dimension, sub_profiles_of
from faithprofile.config import Settings
from faithprofile.schemas.profile import PrototypeBand
from faithprofile.services.classifier_service import ClassifierService


@pytest.fixture
def classifier(settings):
    return ClassifierService(settings)


def _midpoint(profile):
    return {d: (band.min + band.max) / 2 for d, band in profile.prototype.items()}


class TestDistance:
    """Weighted distance to the prototype bands."""

    def test_inside_band_no_deviation(self, classifier):
        band = PrototypeBand(min=2.0, max=4.0, weight=1.0)
        assert classifier.deviation(3.0, band) == 0.0
        assert classifier.deviation(2.0, band) == 0.0

    def test_outside_band_distance_to_nearest_bound(self, classifier):
        band = PrototypeBand(min=2.0, max=4.0, weight=1.0)
        assert classifier.deviation(1.5, band) == pytest.approx(0.5)
        assert classifier.deviation(5.0, band) == pytest.approx(1.0)

    def test_weighted_euclidean(self, classifier):
        """sqrt(2 × 1² + 0.5 × 2²) = 2."""
        prototype = {
            Dimension.RELIGIOSITY: PrototypeBand(min=3.0, max=4.0, weight=2.0),
            Dimension.AI_OPENNESS: PrototypeBand(min=1.0, max=2.0, weight=0.5),
        }
        values = {Dimension.RELIGIOSITY: 5.0, Dimension.AI_OPENNESS: 4.0}
        assert classifier.distance(values, prototype) == pytest.approx(2.0)

    def test_affinity(self, classifier):
        assert classifier.affinity(0.0) == 100.0
        assert classifier.affinity(2.0) == pytest.approx(100 * math.exp(-1.0))


class TestRanking:
    """Relative match scores over the catalog."""

    @pytest.mark.parametrize("profile", PROFILE_CATALOG, ids=lambda p: p.id)
    def test_midpoint_gets_maximum_match(self, classifier, profile):
        """A profile's own midpoint gives distance 0 and the top match score.

        Bands overlap between neighbouring profiles, so another profile may
        tie at distance 0; the tie-break then decides the primary.
        """
        result = classifier.classify(_midpoint(profile))
        own = next(m for m in result.all_matches if m.profile_id == profile.id)
        assert own.distance == 0.0
        assert own.affinity == 100.0
        assert own.match_score == result.primary.match_score
        assert result.primary.distance == 0.0

    def test_gardien_midpoint_is_primary(self, classifier):
        result = classifier.classify(_midpoint(PROFILE_CATALOG[0]))
        assert result.primary.profile_id == "gardien_tradition"

    def test_match_scores_sum_to_100(self, classifier):
        result = classifier.classify({d: 3.0 for d in DIMENSIONS})
        assert len(result.all_matches) == len(PROFILE_CATALOG)
        assert sum(m.match_score for m in result.all_matches) == pytest.approx(100.0, abs=0.5)

    def test_sorted_descending(self, classifier):
        result = classifier.classify({d: 2.0 for d in DIMENSIONS})
        scores = [m.match_score for m in result.all_matches]
        assert scores == sorted(scores, reverse=True)

    def test_deterministic(self, classifier):
        values = {d: 3.7 for d in DIMENSIONS}
        assert classifier.classify(values) == classifier.classify(values)


class TestTieBreak:
    """Equal match scores fall back to an explicit tie-break."""

    def _twins(self):
        prototype = {d: PrototypeBand(min=2.0, max=4.0, weight=1.0) for d in DIMENSIONS}
        zulu = PROFILE_CATALOG[0].model_copy(update={"id": "zulu", "prototype": prototype})
        alpha = PROFILE_CATALOG[1].model_copy(update={"id": "alpha", "prototype": prototype})
        return (zulu, alpha)

    def test_catalog_order(self):
        classifier = ClassifierService(Settings(_env_file=None), profiles=self._twins())
        ranked = classifier.rank({d: 3.0 for d in DIMENSIONS}, classifier.profiles)
        assert [m.profile_id for m in ranked] == ["zulu", "alpha"]
        assert ranked[0].match_score == ranked[1].match_score == 50.0

    def test_profile_id_order(self):
        settings = Settings(_env_file=None, TIE_BREAK_POLICY="profile_id")
        classifier = ClassifierService(settings, profiles=self._twins())
        ranked = classifier.rank({d: 3.0 for d in DIMENSIONS}, classifier.profiles)
        assert [m.profile_id for m in ranked] == ["alpha", "zulu"]

    def test_closer_profile_wins_when_rounded_scores_match(self):
        """Shares of 49.975 and 50.025 both display as 50.0."""
        near = {d: PrototypeBand(min=2.0, max=4.0, weight=1.0) for d in DIMENSIONS}
        far = dict(near)
        far[Dimension.RELIGIOSITY] = PrototypeBand(min=3.002, max=4.0, weight=1.0)
        profiles = (
            PROFILE_CATALOG[0].model_copy(update={"id": "zulu", "prototype": far}),
            PROFILE_CATALOG[1].model_copy(update={"id": "alpha", "prototype": near}),
        )
        classifier = ClassifierService(Settings(_env_file=None), profiles=profiles)
        ranked = classifier.rank({d: 3.0 for d in DIMENSIONS}, classifier.profiles)
        assert [m.profile_id for m in ranked] == ["alpha", "zulu"]
        assert ranked[0].match_score == ranked[1].match_score == 50.0


class TestSecondaryAndSubProfile:
    """Secondary threshold and sub-profile selection."""

    def test_secondary_requires_threshold(self, classifier):
        result = classifier.classify({d: 3.0 for d in DIMENSIONS})
        runner_up = result.all_matches[1]
        if runner_up.match_score >= 15.0:
            assert result.secondary == runner_up
        else:
            assert result.secondary is None

    def test_no_secondary_when_threshold_unreachable(self):
        settings = Settings(_env_file=None, SECONDARY_MATCH_THRESHOLD=100.0)
        result = ClassifierService(settings).classify({d: 3.0 for d in DIMENSIONS})
        assert result.secondary is None

    def test_sub_profile_belongs_to_primary(self, classifier):
        for profile in PROFILE_CATALOG:
            result = classifier.classify(_midpoint(profile))
            child_ids = {sub.id for sub in sub_profiles_of(result.primary.profile_id)}
            assert result.sub_profile.profile_id in child_ids

    def test_sub_profile_follows_emphasis(self, classifier):
        """High sacred boundary and psychological perception → Protecteur du Sacré."""
        values = _midpoint(PROFILE_CATALOG[0])
        values[Dimension.SACRED_BOUNDARY] = 5.0
        values[Dimension.PSYCHOLOGICAL_PERCEPTION] = 4.5
        values[Dimension.ETHICAL_CONCERN] = 3.6
        values[Dimension.COMMUNITY_INFLUENCE] = 3.4
        values[Dimension.RELIGIOSITY] = 4.0
        values[Dimension.FUTURE_ORIENTATION] = 1.0
        result = classifier.classify(values)
        assert result.primary.profile_id == "gardien_tradition"
        assert result.sub_profile.profile_id == "protecteur_sacre"


class TestArchetypes:
    """Hand-built respondents land on the expected profile."""

    def test_traditionalist(self, engine, traditionalist_answers):
        spectrum = engine.compute_profile_spectrum(traditionalist_answers)
        assert spectrum.primary.profile_id == "gardien_tradition"

    def test_pioneer(self, engine, pioneer_answers):
        spectrum = engine.compute_profile_spectrum(pioneer_answers)
        assert spectrum.primary.profile_id == "pionnier_spirituel"
