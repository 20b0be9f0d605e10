"""
Faith & AI Profile Engine — facade.

``ScoringEngine`` wires the services together and validates the static
catalog once, at construction.  Module-level functions of the same names
delegate to a lazily built default engine for callers that do not need
custom settings.

Per-respondent scoring is pure: the catalog and settings are immutable, so
one engine can be shared across threads.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping
from typing import Any, Optional

import structlog

from faithprofile.catalog import (
    DIMENSION_CONTRIBUTIONS,
    EXPECTED_ITEMS,
    GROWTH_TEMPLATES,
    PROFILE_CATALOG,
    SUB_PROFILE_CATALOG,
    validate_catalog,
)
from faithprofile.config import Settings, get_settings
from faithprofile.schemas.dimensions import SevenDimensions
from faithprofile.schemas.population import PopulationParameters, PopulationStats
from faithprofile.schemas.profile import ProfileSpectrum
from faithprofile.schemas.scores import ValidatedScores
from faithprofile.services.aggregation_service import (
    AggregationService,
    ScoredRespondent,
    SegmentKeyFn,
    default_segment_keys,
)
from faithprofile.services.classifier_service import ClassifierService
from faithprofile.services.dimension_service import DimensionService
from faithprofile.services.interpretation_service import InterpretationService
from faithprofile.services.validated_scale_service import ValidatedScaleService

logger = structlog.get_logger("faithprofile.engine")


class ScoringEngine:
    """Entry point for scoring individuals and aggregating populations."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        validate_catalog(
            PROFILE_CATALOG,
            SUB_PROFILE_CATALOG,
            DIMENSION_CONTRIBUTIONS,
            EXPECTED_ITEMS,
            GROWTH_TEMPLATES,
            self.settings.POPULATION_PARAMS,
            self.settings.BIAS_SENSITIVITY,
        )
        self.dimensions = DimensionService(self.settings)
        self.validated = ValidatedScaleService()
        self.classifier = ClassifierService(self.settings)
        self.interpreter = InterpretationService(self.settings)
        self.aggregator = AggregationService(self._score_respondent, self.settings)

    # ── Individual ───────────────────────────────────────────────────────

    def _score_dimensions(
        self, answers: Mapping[str, Any], population: Optional[PopulationParameters],
    ) -> SevenDimensions:
        bias, answered = self.validated.bias_score(answers)
        # Without any control item answered there is nothing to correct for.
        bias_score = bias if answered else None
        return self.dimensions.score_all(
            answers,
            bias_score=bias_score,
            population=population,
            confidence_multiplier=self.validated.confidence_multiplier(bias),
        )

    def compute_profile_spectrum(
        self,
        answers: Mapping[str, Any],
        population: Optional[PopulationParameters] = None,
    ) -> ProfileSpectrum:
        """Dimensions, classification and interpretation for one respondent.

        Parameters
        ----------
        answers:
            Raw answer mapping (question id → value); never mutated.
        population:
            Measured population parameters, typically from
            ``PopulationStats.to_population_parameters()``.  ``None`` uses
            the provisional values from configuration.

        Returns
        -------
        ProfileSpectrum
            A full result; missing answers lower confidence but never fail.
        """
        population = population or self.dimensions.provisional_population()
        dimensions = self._score_dimensions(answers, population)
        values = dimensions.as_values()
        classification = self.classifier.classify(values)

        spectrum = ProfileSpectrum(
            primary=classification.primary,
            secondary=classification.secondary,
            sub_profile=classification.sub_profile,
            all_matches=classification.all_matches,
            dimensions=dimensions,
            interpretation=self.interpreter.interpret(
                classification.primary,
                classification.secondary,
                classification.sub_profile,
                values,
            ),
            tensions=self.interpreter.tensions(values),
            growth_areas=self.interpreter.growth_areas(
                values, self.dimensions.population_means(population),
            ),
            insights=self.interpreter.insights(values),
        )
        logger.info(
            "spectrum.computed",
            primary=spectrum.primary.profile_id,
            secondary=spectrum.secondary.profile_id if spectrum.secondary else None,
            sub_profile=spectrum.sub_profile.profile_id,
            population_source=population.source,
        )
        return spectrum

    def compute_validated_scores(self, answers: Mapping[str, Any]) -> ValidatedScores:
        return self.validated.compute(answers, self._score_dimensions(answers, None))

    def _score_respondent(self, answers: Mapping[str, Any]) -> ScoredRespondent:
        dimensions = self._score_dimensions(answers, None)
        classification = self.classifier.classify(dimensions.as_values())
        return ScoredRespondent(
            dimensions=dimensions,
            validated=self.validated.compute(answers, dimensions),
            profile_id=classification.primary.profile_id,
        )

    # ── Population ───────────────────────────────────────────────────────

    def aggregate(
        self,
        answers_collection: Iterable[Mapping[str, Any]],
        segment_key_fn: SegmentKeyFn = default_segment_keys,
    ) -> PopulationStats:
        return self.aggregator.aggregate(answers_collection, segment_key_fn)


# ══════════════════════════════════════════════════════════════════════════
# Default engine
# ══════════════════════════════════════════════════════════════════════════

_default_engine: ScoringEngine | None = None
_default_engine_lock = threading.Lock()


def get_engine() -> ScoringEngine:
    """The shared engine built from ``get_settings()``."""
    global _default_engine
    if _default_engine is None:
        with _default_engine_lock:
            if _default_engine is None:
                _default_engine = ScoringEngine()
    return _default_engine


def compute_profile_spectrum(
    answers: Mapping[str, Any],
    population: Optional[PopulationParameters] = None,
) -> ProfileSpectrum:
    return get_engine().compute_profile_spectrum(answers, population)


def compute_validated_scores(answers: Mapping[str, Any]) -> ValidatedScores:
    return get_engine().compute_validated_scores(answers)


def aggregate(
    answers_collection: Iterable[Mapping[str, Any]],
    segment_key_fn: SegmentKeyFn = default_segment_keys,
) -> PopulationStats:
    return get_engine().aggregate(answers_collection, segment_key_fn)
