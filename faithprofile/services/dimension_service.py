"""
Faith & AI Profile Engine — Seven-Dimension Scorer

Turns a raw answer mapping into the seven 1-5 dimension scores:

  1. Evaluate every contribution of the dimension's table (audience-gated)
  2. Weighted average of the sub-scores produced (none → neutral 3.0)
  3. Round half-up to one decimal
  4. Social-desirability correction: raw − bias × sensitivity × factor
  5. Clamp to [1, 5]
  6. Percentile against the population normal distribution

Population parameters are whatever the caller supplies; without them the
provisional values from configuration are used.  The scorer never decides
when measured statistics should replace the provisional ones.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from faithprofile.catalog.contributions import (
    DIMENSION_CONTRIBUTIONS,
    EXPECTED_ITEMS,
    Contribution,
)
from faithprofile.catalog.dimensions import DIMENSIONS, Dimension
from faithprofile.config import Settings, get_settings
from faithprofile.schemas.dimensions import DimensionScore, SevenDimensions
from faithprofile.schemas.population import DimensionParameters, PopulationParameters
from faithprofile.utils.answers import is_clergy, is_layperson
from faithprofile.utils.statistics import (
    clamp,
    percentile_from_normal,
    round_half_up,
    weighted_average,
)

logger = structlog.get_logger("faithprofile.dimension_service")


class DimensionService:
    """Scores the seven dimensions from a single answer set.

    Contribution tables, scale bounds and the neutral default are exposed as
    attributes so tests can introspect or override them.
    """

    SCORE_MIN: float = 1.0
    SCORE_MAX: float = 5.0
    NEUTRAL_SCORE: float = 3.0

    def __init__(
        self,
        settings: Settings | None = None,
        contributions: Mapping[Dimension, tuple[Contribution, ...]] = DIMENSION_CONTRIBUTIONS,
        expected_items: Mapping[Dimension, int] = EXPECTED_ITEMS,
    ) -> None:
        self.settings = settings or get_settings()
        self.contributions = contributions
        self.expected_items = expected_items

    # ══════════════════════════════════════════════════════════════════════
    # 1. Population parameters
    # ══════════════════════════════════════════════════════════════════════

    def provisional_population(self) -> PopulationParameters:
        """The expert-set parameters from configuration."""
        return PopulationParameters(
            dimensions={
                dimension: DimensionParameters(**self.settings.POPULATION_PARAMS[dimension.value])
                for dimension in DIMENSIONS
            },
            source="provisional",
        )

    def _parameters_for(
        self, dimension: Dimension, population: PopulationParameters | None,
    ) -> DimensionParameters:
        if population is not None and dimension in population.dimensions:
            return population.dimensions[dimension]
        return DimensionParameters(**self.settings.POPULATION_PARAMS[dimension.value])

    def population_means(self, population: PopulationParameters | None) -> dict[Dimension, float]:
        """Mean per dimension, provisional where ``population`` is silent."""
        return {
            dimension: self._parameters_for(dimension, population).mean
            for dimension in DIMENSIONS
        }

    # ══════════════════════════════════════════════════════════════════════
    # 2. Sub-scores
    # ══════════════════════════════════════════════════════════════════════

    def sub_scores(
        self, dimension: Dimension, answers: Mapping[str, Any],
    ) -> list[tuple[float, float]]:
        """Return ``(sub_score, weight)`` for every contribution that fired.

        Sub-scores are clamped to the 1-5 scale; items reserved for clergy
        or laypeople are skipped for everyone else.
        """
        clergy = is_clergy(answers)
        lay = is_layperson(answers)
        produced: list[tuple[float, float]] = []
        for contribution in self.contributions[dimension]:
            if contribution.audience == "clergy" and not clergy:
                continue
            if contribution.audience == "lay" and not lay:
                continue
            score = contribution.rule(answers)
            if score is None:
                continue
            produced.append(
                (clamp(float(score), self.SCORE_MIN, self.SCORE_MAX), contribution.weight)
            )
        return produced

    # ══════════════════════════════════════════════════════════════════════
    # 3. Single dimension
    # ══════════════════════════════════════════════════════════════════════

    def score_dimension(
        self,
        dimension: Dimension,
        answers: Mapping[str, Any],
        bias_score: float | None = None,
        population: PopulationParameters | None = None,
        confidence_multiplier: float = 1.0,
    ) -> DimensionScore:
        """Score one dimension.

        Parameters
        ----------
        dimension:
            The dimension to score.
        answers:
            Raw answer mapping; never mutated.
        bias_score:
            Social-desirability score on 0-10, or ``None`` for no correction.
        population:
            Distribution parameters for the percentile; provisional values
            from configuration fill any dimension it does not cover.
        confidence_multiplier:
            Bias-derived multiplier applied to the answered-item share.

        Returns
        -------
        DimensionScore
            ``value`` in [1, 5], ``percentile`` in [1, 99] and
            ``confidence`` in [0, 1].
        """
        produced = self.sub_scores(dimension, answers)
        average = weighted_average([s for s, _ in produced], [w for _, w in produced])

        if average is None:
            value = self.NEUTRAL_SCORE
        else:
            value = round_half_up(average, 1)
            if bias_score is not None:
                value = self.adjust_for_bias(value, bias_score, dimension)
        value = clamp(value, self.SCORE_MIN, self.SCORE_MAX)

        params = self._parameters_for(dimension, population)
        expected = self.expected_items[dimension]
        confidence = min(1.0, len(produced) / expected) * confidence_multiplier

        return DimensionScore(
            value=value,
            percentile=percentile_from_normal(value, params.mean, params.stddev),
            confidence=round_half_up(clamp(confidence, 0.0, 1.0), 2),
        )

    def adjust_for_bias(self, raw: float, bias_score: float, dimension: Dimension) -> float:
        """``raw − bias × sensitivity × factor``, one decimal, clamped to [1, 5]."""
        sensitivity = self.settings.BIAS_SENSITIVITY.get(dimension.value, 0.0)
        adjusted = raw - bias_score * sensitivity * self.settings.BIAS_ADJUSTMENT_FACTOR
        return clamp(round_half_up(adjusted, 1), self.SCORE_MIN, self.SCORE_MAX)

    # ══════════════════════════════════════════════════════════════════════
    # 4. All seven dimensions
    # ══════════════════════════════════════════════════════════════════════

    def score_all(
        self,
        answers: Mapping[str, Any],
        bias_score: float | None = None,
        population: PopulationParameters | None = None,
        confidence_multiplier: float = 1.0,
    ) -> SevenDimensions:
        scores = {
            dimension: self.score_dimension(
                dimension, answers, bias_score, population, confidence_multiplier,
            )
            for dimension in DIMENSIONS
        }
        logger.debug(
            "dimensions.scored",
            values={d.value: s.value for d, s in scores.items()},
            bias_score=bias_score,
            population_source=population.source if population else "provisional",
        )
        return SevenDimensions.from_scores(scores)
