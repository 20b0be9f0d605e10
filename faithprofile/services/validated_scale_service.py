"""
Faith & AI Profile Engine — Validated Scales

Standardised indices computed next to the seven dimensions:

  - CRS-5 (Centrality of Religiosity Scale, Huber & Huber 2012)
  - Social-desirability bias (Marlowe-Crowne short form items)
  - AI adoption composite
  - Resistance index, derived from already-computed dimensions only
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from faithprofile.catalog.contributions import CRS_ITEMS
from faithprofile.catalog.dimensions import Dimension
from faithprofile.catalog.score_maps import AI_FREQUENCY_SCORES, CRS_SCORE_MAP
from faithprofile.schemas.dimensions import SevenDimensions
from faithprofile.schemas.scores import ValidatedScores
from faithprofile.utils.answers import get_array, get_number, get_string
from faithprofile.utils.statistics import clamp, round_half_up

logger = structlog.get_logger("faithprofile.validated_scale_service")


class ValidatedScaleService:
    """Computes CRS-5, bias, AI adoption and resistance."""

    # ── Constants ─────────────────────────────────────────────────────────

    CRS_DEFAULT: float = 3.0

    # The answer that signals self-flattering responding, per item.
    MC_TARGETS: dict[str, str] = {
        "ctrl_mc_1": "false",
        "ctrl_mc_2": "true",
        "ctrl_mc_3": "false",
        "ctrl_mc_4": "true",
        "ctrl_mc_5": "false",
    }
    BIAS_SCALE: float = 10.0
    # (upper bound on bias score, confidence multiplier), checked in order
    BIAS_CONFIDENCE_STEPS: tuple[tuple[float, float], ...] = (
        (3.0, 1.0),
        (6.0, 0.9),
        (8.0, 0.8),
    )
    BIAS_CONFIDENCE_FLOOR: float = 0.7

    AI_MISSING_DEFAULT: float = 2.5
    AI_CONTEXT_STEP: float = 0.7
    AI_WEIGHTS: dict[str, float] = {"frequency": 2.0, "comfort": 2.0, "contexts": 1.5}

    RELIGIOSITY_LEVELS: tuple[tuple[float, str], ...] = (
        (2.0, "non_religieux"),
        (3.0, "peu_religieux"),
        (4.0, "religieux"),
    )
    AI_ADOPTION_LEVELS: tuple[tuple[float, str], ...] = (
        (2.0, "resistant"),
        (3.0, "prudent"),
        (4.0, "ouvert"),
    )

    # ══════════════════════════════════════════════════════════════════════
    # CRS-5
    # ══════════════════════════════════════════════════════════════════════

    def crs5(self, answers: Mapping[str, Any]) -> float:
        """Mean of the five CRS items; unanswered or unknown items count 3."""
        item_scores = [
            float(CRS_SCORE_MAP.get(get_string(answers, item), self.CRS_DEFAULT))
            for item in CRS_ITEMS
        ]
        return clamp(round_half_up(sum(item_scores) / len(item_scores), 1), 1.0, 5.0)

    # ══════════════════════════════════════════════════════════════════════
    # Social desirability
    # ══════════════════════════════════════════════════════════════════════

    def bias_score(self, answers: Mapping[str, Any]) -> tuple[float, int]:
        """Return ``(score, items_answered)``.

        The score is the share of answered items given the keyed answer,
        scaled to 0-10.  With no item answered it is 0.0: no correction is
        applied rather than guessing one.
        """
        matches = 0
        answered = 0
        for key, target in self.MC_TARGETS.items():
            answer = get_string(answers, key)
            if not answer:
                continue
            answered += 1
            if answer == target:
                matches += 1
        if answered == 0:
            return 0.0, 0
        return round_half_up(matches / answered * self.BIAS_SCALE, 2), answered

    def confidence_multiplier(self, bias: float) -> float:
        for upper, multiplier in self.BIAS_CONFIDENCE_STEPS:
            if bias <= upper:
                return multiplier
        return self.BIAS_CONFIDENCE_FLOOR

    # ══════════════════════════════════════════════════════════════════════
    # AI adoption
    # ══════════════════════════════════════════════════════════════════════

    def ai_adoption(self, answers: Mapping[str, Any]) -> float:
        """Weighted blend of usage frequency, comfort and context breadth.

        Formula::

            (2 × frequency + 2 × comfort + 1.5 × contexts) / 5.5

        where ``contexts = min(5, 1 + 0.7 × |ctrl_ia_contextes|)`` and a
        missing frequency or comfort counts 2.5.
        """
        frequency = float(
            AI_FREQUENCY_SCORES.get(get_string(answers, "ctrl_ia_frequence"), self.AI_MISSING_DEFAULT)
        )
        comfort = get_number(answers, "ctrl_ia_confort")
        comfort = self.AI_MISSING_DEFAULT if comfort is None else clamp(comfort, 1.0, 5.0)
        contexts = min(5.0, 1 + self.AI_CONTEXT_STEP * len(get_array(answers, "ctrl_ia_contextes")))

        weights = self.AI_WEIGHTS
        blended = (
            weights["frequency"] * frequency
            + weights["comfort"] * comfort
            + weights["contexts"] * contexts
        ) / sum(weights.values())
        return clamp(round_half_up(blended, 1), 1.0, 5.0)

    # ══════════════════════════════════════════════════════════════════════
    # Resistance
    # ══════════════════════════════════════════════════════════════════════

    @staticmethod
    def resistance_index(religiosity: float, sacred_boundary: float, ai_openness: float) -> float:
        """How much resistance to AI the respondent's faith commitment creates.

        ``(religiosity + sacred_boundary) / 2 − ai_openness``, in [-4, 4].
        """
        index = (religiosity + sacred_boundary) / 2 - ai_openness
        return clamp(round_half_up(index, 1), -4.0, 4.0)

    @staticmethod
    def resistance_level(index: float) -> str:
        if index <= 0:
            return "aucune"
        if index < 1:
            return "faible"
        if index < 2:
            return "moderee"
        return "forte"

    @staticmethod
    def _level(value: float, steps: tuple[tuple[float, str], ...], top: str) -> str:
        for upper, label in steps:
            if value < upper:
                return label
        return top

    def religiosity_level(self, crs5: float) -> str:
        return self._level(crs5, self.RELIGIOSITY_LEVELS, "tres_religieux")

    def ai_adoption_level(self, ai_adoption: float) -> str:
        return self._level(ai_adoption, self.AI_ADOPTION_LEVELS, "enthousiaste")

    # ══════════════════════════════════════════════════════════════════════
    # All scales
    # ══════════════════════════════════════════════════════════════════════

    def compute(self, answers: Mapping[str, Any], dimensions: SevenDimensions) -> ValidatedScores:
        """Compute every validated scale for one respondent.

        ``dimensions`` must come from the same answers; the resistance index
        is derived from them rather than from raw answers.
        """
        crs5 = self.crs5(answers)
        bias, answered = self.bias_score(answers)
        ai_adoption = self.ai_adoption(answers)
        resistance = self.resistance_index(
            dimensions.value_of(Dimension.RELIGIOSITY),
            dimensions.value_of(Dimension.SACRED_BOUNDARY),
            dimensions.value_of(Dimension.AI_OPENNESS),
        )
        logger.debug(
            "validated_scores.computed",
            crs5=crs5,
            ai_adoption=ai_adoption,
            bias=bias,
            resistance_index=resistance,
        )
        return ValidatedScores(
            crs5=crs5,
            ai_adoption=ai_adoption,
            bias_adjustment=bias,
            resistance_index=resistance,
            religiosity_level=self.religiosity_level(crs5),
            ai_adoption_level=self.ai_adoption_level(ai_adoption),
            resistance_level=self.resistance_level(resistance),
            bias_items_answered=answered,
        )
