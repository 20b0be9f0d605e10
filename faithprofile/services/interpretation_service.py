"""
Faith & AI Profile Engine — Interpretation generator.

Turns a classification into the French-language texts shown to the
respondent: headline, narrative, strengths, unique aspects, blind spots,
tensions, growth areas and insights.

Every sentence comes from the catalog rule tables; this module only
selects, orders and truncates.  Output is a pure function of its inputs.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Optional

import structlog

from faithprofile.catalog.dimensions import DIMENSIONS, Dimension
from faithprofile.catalog.narratives import (
    BLIND_SPOT_FALLBACK,
    BLIND_SPOT_RULES,
    DIMENSION_STRENGTH_THRESHOLD,
    DIMENSION_STRENGTHS,
    GROWTH_TEMPLATES,
    INSIGHT_RULES,
    SECONDARY_HEADLINE,
    SUB_PROFILE_NARRATIVE,
    TENSION_RULES,
    UNIQUE_ASPECT_FALLBACK,
    UNIQUE_ASPECT_RULES,
    TextRule,
    holds,
)
from faithprofile.catalog.profiles import PROFILES_BY_ID, SUB_PROFILES_BY_ID
from faithprofile.config import Settings, get_settings
from faithprofile.schemas.profile import (
    GrowthArea,
    Insight,
    Interpretation,
    ProfileMatch,
    Tension,
)

logger = structlog.get_logger("faithprofile.interpretation_service")


class InterpretationService:
    """Selects narrative texts for a classified respondent."""

    NARRATIVE_SENTENCES: int = 2
    SUB_PROFILE_TRAITS: int = 2
    MAX_ASPECTS: int = 3
    MAX_TENSIONS: int = 3
    MAX_GROWTH_AREAS: int = 2
    MAX_INSIGHTS: int = 4

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    # ══════════════════════════════════════════════════════════════════════
    # 1. Headline, narrative, strengths
    # ══════════════════════════════════════════════════════════════════════

    def headline(self, primary: ProfileMatch, secondary: Optional[ProfileMatch]) -> str:
        title = PROFILES_BY_ID[primary.profile_id].title
        if secondary is None:
            return title
        # "Prudent Éclairé" → "Prudent"
        secondary_word = PROFILES_BY_ID[secondary.profile_id].title.split(" ")[0]
        return SECONDARY_HEADLINE.format(title=title, secondary=secondary_word)

    def narrative(self, primary: ProfileMatch, sub_profile: ProfileMatch) -> str:
        """First sentences of the profile description, then the sub-profile.

        The sub-profile description is only appended when its affinity
        reaches ``SUB_PROFILE_NARRATIVE_THRESHOLD``.
        """
        sentences = PROFILES_BY_ID[primary.profile_id].full_description.split(".")
        text = ".".join(sentences[: self.NARRATIVE_SENTENCES]).strip() + "."

        if sub_profile.affinity >= self.settings.SUB_PROFILE_NARRATIVE_THRESHOLD:
            description = SUB_PROFILES_BY_ID[sub_profile.profile_id].description
            text += SUB_PROFILE_NARRATIVE.format(
                description=description[:1].lower() + description[1:],
            )
        return text

    def strengths(
        self,
        primary: ProfileMatch,
        sub_profile: ProfileMatch,
        values: Mapping[Dimension, float],
    ) -> list[str]:
        strengths = [PROFILES_BY_ID[primary.profile_id].core_motivation]
        traits = SUB_PROFILES_BY_ID[sub_profile.profile_id].distinguishing_traits
        strengths.extend(traits[: self.SUB_PROFILE_TRAITS])
        for dimension in DIMENSIONS:
            if values[dimension] >= DIMENSION_STRENGTH_THRESHOLD:
                strengths.append(DIMENSION_STRENGTHS[dimension])
                break
        return strengths

    # ══════════════════════════════════════════════════════════════════════
    # 2. Rule tables
    # ══════════════════════════════════════════════════════════════════════

    def _matching_texts(
        self, rules: tuple[TextRule, ...], fallback: str, values: Mapping[Dimension, float],
    ) -> list[str]:
        texts = [rule.text for rule in rules if holds(rule.conditions, values)]
        return texts[: self.MAX_ASPECTS] or [fallback]

    def unique_aspects(self, values: Mapping[Dimension, float]) -> list[str]:
        return self._matching_texts(UNIQUE_ASPECT_RULES, UNIQUE_ASPECT_FALLBACK, values)

    def blind_spots(self, values: Mapping[Dimension, float]) -> list[str]:
        return self._matching_texts(BLIND_SPOT_RULES, BLIND_SPOT_FALLBACK, values)

    def tensions(self, values: Mapping[Dimension, float]) -> list[Tension]:
        tensions = [
            Tension(
                dimension1=rule.dimension1,
                dimension2=rule.dimension2,
                description=rule.description,
                suggestion=rule.suggestion,
            )
            for rule in TENSION_RULES
            if holds(rule.conditions, values)
        ]
        return tensions[: self.MAX_TENSIONS]

    def insights(self, values: Mapping[Dimension, float]) -> list[Insight]:
        """Firing insights, highest priority first, declaration order on ties."""
        fired = [rule for rule in INSIGHT_RULES if holds(rule.conditions, values)]
        fired.sort(key=lambda rule: -rule.priority)
        return [
            Insight(
                category=rule.category,
                title=rule.title,
                message=rule.message,
                priority=rule.priority,
            )
            for rule in fired[: self.MAX_INSIGHTS]
        ]

    # ══════════════════════════════════════════════════════════════════════
    # 3. Growth areas
    # ══════════════════════════════════════════════════════════════════════

    def growth_areas(
        self,
        values: Mapping[Dimension, float],
        population_means: Mapping[Dimension, float],
    ) -> list[GrowthArea]:
        """Dimensions furthest below the population mean.

        Parameters
        ----------
        values:
            The respondent's dimension values.
        population_means:
            Mean per dimension of whichever population parameters scored
            the respondent.

        Returns
        -------
        list[GrowthArea]
            Up to two areas with a negative delta, lowest first; when no
            dimension is below the mean, the single lowest one.
        """
        order = {dimension: index for index, dimension in enumerate(DIMENSIONS)}
        deltas = sorted(
            ((values[d] - population_means[d], d) for d in DIMENSIONS),
            key=lambda item: (item[0], order[item[1]]),
        )
        selected = [d for delta, d in deltas if delta < 0][: self.MAX_GROWTH_AREAS]
        if not selected:
            selected = [deltas[0][1]]

        areas = []
        for dimension in selected:
            template = GROWTH_TEMPLATES[dimension]
            areas.append(
                GrowthArea(
                    dimension=dimension,
                    area=template.area,
                    current_state=template.current_state,
                    potential_growth=template.potential_growth,
                    actionable_step=template.actionable_step,
                )
            )
        return areas

    # ══════════════════════════════════════════════════════════════════════
    # 4. Everything
    # ══════════════════════════════════════════════════════════════════════

    def interpret(
        self,
        primary: ProfileMatch,
        secondary: Optional[ProfileMatch],
        sub_profile: ProfileMatch,
        values: Mapping[Dimension, float],
    ) -> Interpretation:
        interpretation = Interpretation(
            headline=self.headline(primary, secondary),
            narrative=self.narrative(primary, sub_profile),
            strengths=self.strengths(primary, sub_profile, values),
            unique_aspects=self.unique_aspects(values),
            blind_spots=self.blind_spots(values),
        )
        logger.debug(
            "interpretation.generated",
            profile=primary.profile_id,
            unique_aspects=len(interpretation.unique_aspects),
            blind_spots=len(interpretation.blind_spots),
        )
        return interpretation
