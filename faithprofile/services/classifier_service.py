"""
Faith & AI Profile Engine — Profile classifier.

Matches a respondent's seven dimension values against the prototype bands
of the profile catalog, then against the sub-profiles of the winning
profile.

Pipeline per candidate:
  1. Deviation per dimension: 0 inside [min, max], else distance to the
     nearest bound.
  2. Weighted Euclidean distance:  sqrt(sum(weight × deviation²))
  3. Affinity:  100 × exp(-decay × distance)
  4. Match score:  100 × affinity / sum(affinities), one decimal

Ranking uses an explicit sort key ``(-match_score, tie_break)``; the
tie-break is the catalog declaration index or the profile id depending on
``TIE_BREAK_POLICY``.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import NamedTuple, Optional

import structlog

from faithprofile.catalog.dimensions import Dimension
from faithprofile.catalog.profiles import PROFILE_CATALOG, sub_profiles_of
from faithprofile.config import Settings, get_settings
from faithprofile.schemas.profile import (
    ProfileDefinition,
    ProfileMatch,
    PrototypeBand,
    SubProfileDefinition,
)
from faithprofile.utils.statistics import round_half_up

logger = structlog.get_logger("faithprofile.classifier_service")


class Classification(NamedTuple):
    """Ranked matches plus the picks derived from them."""

    primary: ProfileMatch
    secondary: Optional[ProfileMatch]
    sub_profile: ProfileMatch
    all_matches: list[ProfileMatch]


class ClassifierService:
    """Nearest-prototype classification over the profile catalog."""

    def __init__(
        self,
        settings: Settings | None = None,
        profiles: Sequence[ProfileDefinition] = PROFILE_CATALOG,
    ) -> None:
        self.settings = settings or get_settings()
        self.profiles = tuple(profiles)

    # ── Distance ─────────────────────────────────────────────────────────

    @staticmethod
    def deviation(value: float, band: PrototypeBand) -> float:
        if value < band.min:
            return band.min - value
        if value > band.max:
            return value - band.max
        return 0.0

    def distance(
        self, values: Mapping[Dimension, float], prototype: Mapping[Dimension, PrototypeBand],
    ) -> float:
        """Weighted Euclidean distance from ``values`` to the prototype bands.

        Only the dimensions the prototype names take part; a sub-profile
        prototype that emphasises two dimensions ignores the other five.
        """
        total = 0.0
        for dimension, band in prototype.items():
            total += band.weight * self.deviation(values[dimension], band) ** 2
        return math.sqrt(total)

    def affinity(self, distance: float) -> float:
        return 100.0 * math.exp(-self.settings.MATCH_DECAY_RATE * distance)

    # ── Ranking ──────────────────────────────────────────────────────────

    def rank(
        self,
        values: Mapping[Dimension, float],
        candidates: Sequence[ProfileDefinition | SubProfileDefinition],
    ) -> list[ProfileMatch]:
        """Score every candidate and return them best first.

        Parameters
        ----------
        values:
            Dimension values on the 1-5 scale.
        candidates:
            Profiles or sub-profiles, in declaration order.

        Returns
        -------
        list[ProfileMatch]
            One match per candidate; match scores sum to roughly 100.
        """
        distances = [self.distance(values, candidate.prototype) for candidate in candidates]
        affinities = [self.affinity(d) for d in distances]
        total = sum(affinities)

        scored = []
        for index, (candidate, distance, affinity) in enumerate(
            zip(candidates, distances, affinities)
        ):
            share = 100.0 * affinity / total if total > 0 else 100.0 / len(candidates)
            match = ProfileMatch(
                profile_id=candidate.id,
                match_score=round_half_up(share, 1),
                affinity=round_half_up(affinity, 2),
                distance=round_half_up(distance, 4),
            )
            scored.append((-share, self._tie_key(index, candidate.id), match))

        # unrounded share first, then the tie key
        scored.sort(key=lambda item: item[:2])
        return [match for _, _, match in scored]

    def _tie_key(self, index: int, candidate_id: str) -> int | str:
        if self.settings.TIE_BREAK_POLICY == "profile_id":
            return candidate_id
        return index

    # ── Classification ───────────────────────────────────────────────────

    def classify(self, values: Mapping[Dimension, float]) -> Classification:
        """Primary, optional secondary and sub-profile for one respondent."""
        all_matches = self.rank(values, self.profiles)
        primary = all_matches[0]

        secondary = None
        if len(all_matches) > 1:
            runner_up = all_matches[1]
            if runner_up.match_score >= self.settings.SECONDARY_MATCH_THRESHOLD:
                secondary = runner_up

        sub_profile = self.rank(values, sub_profiles_of(primary.profile_id))[0]

        logger.debug(
            "profile.classified",
            primary=primary.profile_id,
            primary_score=primary.match_score,
            secondary=secondary.profile_id if secondary else None,
            sub_profile=sub_profile.profile_id,
        )
        return Classification(
            primary=primary,
            secondary=secondary,
            sub_profile=sub_profile,
            all_matches=all_matches,
        )
