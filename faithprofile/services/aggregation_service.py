"""
Faith & AI Profile Engine — Population aggregator.

Scores a collection of answer sets and summarises them:

  - per-dimension mean, population standard deviation, median, histogram
  - Pearson correlation matrix between the seven dimensions
  - primary-profile histogram and validated-scale means
  - the same statistics per segment (role, denomination, age by default)
  - deterministic key findings and sample-size caveats

Moments are accumulated with ``RunningMoments`` (Welford updates, Chan
merges) so that a collection can be folded one respondent at a time or
split across workers and merged.  ``aggregate`` always folds the whole
collection it is given.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable, Mapping
from typing import Any, NamedTuple, Optional

import numpy as np
import structlog

from faithprofile.catalog.dimensions import DIMENSION_LABELS, DIMENSIONS, Dimension
from faithprofile.catalog.profiles import PROFILE_CATALOG
from faithprofile.config import Settings, get_settings
from faithprofile.schemas.dimensions import SevenDimensions
from faithprofile.schemas.population import (
    DimensionStats,
    KeyFinding,
    PopulationStats,
    SampleCaveat,
    SegmentStats,
)
from faithprofile.schemas.scores import ValidatedScores
from faithprofile.utils.answers import get_string, role_category
from faithprofile.utils.statistics import distribution, median, round_half_up

logger = structlog.get_logger("faithprofile.aggregation_service")

SegmentKeyFn = Callable[[Mapping[str, Any]], Mapping[str, Optional[str]]]

VALIDATED_FIELDS: tuple[str, ...] = ("crs5", "ai_adoption", "resistance_index")


def default_segment_keys(answers: Mapping[str, Any]) -> dict[str, Optional[str]]:
    """Role, denomination and age group; an unanswered axis is skipped."""
    return {
        "role": role_category(answers),
        "denomination": get_string(answers, "profil_confession") or None,
        "age": get_string(answers, "profil_age") or None,
    }


class ScoredRespondent(NamedTuple):
    dimensions: SevenDimensions
    validated: ValidatedScores
    profile_id: str


# ══════════════════════════════════════════════════════════════════════════
# Streaming moments
# ══════════════════════════════════════════════════════════════════════════

class RunningMoments:
    """Mergeable mean and co-moment accumulator over fixed-width vectors.

    ``comoment[i, j]`` is ``sum((x_i - mean_i) * (x_j - mean_j))`` over the
    observations seen so far.
    """

    def __init__(self, width: int) -> None:
        self.width = width
        self.n = 0
        self.mean = np.zeros(width)
        self.comoment = np.zeros((width, width))

    def add(self, observation: Iterable[float]) -> None:
        x = np.asarray(list(observation), dtype=float)
        if x.shape != (self.width,):
            raise ValueError(f"expected {self.width} values, got {x.shape}")
        self.n += 1
        delta = x - self.mean
        self.mean = self.mean + delta / self.n
        self.comoment = self.comoment + np.outer(delta, x - self.mean)

    def merge(self, other: RunningMoments) -> RunningMoments:
        """Fold ``other`` into this accumulator and return it."""
        if other.width != self.width:
            raise ValueError(f"cannot merge width {other.width} into width {self.width}")
        if other.n == 0:
            return self
        if self.n == 0:
            self.n = other.n
            self.mean = other.mean.copy()
            self.comoment = other.comoment.copy()
            return self
        n = self.n + other.n
        delta = other.mean - self.mean
        self.mean = self.mean + delta * (other.n / n)
        self.comoment = (
            self.comoment + other.comoment + np.outer(delta, delta) * (self.n * other.n / n)
        )
        self.n = n
        return self

    def stddev(self) -> np.ndarray:
        """Population standard deviation per component."""
        if self.n == 0:
            return np.zeros(self.width)
        return np.sqrt(np.clip(np.diag(self.comoment) / self.n, 0.0, None))

    def correlation(self) -> np.ndarray:
        """Pearson matrix; pairs involving a constant component are 0.0."""
        variances = np.clip(np.diag(self.comoment), 0.0, None)
        denominator = np.sqrt(np.outer(variances, variances))
        with np.errstate(divide="ignore", invalid="ignore"):
            matrix = np.where(denominator > 0, self.comoment / denominator, 0.0)
        # Welford updates accumulate the two triangles in different orders.
        matrix = np.clip((matrix + matrix.T) / 2, -1.0, 1.0)
        np.fill_diagonal(matrix, 1.0)
        return matrix


class _SampleTally:
    """Everything needed to summarise one sample (whole population or segment)."""

    def __init__(self) -> None:
        self.moments = RunningMoments(len(DIMENSIONS))
        self.validated = RunningMoments(len(VALIDATED_FIELDS))
        self.values: dict[Dimension, list[float]] = {d: [] for d in DIMENSIONS}
        self.profiles: Counter[str] = Counter()

    @property
    def n(self) -> int:
        return self.moments.n

    def add(self, respondent: ScoredRespondent) -> None:
        values = respondent.dimensions.as_values()
        self.moments.add(values[d] for d in DIMENSIONS)
        self.validated.add(getattr(respondent.validated, name) for name in VALIDATED_FIELDS)
        for dimension in DIMENSIONS:
            self.values[dimension].append(values[dimension])
        self.profiles[respondent.profile_id] += 1

    def dimension_stats(self) -> dict[Dimension, Optional[DimensionStats]]:
        if self.n == 0:
            return {d: None for d in DIMENSIONS}
        stddevs = self.moments.stddev()
        return {
            d: DimensionStats(
                mean=round_half_up(float(self.moments.mean[i]), 2),
                stddev=round_half_up(float(stddevs[i]), 2),
                median=round_half_up(median(self.values[d]), 2),
                n=self.n,
                distribution=distribution(self.values[d]),
            )
            for i, d in enumerate(DIMENSIONS)
        }

    def correlation_matrix(self) -> dict[Dimension, dict[Dimension, float]]:
        matrix = self.moments.correlation()
        return {
            row: {col: round_half_up(float(matrix[i, j]), 2) for j, col in enumerate(DIMENSIONS)}
            for i, row in enumerate(DIMENSIONS)
        }

    def profile_histogram(self) -> dict[str, int]:
        return {profile.id: self.profiles.get(profile.id, 0) for profile in PROFILE_CATALOG}

    def validated_means(self) -> dict[str, Optional[float]]:
        if self.validated.n == 0:
            return {name: None for name in VALIDATED_FIELDS}
        return {
            name: round_half_up(float(self.validated.mean[i]), 2)
            for i, name in enumerate(VALIDATED_FIELDS)
        }


# ══════════════════════════════════════════════════════════════════════════
# Aggregation
# ══════════════════════════════════════════════════════════════════════════

class AggregationService:
    """Summarises a scored population.

    ``scorer`` turns one answer mapping into a ``ScoredRespondent``; the
    engine passes its own per-respondent pipeline so that aggregated and
    individual results can never disagree.
    """

    SIGNIFICANCE_ORDER: dict[str, int] = {"high": 0, "medium": 1, "low": 2}
    HIGH_CORRELATION: float = 0.5
    HIGH_SEGMENT_DELTA: float = 1.0
    PATTERN_THRESHOLD: float = 3.5

    def __init__(
        self,
        scorer: Callable[[Mapping[str, Any]], ScoredRespondent],
        settings: Settings | None = None,
    ) -> None:
        self.scorer = scorer
        self.settings = settings or get_settings()

    # ── Caveats ──────────────────────────────────────────────────────────

    def caveat(self, n: int) -> SampleCaveat:
        low = n < self.settings.LOW_CONFIDENCE_SAMPLE_SIZE
        moderate = n < self.settings.MODERATE_CONFIDENCE_SAMPLE_SIZE
        level = "low" if low else "moderate" if moderate else "high"
        return SampleCaveat(confidence_level=level, low_confidence=low, moderate_confidence=moderate)

    # ── Fold ─────────────────────────────────────────────────────────────

    def aggregate(
        self,
        answers_collection: Iterable[Mapping[str, Any]],
        segment_key_fn: SegmentKeyFn = default_segment_keys,
    ) -> PopulationStats:
        """Score and summarise every answer set in ``answers_collection``.

        Parameters
        ----------
        answers_collection:
            Any iterable of answer mappings; consumed once.
        segment_key_fn:
            Maps an answer set to ``{axis: segment}``.  Axes and segments
            are keyed by their ``str()`` form; a ``None`` segment
            leaves the respondent out of that axis.

        Returns
        -------
        PopulationStats
            With ``n == 0`` every statistic is ``None``, the correlation
            matrix is the identity and ``low_confidence`` is set.
        """
        overall = _SampleTally()
        segments: dict[str, dict[str, _SampleTally]] = {}

        for answers in answers_collection:
            respondent = self.scorer(answers)
            overall.add(respondent)
            for axis, segment in segment_key_fn(answers).items():
                if segment is None:
                    continue
                tallies = segments.setdefault(str(axis), {})
                tallies.setdefault(str(segment), _SampleTally()).add(respondent)

        segment_stats = {
            axis: {
                segment: self._segment_stats(tally)
                for segment, tally in sorted(by_segment.items())
            }
            for axis, by_segment in sorted(segments.items())
        }
        dimensions = overall.dimension_stats()
        correlation = overall.correlation_matrix()

        stats = PopulationStats(
            n=overall.n,
            dimensions=dimensions,
            correlation_matrix=correlation,
            profile_histogram=overall.profile_histogram(),
            validated_means=overall.validated_means(),
            segments=segment_stats,
            key_findings=self.key_findings(overall.n, dimensions, correlation, segment_stats),
            caveat=self.caveat(overall.n),
            recalibration_ready=overall.n >= self.settings.RECALIBRATION_THRESHOLD,
        )
        logger.info(
            "aggregate.complete",
            n=stats.n,
            segments={axis: len(values) for axis, values in segment_stats.items()},
            findings=len(stats.key_findings),
            recalibration_ready=stats.recalibration_ready,
        )
        return stats

    def _segment_stats(self, tally: _SampleTally) -> SegmentStats:
        return SegmentStats(
            n=tally.n,
            dimensions=tally.dimension_stats(),
            correlation_matrix=tally.correlation_matrix(),
            profile_histogram=tally.profile_histogram(),
            validated_means=tally.validated_means(),
            caveat=self.caveat(tally.n),
        )

    # ══════════════════════════════════════════════════════════════════════
    # Key findings
    # ══════════════════════════════════════════════════════════════════════

    def key_findings(
        self,
        n: int,
        dimensions: Mapping[Dimension, Optional[DimensionStats]],
        correlation: Mapping[Dimension, Mapping[Dimension, float]],
        segments: Mapping[str, Mapping[str, SegmentStats]],
    ) -> list[KeyFinding]:
        """Deterministic findings, most significant first, capped."""
        if n == 0:
            return []
        findings = (
            self._correlation_findings(correlation)
            + self._segment_findings(segments)
            + self._pattern_findings(n, dimensions)
        )
        findings.sort(key=lambda finding: self.SIGNIFICANCE_ORDER[finding.significance])
        return findings[: self.settings.MAX_KEY_FINDINGS]

    def _correlation_findings(
        self, correlation: Mapping[Dimension, Mapping[Dimension, float]],
    ) -> list[KeyFinding]:
        pairs = [
            (correlation[a][b], a, b)
            for i, a in enumerate(DIMENSIONS)
            for b in DIMENSIONS[i + 1:]
        ]
        threshold = self.settings.FINDING_CORRELATION_THRESHOLD
        findings = []

        strongest = max(pairs, key=lambda pair: pair[0])
        if strongest[0] > threshold:
            r, a, b = strongest
            findings.append(
                KeyFinding(
                    type="correlation",
                    title="Corrélation positive forte",
                    description=(
                        f"{DIMENSION_LABELS[a]} et {DIMENSION_LABELS[b]} évoluent ensemble "
                        f"(r = {r:.2f})."
                    ),
                    significance="high" if r > self.HIGH_CORRELATION else "medium",
                )
            )

        weakest = min(pairs, key=lambda pair: pair[0])
        if weakest[0] < -threshold:
            r, a, b = weakest
            findings.append(
                KeyFinding(
                    type="correlation",
                    title="Corrélation négative notable",
                    description=(
                        f"Plus {DIMENSION_LABELS[a]} est élevé, plus {DIMENSION_LABELS[b]} "
                        f"tend à être bas (r = {r:.2f})."
                    ),
                    significance="high" if r < -self.HIGH_CORRELATION else "medium",
                )
            )
        return findings

    def _segment_findings(
        self, segments: Mapping[str, Mapping[str, SegmentStats]],
    ) -> list[KeyFinding]:
        findings = []
        for axis, by_segment in segments.items():
            if len(by_segment) < 2:
                continue
            best = None
            for dimension in DIMENSIONS:
                means = [
                    (stats.dimensions[dimension].mean, segment)
                    for segment, stats in by_segment.items()
                    if stats.dimensions[dimension] is not None
                ]
                if len(means) < 2:
                    continue
                high = max(means)
                low = min(means)
                delta = round_half_up(high[0] - low[0], 2)
                if best is None or delta > best[0]:
                    best = (delta, dimension, high, low)

            if best is None or best[0] <= self.settings.FINDING_SEGMENT_DELTA:
                continue
            delta, dimension, high, low = best
            findings.append(
                KeyFinding(
                    type="segment",
                    title=f"Écart marqué selon {axis}",
                    description=(
                        f"{DIMENSION_LABELS[dimension]} : {high[1]} ({high[0]:.2f}) contre "
                        f"{low[1]} ({low[0]:.2f}), écart de {delta:.2f}."
                    ),
                    significance="high" if delta > self.HIGH_SEGMENT_DELTA else "medium",
                )
            )
        return findings

    def _pattern_findings(
        self, n: int, dimensions: Mapping[Dimension, Optional[DimensionStats]],
    ) -> list[KeyFinding]:
        findings = []
        sacred = dimensions[Dimension.SACRED_BOUNDARY]
        if sacred is not None and sacred.mean > self.PATTERN_THRESHOLD:
            findings.append(
                KeyFinding(
                    type="pattern",
                    title="Frontière sacrée élevée",
                    description=(
                        f"La majorité des répondants souhaitent préserver le spirituel de l'IA "
                        f"(moyenne {sacred.mean:.2f})."
                    ),
                    significance="high",
                )
            )
        future = dimensions[Dimension.FUTURE_ORIENTATION]
        if future is not None and future.mean > self.PATTERN_THRESHOLD:
            findings.append(
                KeyFinding(
                    type="pattern",
                    title="Orientation future positive",
                    description=(
                        f"Les répondants se montrent prêts à faire évoluer leur rapport à l'IA "
                        f"(moyenne {future.mean:.2f})."
                    ),
                    significance="medium",
                )
            )
        if n >= self.settings.MODERATE_CONFIDENCE_SAMPLE_SIZE:
            findings.append(
                KeyFinding(
                    type="pattern",
                    title="Échantillon significatif",
                    description=f"{n} répondants permettent des analyses statistiques fiables.",
                    significance="high" if n >= self.settings.RECALIBRATION_THRESHOLD else "medium",
                )
            )
        return findings
