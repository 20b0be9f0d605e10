from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from faithprofile.catalog.dimensions import Dimension


class DimensionParameters(BaseModel):
    model_config = ConfigDict(frozen=True)

    mean: float
    stddev: float


class PopulationParameters(BaseModel):
    """Normal-distribution parameters the percentiles are measured against."""

    model_config = ConfigDict(frozen=True)

    dimensions: dict[Dimension, DimensionParameters]
    source: Literal["provisional", "measured"] = "provisional"
    n: int = 0


class DimensionStats(BaseModel):
    mean: float
    stddev: float  # population standard deviation
    median: float
    n: int
    distribution: list[int]  # [<1.5, <2.5, <3.5, <4.5, rest]


class SampleCaveat(BaseModel):
    confidence_level: Literal["low", "moderate", "high"]
    low_confidence: bool
    moderate_confidence: bool


class SegmentStats(BaseModel):
    n: int
    dimensions: dict[Dimension, Optional[DimensionStats]]
    correlation_matrix: dict[Dimension, dict[Dimension, float]]
    profile_histogram: dict[str, int]
    validated_means: dict[str, Optional[float]]  # crs5 / ai_adoption / resistance_index
    caveat: SampleCaveat


class KeyFinding(BaseModel):
    type: Literal["correlation", "segment", "pattern"]
    title: str
    description: str
    significance: Literal["high", "medium", "low"]


class PopulationStats(BaseModel):
    n: int = Field(ge=0)
    dimensions: dict[Dimension, Optional[DimensionStats]]
    correlation_matrix: dict[Dimension, dict[Dimension, float]]
    profile_histogram: dict[str, int]
    validated_means: dict[str, Optional[float]]
    segments: dict[str, dict[str, SegmentStats]]
    key_findings: list[KeyFinding]
    caveat: SampleCaveat
    recalibration_ready: bool = False

    @property
    def low_confidence(self) -> bool:
        return self.caveat.low_confidence

    @property
    def moderate_confidence(self) -> bool:
        return self.caveat.moderate_confidence

    def to_population_parameters(self) -> PopulationParameters | None:
        """Measured parameters for percentile scoring, or ``None`` without data."""
        if self.n == 0:
            return None
        measured: dict[Dimension, DimensionParameters] = {}
        for dimension, stats in self.dimensions.items():
            if stats is None:
                return None
            measured[dimension] = DimensionParameters(mean=stats.mean, stddev=stats.stddev)
        return PopulationParameters(dimensions=measured, source="measured", n=self.n)
