from pydantic import BaseModel, ConfigDict, Field

from faithprofile.catalog.dimensions import DIMENSIONS, Dimension


class DimensionScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: float = Field(ge=1.0, le=5.0)
    percentile: float = Field(ge=0.0, le=100.0)
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)  # share of items answered × bias multiplier


class SevenDimensions(BaseModel):
    model_config = ConfigDict(frozen=True)

    religiosity: DimensionScore
    ai_openness: DimensionScore
    sacred_boundary: DimensionScore
    ethical_concern: DimensionScore
    psychological_perception: DimensionScore
    community_influence: DimensionScore
    future_orientation: DimensionScore

    def get(self, dimension: Dimension | str) -> DimensionScore:
        return getattr(self, Dimension(dimension).value)

    def value_of(self, dimension: Dimension | str) -> float:
        return self.get(dimension).value

    def as_values(self) -> dict[Dimension, float]:
        """Dimension values in declaration order."""
        return {dimension: self.get(dimension).value for dimension in DIMENSIONS}

    @classmethod
    def from_scores(cls, scores: dict[Dimension, DimensionScore]) -> "SevenDimensions":
        return cls(**{dimension.value: scores[dimension] for dimension in DIMENSIONS})
