"""
Faith & AI Profile Engine — plain-data payloads.

Everything the engine returns is one of these pydantic models, so report
and dashboard collaborators can serialise results with ``model_dump()``.
"""

from faithprofile.schemas.dimensions import DimensionScore, SevenDimensions
from faithprofile.schemas.population import (
    DimensionParameters,
    DimensionStats,
    KeyFinding,
    PopulationParameters,
    PopulationStats,
    SampleCaveat,
    SegmentStats,
)
from faithprofile.schemas.profile import (
    GrowthArea,
    Insight,
    Interpretation,
    ProfileDefinition,
    ProfileMatch,
    ProfileSpectrum,
    PrototypeBand,
    SubProfileDefinition,
    Tension,
)
from faithprofile.schemas.scores import ValidatedScores

__all__ = [
    "DimensionScore",
    "SevenDimensions",
    "DimensionParameters",
    "DimensionStats",
    "KeyFinding",
    "PopulationParameters",
    "PopulationStats",
    "SampleCaveat",
    "SegmentStats",
    "GrowthArea",
    "Insight",
    "Interpretation",
    "ProfileDefinition",
    "ProfileMatch",
    "ProfileSpectrum",
    "PrototypeBand",
    "SubProfileDefinition",
    "Tension",
    "ValidatedScores",
]
