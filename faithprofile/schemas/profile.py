from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from faithprofile.catalog.dimensions import Dimension
from faithprofile.schemas.dimensions import SevenDimensions


# ── Catalog entries ───────────────────────────────────────────────────────

class PrototypeBand(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: float
    max: float
    weight: float


class ProfileDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    short_description: str
    full_description: str
    core_motivation: str
    primary_fear: str
    communication_style: str
    prototype: dict[Dimension, PrototypeBand]
    sub_profiles: tuple[str, ...]


class SubProfileDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    parent: str
    title: str
    description: str
    distinguishing_traits: tuple[str, ...]
    prototype: dict[Dimension, PrototypeBand]  # emphasised dimensions only


# ── Classification result ─────────────────────────────────────────────────

class ProfileMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    profile_id: str
    match_score: float = Field(ge=0.0, le=100.0)  # share of total affinity
    affinity: float = Field(ge=0.0, le=100.0)  # 100 × exp(-decay × distance)
    distance: float = Field(ge=0.0)


class Interpretation(BaseModel):
    headline: str
    narrative: str
    strengths: list[str]
    unique_aspects: list[str]
    blind_spots: list[str]


class Tension(BaseModel):
    dimension1: Dimension
    dimension2: Dimension
    description: str
    suggestion: str


class GrowthArea(BaseModel):
    dimension: Dimension
    area: str
    current_state: str
    potential_growth: str
    actionable_step: str


class Insight(BaseModel):
    category: str  # spiritual / technological / ethical / relational / developmental
    title: str
    message: str
    priority: int = Field(ge=1, le=5)


class ProfileSpectrum(BaseModel):
    primary: ProfileMatch
    secondary: Optional[ProfileMatch] = None
    sub_profile: ProfileMatch
    all_matches: list[ProfileMatch]
    dimensions: SevenDimensions
    interpretation: Interpretation
    tensions: list[Tension] = []
    growth_areas: list[GrowthArea] = []
    insights: list[Insight] = []
