from pydantic import BaseModel, ConfigDict, Field


class ValidatedScores(BaseModel):
    model_config = ConfigDict(frozen=True)

    crs5: float = Field(ge=1.0, le=5.0)
    ai_adoption: float = Field(ge=1.0, le=5.0)
    bias_adjustment: float = Field(ge=0.0, le=10.0)
    resistance_index: float = Field(ge=-4.0, le=4.0)
    religiosity_level: str  # non_religieux / peu_religieux / religieux / tres_religieux
    ai_adoption_level: str  # resistant / prudent / ouvert / enthousiaste
    resistance_level: str  # aucune / faible / moderee / forte
    bias_items_answered: int = 0
