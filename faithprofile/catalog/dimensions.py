"""The seven scoring dimensions, in their fixed declaration order."""

from __future__ import annotations

from enum import Enum


class Dimension(str, Enum):
    RELIGIOSITY = "religiosity"
    AI_OPENNESS = "ai_openness"
    SACRED_BOUNDARY = "sacred_boundary"
    ETHICAL_CONCERN = "ethical_concern"
    PSYCHOLOGICAL_PERCEPTION = "psychological_perception"
    COMMUNITY_INFLUENCE = "community_influence"
    FUTURE_ORIENTATION = "future_orientation"


DIMENSIONS: tuple[Dimension, ...] = tuple(Dimension)

DIMENSION_LABELS: dict[Dimension, str] = {
    Dimension.RELIGIOSITY: "Intensité Spirituelle",
    Dimension.AI_OPENNESS: "Ouverture à l'IA",
    Dimension.SACRED_BOUNDARY: "Frontière Sacrée",
    Dimension.ETHICAL_CONCERN: "Préoccupation Éthique",
    Dimension.PSYCHOLOGICAL_PERCEPTION: "Perception de l'IA",
    Dimension.COMMUNITY_INFLUENCE: "Ancrage Communautaire",
    Dimension.FUTURE_ORIENTATION: "Orientation Future",
}
