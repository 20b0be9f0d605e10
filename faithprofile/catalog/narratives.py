"""
Faith & AI Profile Engine — Narrative Rule Tables

Every sentence the interpretation step can produce lives here.  A rule
fires when all of its conditions hold; a condition is a dimension, a
comparison (``">="`` or ``"<="``) and a threshold on the 1-5 scale.

Tables are evaluated in declaration order and the interpretation step
truncates them, so order doubles as precedence.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping

from faithprofile.catalog.dimensions import Dimension

D = Dimension

Comparison = Literal[">=", "<="]
Condition = tuple[Dimension, Comparison, float]


@dataclass(frozen=True)
class TextRule:
    conditions: tuple[Condition, ...]
    text: str


@dataclass(frozen=True)
class TensionRule:
    conditions: tuple[Condition, ...]
    dimension1: Dimension
    dimension2: Dimension
    description: str
    suggestion: str


@dataclass(frozen=True)
class InsightRule:
    conditions: tuple[Condition, ...]
    category: str
    title: str
    message: str
    priority: int


@dataclass(frozen=True)
class GrowthTemplate:
    area: str
    current_state: str
    potential_growth: str
    actionable_step: str


def holds(conditions: tuple[Condition, ...], values: Mapping[Dimension, float]) -> bool:
    """True when every condition holds for ``values``."""
    for dimension, comparison, threshold in conditions:
        value = values[dimension]
        if comparison == ">=" and not value >= threshold:
            return False
        if comparison == "<=" and not value <= threshold:
            return False
    return True


# ── Headline / narrative ──────────────────────────────────────────────────

SECONDARY_HEADLINE = "{title} avec des tendances {secondary}"
SUB_PROFILE_NARRATIVE = " Plus spécifiquement, {description}"

# Strength added when a dimension reaches its ceiling.
DIMENSION_STRENGTH_THRESHOLD: float = 4.5
DIMENSION_STRENGTHS: dict[Dimension, str] = {
    D.RELIGIOSITY: "Foi au cœur de chaque aspect de la vie",
    D.AI_OPENNESS: "Adoption enthousiaste de l'IA",
    D.SACRED_BOUNDARY: "Frontière stricte, le sacré est protégé",
    D.ETHICAL_CONCERN: "Vigilance face aux risques éthiques",
    D.PSYCHOLOGICAL_PERCEPTION: "Questions profondes sur la conscience et l'humanité",
    D.COMMUNITY_INFLUENCE: "Fort alignement avec la communauté",
    D.FUTURE_ORIENTATION: "Désir d'explorer et d'apprendre davantage",
}

# ── Unique aspects ────────────────────────────────────────────────────────

UNIQUE_ASPECT_RULES: tuple[TextRule, ...] = (
    TextRule(
        ((D.RELIGIOSITY, ">=", 4), (D.AI_OPENNESS, ">=", 4)),
        "Rare combinaison de foi intense et d'enthousiasme technologique",
    ),
    TextRule(
        ((D.ETHICAL_CONCERN, ">=", 4), (D.AI_OPENNESS, ">=", 3.5)),
        "Capacité à adopter l'IA tout en maintenant une vigilance éthique",
    ),
    TextRule(
        ((D.SACRED_BOUNDARY, ">=", 4), (D.FUTURE_ORIENTATION, ">=", 3.5)),
        "Protection du sacré combinée à une ouverture au progrès",
    ),
    TextRule(
        ((D.COMMUNITY_INFLUENCE, "<=", 2.5), (D.RELIGIOSITY, ">=", 3.5)),
        "Foi personnelle développée indépendamment des influences communautaires",
    ),
)
UNIQUE_ASPECT_FALLBACK = "Profil équilibré reflétant une approche réfléchie"

# ── Blind spots ───────────────────────────────────────────────────────────

BLIND_SPOT_RULES: tuple[TextRule, ...] = (
    TextRule(
        ((D.AI_OPENNESS, "<=", 2),),
        "Risque de passer à côté d'outils réellement utiles par excès de prudence",
    ),
    TextRule(
        ((D.AI_OPENNESS, ">=", 4.5), (D.ETHICAL_CONCERN, "<=", 2)),
        "Enthousiasme qui pourrait manquer de recul critique",
    ),
    TextRule(
        ((D.COMMUNITY_INFLUENCE, ">=", 4.5),),
        "Possible difficulté à développer une position personnelle indépendante",
    ),
    TextRule(
        ((D.SACRED_BOUNDARY, "<=", 1.5),),
        "Frontière poreuse qui pourrait diluer la spécificité du spirituel",
    ),
)
BLIND_SPOT_FALLBACK = "Aucun angle mort majeur identifié"

# ── Tensions ──────────────────────────────────────────────────────────────

TENSION_RULES: tuple[TensionRule, ...] = (
    TensionRule(
        ((D.AI_OPENNESS, ">=", 3.5), (D.SACRED_BOUNDARY, ">=", 4)),
        D.AI_OPENNESS,
        D.SACRED_BOUNDARY,
        "Vous êtes ouvert à l'IA en général mais maintenez une réserve pour le spirituel.",
        "Clarifiez ce qui distingue un usage spirituel d'un usage pratique de l'IA.",
    ),
    TensionRule(
        ((D.ETHICAL_CONCERN, ">=", 4), (D.FUTURE_ORIENTATION, ">=", 4)),
        D.ETHICAL_CONCERN,
        D.FUTURE_ORIENTATION,
        "Vous voulez avancer mais avec prudence éthique.",
        "Cette tension est créative : elle peut vous conduire à une adoption responsable.",
    ),
    TensionRule(
        ((D.COMMUNITY_INFLUENCE, "<=", 2), (D.RELIGIOSITY, ">=", 4)),
        D.COMMUNITY_INFLUENCE,
        D.RELIGIOSITY,
        "Foi profonde mais peu influencée par la communauté.",
        "Enrichissez votre réflexion par le dialogue avec d'autres croyants.",
    ),
    TensionRule(
        ((D.PSYCHOLOGICAL_PERCEPTION, ">=", 4), (D.ETHICAL_CONCERN, "<=", 2)),
        D.PSYCHOLOGICAL_PERCEPTION,
        D.ETHICAL_CONCERN,
        "Vous réfléchissez à la nature de l'IA mais sans inquiétude particulière.",
        "Votre approche philosophique pourrait gagner à considérer les implications pratiques.",
    ),
    TensionRule(
        ((D.RELIGIOSITY, ">=", 4), (D.AI_OPENNESS, ">=", 4)),
        D.RELIGIOSITY,
        D.AI_OPENNESS,
        "Votre foi intense coexiste avec un réel enthousiasme pour l'IA.",
        "Discernez les usages où la technologie sert votre vie spirituelle et ceux où elle "
        "pourrait s'y substituer.",
    ),
)

# ── Insights ──────────────────────────────────────────────────────────────

INSIGHT_RULES: tuple[InsightRule, ...] = (
    InsightRule(
        ((D.RELIGIOSITY, ">=", 4.5),), "spiritual", "Foi vivante et centrale",
        "Votre pratique religieuse est exceptionnellement riche. Cette profondeur spirituelle est "
        "un ancrage précieux pour discerner l'usage de l'IA.",
        5,
    ),
    InsightRule(
        ((D.RELIGIOSITY, "<=", 2),), "spiritual", "Chemin spirituel en évolution",
        "Votre foi est en phase d'exploration. L'IA pourrait être un compagnon de recherche, mais "
        "les rencontres humaines restent irremplaçables.",
        4,
    ),
    InsightRule(
        ((D.AI_OPENNESS, ">=", 4.5),), "technological", "Pionnier technologique",
        "Vous faites partie des répondants les plus ouverts à l'IA. Votre expérience peut éclairer "
        "d'autres croyants plus hésitants.",
        4,
    ),
    InsightRule(
        ((D.AI_OPENNESS, "<=", 1.8),), "technological", "Prudence technologique assumée",
        "Votre réserve face à l'IA témoigne d'une sagesse face aux modes. Cette prudence peut "
        "protéger l'essentiel.",
        3,
    ),
    InsightRule(
        ((D.SACRED_BOUNDARY, ">=", 4.5),), "spiritual", "Gardien du sacré",
        "Vous maintenez une frontière claire entre le profane et le sacré. Cette distinction est "
        "théologiquement significative.",
        4,
    ),
    InsightRule(
        ((D.SACRED_BOUNDARY, "<=", 1.5), (D.AI_OPENNESS, ">=", 3.5)), "spiritual",
        "Spiritualité fluide",
        "Vous voyez l'IA comme potentiellement présente dans tous les aspects de la vie, y compris "
        "spirituels. Une approche audacieuse qui mérite discernement.",
        3,
    ),
    InsightRule(
        ((D.ETHICAL_CONCERN, ">=", 4.5),), "ethical", "Conscience éthique aiguë",
        "Vos préoccupations éthiques sont profondes. Ce sens critique est précieux dans un monde "
        "qui adopte souvent les technologies sans recul.",
        4,
    ),
    InsightRule(
        ((D.PSYCHOLOGICAL_PERCEPTION, ">=", 4.5),), "developmental", "Questionnement anthropologique",
        "Vous vous interrogez profondément sur la nature de l'IA et son rapport à l'humain. Ces "
        "questions théologiques méritent d'être approfondies.",
        3,
    ),
    InsightRule(
        ((D.COMMUNITY_INFLUENCE, ">=", 4.5),), "relational", "Ancrage communautaire fort",
        "Votre communauté joue un rôle important dans votre réflexion. Ce lien peut être une force "
        "pour un discernement collectif.",
        3,
    ),
    InsightRule(
        ((D.FUTURE_ORIENTATION, ">=", 4.5),), "developmental", "Tournée vers l'avenir",
        "Vous êtes très ouvert à faire évoluer votre rapport à l'IA. Cette disposition à apprendre "
        "est un atout pour s'adapter aux changements.",
        3,
    ),
    InsightRule(
        ((D.FUTURE_ORIENTATION, "<=", 1.5),), "developmental", "Stabilité assumée",
        "Vous n'envisagez pas de changer significativement votre approche. Cette constance peut "
        "être sagesse ou résistance au changement.",
        2,
    ),
)

# ── Growth areas (one template per dimension, describing a low value) ─────

GROWTH_TEMPLATES: dict[Dimension, GrowthTemplate] = {
    D.RELIGIOSITY: GrowthTemplate(
        area="Approfondissement spirituel",
        current_state="Foi en exploration ou en retrait",
        potential_growth="Laisser votre vie spirituelle éclairer vos choix technologiques",
        actionable_step="Prenez un temps de prière ou de méditation avant d'adopter un nouvel outil",
    ),
    D.AI_OPENNESS: GrowthTemplate(
        area="Exploration technologique",
        current_state="Réserve face à l'IA",
        potential_growth="Découvrir des usages qui correspondent à vos valeurs",
        actionable_step="Essayez un outil d'IA simple dans un contexte non spirituel pour vous familiariser",
    ),
    D.SACRED_BOUNDARY: GrowthTemplate(
        area="Discernement du sacré",
        current_state="Frontière perméable entre usages pratiques et spirituels",
        potential_growth="Identifier ce qui doit rester proprement humain dans la vie spirituelle",
        actionable_step="Dressez la liste des moments spirituels que vous souhaitez garder sans médiation technologique",
    ),
    D.ETHICAL_CONCERN: GrowthTemplate(
        area="Réflexion éthique",
        current_state="Adoption sans réserves particulières",
        potential_growth="Développer un regard critique constructif",
        actionable_step="Lisez un article sur les enjeux éthiques de l'IA dans un domaine qui vous concerne",
    ),
    D.PSYCHOLOGICAL_PERCEPTION: GrowthTemplate(
        area="Questionnement anthropologique",
        current_state="L'IA perçue comme un simple outil",
        potential_growth="Interroger ce que l'IA révèle de la singularité humaine",
        actionable_step="Échangez avec un proche sur ce qui distingue une personne d'une machine qui lui ressemble",
    ),
    D.COMMUNITY_INFLUENCE: GrowthTemplate(
        area="Dialogue communautaire",
        current_state="Réflexion plutôt individuelle",
        potential_growth="Enrichir votre perspective par l'échange",
        actionable_step="Initiez une conversation sur l'IA avec un membre de votre communauté",
    ),
    D.FUTURE_ORIENTATION: GrowthTemplate(
        area="Ouverture au changement",
        current_state="Satisfaction avec l'approche actuelle",
        potential_growth="Rester informé des évolutions sans nécessairement les adopter",
        actionable_step="Suivez occasionnellement l'actualité de l'IA dans le domaine religieux",
    ),
}
