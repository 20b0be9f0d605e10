"""
Faith & AI Profile Engine — Dimension Contribution Tables

For every dimension, the ordered list of answers that feed it, the weight
of each, and the rule that maps the raw answer to a 1-5 sub-score.  Items
asked only to clergy or only to laypeople carry an ``audience`` so that a
stray answer from the other branch of the questionnaire is ignored.

All weights reflect expert judgement (face validity), not factor analysis;
they are data so that a later recalibration is a table edit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, Mapping

from faithprofile.catalog.dimensions import Dimension
from faithprofile.catalog.rules import (
    ArrayLength,
    ContextBreadth,
    FixedScore,
    Lookup,
    MatrixCell,
    MatrixDelegation,
    NumericScale,
    SpiritualUse,
)
from faithprofile.catalog.score_maps import (
    AI_FREQUENCY_SCORES,
    CARE_EMAIL_SCORES,
    CRS_SCORE_MAP,
    DIGITAL_ATTITUDE_SCORES,
    LAIC_CONSEIL_SCORES,
    LAIC_PRIERE_SCORES,
    MINISTRY_USAGE_SCORES,
    PREACHING_TASK_WEIGHTS,
)

Audience = Literal["all", "clergy", "lay"]


@dataclass(frozen=True)
class Contribution:
    rule: Callable[[Mapping], float | None]
    weight: float
    audience: Audience = "all"

    @property
    def keys(self) -> tuple[str, ...]:
        return self.rule.keys


CRS_ITEMS: tuple[str, ...] = (
    "crs_intellect",
    "crs_ideology",
    "crs_public_practice",
    "crs_private_practice",
    "crs_experience",
)

# Answers expected per dimension for a fully informed score; drives the
# per-dimension confidence.
EXPECTED_ITEMS: dict[Dimension, int] = {
    Dimension.RELIGIOSITY: 5,
    Dimension.AI_OPENNESS: 5,
    Dimension.SACRED_BOUNDARY: 6,
    Dimension.ETHICAL_CONCERN: 4,
    Dimension.PSYCHOLOGICAL_PERCEPTION: 4,
    Dimension.COMMUNITY_INFLUENCE: 4,
    Dimension.FUTURE_ORIENTATION: 4,
}


def _one_of(*values: str) -> frozenset[str]:
    return frozenset(values)


DIMENSION_CONTRIBUTIONS: dict[Dimension, tuple[Contribution, ...]] = {
    # ── Religiosity: CRS-5, equal weights ─────────────────────────────────
    Dimension.RELIGIOSITY: tuple(
        Contribution(Lookup(item, CRS_SCORE_MAP), 1.0) for item in CRS_ITEMS
    ),

    # ── AI openness ───────────────────────────────────────────────────────
    Dimension.AI_OPENNESS: (
        Contribution(Lookup("ctrl_ia_frequence", AI_FREQUENCY_SCORES), 2.0),
        Contribution(NumericScale("ctrl_ia_confort"), 2.0),
        Contribution(ContextBreadth(step=0.7), 1.5),
        Contribution(Lookup("digital_attitude_generale", DIGITAL_ATTITUDE_SCORES), 0.8),
        Contribution(Lookup("min_pred_usage", MINISTRY_USAGE_SCORES), 1.5, "clergy"),
        Contribution(Lookup("min_care_email", CARE_EMAIL_SCORES), 1.0, "clergy"),
        Contribution(NumericScale("min_admin_burden"), 0.8, "clergy"),
        Contribution(MatrixDelegation("min_pred_nature", PREACHING_TASK_WEIGHTS), 1.5, "clergy"),
        Contribution(Lookup("laic_substitution_priere", LAIC_PRIERE_SCORES), 1.2, "lay"),
        Contribution(Lookup("laic_conseil_spirituel", LAIC_CONSEIL_SCORES), 1.2, "lay"),
    ),

    # ── Sacred boundary ───────────────────────────────────────────────────
    Dimension.SACRED_BOUNDARY: (
        Contribution(SpiritualUse("general_only", 4.5), 1.5),
        Contribution(SpiritualUse("spiritual", 2.0), 1.5),
        Contribution(SpiritualUse("non_user", 3.0), 0.8),
        Contribution(
            Lookup("theo_inspiration", {
                "impossible": 5,
                "peu_probable": 4,
                "possible_indirect": 3,
                "possible": 1.5,
                "ne_sait_pas": 3,
            }),
            1.5,
        ),
        Contribution(NumericScale("theo_liturgie_ia", invert=True), 2.0),
        Contribution(ArrayLength("theo_activites_sacrees", step=0.9, none_token="aucune"), 2.0),
        Contribution(
            Lookup("theo_mediation_humaine", {
                "oui_absolument": 5,
                "oui_pour_essentiel": 4,
                "partiellement": 3,
                "non_pas_necessairement": 1.5,
                "ne_sait_pas": 3,
            }),
            1.8,
        ),
        Contribution(NumericScale("min_pred_sentiment"), 1.2, "clergy"),
        Contribution(
            FixedScore("min_pred_usage", (
                (_one_of("jamais"), 5.0),
                (_one_of("systematique"), 1.5),
            )),
            1.0,
            "clergy",
        ),
        Contribution(FixedScore("min_care_email", ((_one_of("non_jamais"), 5.0),)), 0.8, "clergy"),
        # Delegating the writing itself: 0 -> 5, 3 -> 1
        Contribution(MatrixCell("min_pred_nature", "redaction", intercept=5.0, slope=-4 / 3), 1.5, "clergy"),
        Contribution(
            FixedScore("laic_substitution_priere", ((_one_of("non"), 4.5),), otherwise=2.0),
            1.0,
            "lay",
        ),
        Contribution(
            FixedScore("laic_conseil_spirituel", (
                (_one_of("jamais"), 5.0),
                (_one_of("deja_fait"), 1.0),
            )),
            1.0,
            "lay",
        ),
    ),

    # ── Ethical concern ───────────────────────────────────────────────────
    Dimension.ETHICAL_CONCERN: (
        Contribution(
            Lookup("theo_risque_futur", {
                "paresse": 4,
                "deshumanisation": 4.5,
                "heresie": 4.5,
                "autre": 3.5,
                "aucune": 1,
                "ne_sait_pas": 2.5,
            }),
            2.0,
        ),
        Contribution(
            Lookup("theo_utilite_percue", {
                "tres_negatif": 5,
                "negatif": 4,
                "neutre": 3,
                "positif": 2,
                "tres_positif": 1,
                "ne_sait_pas": 3,
            }),
            1.5,
        ),
        Contribution(
            Lookup("psych_anxiete_remplacement", {
                "non_impossible": 1.5,
                "non_peu_probable": 2,
                "possible_partiel": 3.5,
                "oui_probable": 4.5,
                "oui_certain": 5,
                "ne_sait_pas": 3,
            }),
            1.5,
        ),
        Contribution(
            Lookup("psych_aias_opacity", {
                "non_confiance": 1,
                "non_indifferent": 1.5,
                "peu": 2.5,
                "oui_moderement": 4,
                "oui_fortement": 5,
            }),
            1.5,
        ),
        Contribution(NumericScale("min_pred_sentiment"), 1.2, "clergy"),
        Contribution(
            Lookup("psych_imago_dei", {
                "pas_du_tout": 1,
                "peu": 2,
                "moderement": 3,
                "beaucoup": 4,
                "totalement": 5,
                "ne_sait_pas": 2.5,
            }),
            1.3,
        ),
    ),

    # ── Psychological perception ──────────────────────────────────────────
    Dimension.PSYCHOLOGICAL_PERCEPTION: (
        Contribution(
            Lookup("psych_godspeed_nature", {
                "1_machine": 1,
                "2_machine_plus": 2,
                "3_neutre": 3,
                "4_humain_moins": 4,
                "5_humain": 5,
            }),
            2.0,
        ),
        Contribution(
            Lookup("psych_godspeed_conscience", {
                "impossible": 1,
                "imitation": 2,
                "incertain": 3,
                "possible_emergence": 4,
                "probable": 5,
            }),
            2.5,
        ),
        Contribution(
            Lookup("psych_imago_dei", {
                "pas_du_tout": 1,
                "peu": 2,
                "moderement": 3,
                "beaucoup": 4,
                "totalement": 5,
                "ne_sait_pas": 3,
            }),
            1.8,
        ),
        Contribution(
            Lookup("psych_anxiete_remplacement", {
                "non_impossible": 1,
                "non_peu_probable": 2,
                "possible_partiel": 3,
                "oui_probable": 4,
                "oui_certain": 5,
                "ne_sait_pas": 3,
            }),
            1.5,
        ),
        Contribution(
            Lookup("theo_inspiration", {
                "impossible": 1,
                "peu_probable": 2,
                "possible_indirect": 3.5,
                "possible": 4.5,
                "ne_sait_pas": 3,
            }),
            1.3,
        ),
    ),

    # ── Community influence ───────────────────────────────────────────────
    Dimension.COMMUNITY_INFLUENCE: (
        Contribution(
            Lookup("communaute_position_officielle", {
                "oui_favorable": 4,
                "oui_prudent": 4,
                "oui_defavorable": 4,
                "non": 2,
                "ne_sait_pas": 2,
            }),
            1.5,
        ),
        Contribution(
            Lookup("communaute_discussions", {
                "jamais": 1,
                "rarement": 2,
                "parfois": 3,
                "souvent": 4,
                "organise": 5,
            }),
            2.0,
        ),
        # Knowing how peers feel, whichever way, signals involvement
        Contribution(
            Lookup("communaute_perception_pairs", {
                "tres_favorable": 4,
                "favorable": 3.5,
                "neutre": 3,
                "mefiant": 3.5,
                "hostile": 4,
                "ne_sait_pas": 1.5,
            }),
            1.5,
        ),
        Contribution(
            FixedScore("theo_orientation", (
                (_one_of("traditionaliste", "progressiste"), 3.5),
                (_one_of("ne_sait_pas"), 2.0),
            )),
            0.8,
        ),
        Contribution(
            FixedScore("profil_statut", (
                (_one_of("laic_engagé", "clerge", "religieux"), 4.0),
                (_one_of("curieux"), 2.0),
            )),
            1.0,
        ),
        Contribution(
            Lookup("profil_taille_communaute", {
                "tres_petite": 2.5,
                "petite": 3,
                "moyenne": 3.5,
                "grande": 4,
                "tres_grande": 4,
                "ne_sait_pas": 2.5,
            }),
            0.7,
        ),
    ),

    # ── Future orientation ────────────────────────────────────────────────
    Dimension.FUTURE_ORIENTATION: (
        Contribution(
            Lookup("futur_intention_usage", {
                "oui_certain": 5,
                "oui_probable": 4,
                "peut_etre": 3,
                "non_probable": 2,
                "non_certain": 1,
                "ne_sait_pas": 2.5,
            }),
            2.0,
        ),
        Contribution(
            Lookup("futur_formation_souhait", {
                "oui_tres": 5,
                "oui_assez": 4,
                "peut_etre": 3,
                "non_pas_vraiment": 2,
                "non_pas_du_tout": 1,
            }),
            2.0,
        ),
        Contribution(ArrayLength("futur_domaines_interet", step=0.6, none_token="aucun"), 1.5),
        Contribution(
            Lookup("ctrl_ia_frequence", {
                "jamais": 2,
                "essaye": 3,
                "occasionnel": 3.5,
                "regulier": 4,
                "quotidien": 4.5,
            }),
            1.0,
        ),
        Contribution(
            Lookup("profil_age", {
                "18-35": 3.8,
                "36-50": 3.5,
                "51-65": 3,
                "66+": 2.5,
            }),
            0.6,
        ),
        Contribution(
            Lookup("digital_attitude_generale", {
                "tres_positif": 4.5,
                "positif": 4,
                "neutre": 3,
                "negatif": 2,
                "tres_negatif": 1,
            }),
            0.8,
        ),
    ),
}
