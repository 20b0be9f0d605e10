"""
Faith & AI Profile Engine — Categorical Score Maps

Lookup tables shared by the dimension scorer and the validated scales.
Each maps a questionnaire answer token to a 1-5 sub-score.  The tokens are
the French identifiers emitted by the questionnaire and are kept verbatim.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


def _frozen(table: dict[str, float]) -> Mapping[str, float]:
    return MappingProxyType(table)


# Centrality of Religiosity Scale: frequency and intensity answers.
CRS_SCORE_MAP = _frozen({
    # Intensity
    "jamais": 1,
    "pas_du_tout": 1,
    "rarement": 2,
    "peu": 2,
    "occasionnellement": 3,
    "moderement": 3,
    "souvent": 4,
    "beaucoup": 4,
    "tres_souvent": 5,
    "totalement": 5,
    # Public practice
    "quelques_fois_an": 2,
    "mensuel": 3,
    "hebdo": 4,
    "pluri_hebdo": 5,
    # Private practice
    "quotidien": 4,
    "pluri_quotidien": 5,
})

AI_FREQUENCY_SCORES = _frozen({
    "jamais": 1,
    "essaye": 2,
    "occasionnel": 3,
    "regulier": 4,
    "quotidien": 5,
})

MINISTRY_USAGE_SCORES = _frozen({
    "jamais": 1,
    "rare": 2,
    "regulier": 4,
    "systematique": 5,
})

CARE_EMAIL_SCORES = _frozen({
    "non_jamais": 1,
    "oui_brouillon": 3.5,
    "oui_souvent": 5,
})

LAIC_PRIERE_SCORES = _frozen({
    "non": 1,
    "oui_positif": 5,
    "oui_neutre": 3.5,
    "oui_negatif": 2.5,
})

LAIC_CONSEIL_SCORES = _frozen({
    "jamais": 1,
    "complement": 3,
    "oui_possible": 4,
    "deja_fait": 5,
    "ne_sait_pas": 2.5,
})

# Degree of delegation (1-3) per sermon-preparation task, and how much each
# task counts toward AI openness.
PREACHING_TASK_WEIGHTS = _frozen({
    "plan": 1,
    "exegese": 2,
    "illustration": 1,
    "images": 1,
    "redaction": 3,
})

DIGITAL_ATTITUDE_SCORES = _frozen({
    "tres_positif": 5,
    "positif": 4,
    "neutre": 3,
    "negatif": 2,
    "tres_negatif": 1,
})
