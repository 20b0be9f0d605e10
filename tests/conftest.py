"""Shared pytest fixtures for the faith & AI profile engine tests."""
import pytest

from faithprofile.config import Settings
from faithprofile.engine import ScoringEngine


@pytest.fixture
def settings():
    """Default settings, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def engine(settings):
    return ScoringEngine(settings)


@pytest.fixture
def traditionalist_answers():
    """Devout clergy member who keeps AI away from ministry.

    Expected dimension values (no control items, so no bias correction):
    religiosity 5.0, ai_openness 1.1, sacred_boundary 4.9,
    ethical_concern 4.5, psychological_perception 2.1,
    community_influence 3.8, future_orientation 1.3.
    """
    return {
        "profil_statut": "clerge",
        "profil_confession": "catholique",
        "profil_age": "66+",
        "profil_taille_communaute": "moyenne",
        "crs_intellect": "tres_souvent",
        "crs_ideology": "totalement",
        "crs_public_practice": "pluri_hebdo",
        "crs_private_practice": "pluri_quotidien",
        "crs_experience": "tres_souvent",
        "ctrl_ia_frequence": "jamais",
        "ctrl_ia_confort": 1,
        "digital_attitude_generale": "negatif",
        "min_pred_usage": "jamais",
        "min_care_email": "non_jamais",
        "min_admin_burden": 2,
        "min_pred_nature": {"plan": 0, "exegese": 0, "illustration": 0, "images": 0, "redaction": 0},
        "min_pred_sentiment": 5,
        "theo_inspiration": "impossible",
        "theo_liturgie_ia": 1,
        "theo_activites_sacrees": ["priere", "sacrements", "predication", "confession", "liturgie"],
        "theo_mediation_humaine": "oui_absolument",
        "theo_risque_futur": "deshumanisation",
        "theo_utilite_percue": "negatif",
        "theo_orientation": "traditionaliste",
        "psych_anxiete_remplacement": "oui_probable",
        "psych_aias_opacity": "oui_fortement",
        "psych_imago_dei": "beaucoup",
        "psych_godspeed_nature": "1_machine",
        "psych_godspeed_conscience": "impossible",
        "communaute_position_officielle": "oui_defavorable",
        "communaute_discussions": "souvent",
        "communaute_perception_pairs": "mefiant",
        "futur_intention_usage": "non_certain",
        "futur_formation_souhait": "non_pas_du_tout",
        "futur_domaines_interet": ["aucun"],
    }


@pytest.fixture
def pioneer_answers():
    """Lay respondent who uses AI daily, including for prayer.

    Expected dimension values: religiosity 2.8, ai_openness 4.9,
    sacred_boundary 1.4, ethical_concern 1.3, psychological_perception 3.0,
    community_influence 2.2, future_orientation 4.8.
    """
    return {
        "profil_statut": "laic_pratiquant",
        "profil_confession": "protestant",
        "profil_age": "18-35",
        "profil_taille_communaute": "petite",
        "crs_intellect": "occasionnellement",
        "crs_ideology": "moderement",
        "crs_public_practice": "mensuel",
        "crs_private_practice": "occasionnellement",
        "crs_experience": "peu",
        "ctrl_ia_frequence": "quotidien",
        "ctrl_ia_confort": 5,
        "ctrl_ia_contextes": ["travail", "etudes", "creation", "spirituel", "loisirs"],
        "digital_attitude_generale": "tres_positif",
        "laic_substitution_priere": "oui_positif",
        "laic_conseil_spirituel": "deja_fait",
        "theo_inspiration": "possible",
        "theo_liturgie_ia": 5,
        "theo_activites_sacrees": ["aucune"],
        "theo_mediation_humaine": "non_pas_necessairement",
        "theo_risque_futur": "aucune",
        "theo_utilite_percue": "tres_positif",
        "theo_orientation": "progressiste",
        "psych_anxiete_remplacement": "non_impossible",
        "psych_aias_opacity": "non_confiance",
        "psych_imago_dei": "peu",
        "psych_godspeed_nature": "3_neutre",
        "psych_godspeed_conscience": "possible_emergence",
        "communaute_position_officielle": "non",
        "communaute_discussions": "rarement",
        "communaute_perception_pairs": "ne_sait_pas",
        "futur_intention_usage": "oui_certain",
        "futur_formation_souhait": "oui_tres",
        "futur_domaines_interet": ["a", "b", "c", "d", "e", "f", "g"],
    }
