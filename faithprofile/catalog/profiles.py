"""
Faith & AI Profile Engine — Profile Catalog

The eight archetypal profiles and their twenty-four sub-profiles, as data.
Each prototype gives, per dimension, the target interval ``[min, max]`` on
the 1-5 scale and the importance weight used by the classifier.

Sub-profiles are described by which dimensions they emphasise and how
(high, moderate or low); ``EMPHASIS_BANDS`` turns an emphasis into a target
interval so that sub-profiles are classified with the same distance
function as their parents.

Declaration order is significant: it is the default tie-break order.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from faithprofile.catalog.dimensions import Dimension
from faithprofile.schemas.profile import ProfileDefinition, PrototypeBand, SubProfileDefinition

D = Dimension


class ProfileId(str, Enum):
    GARDIEN_TRADITION = "gardien_tradition"
    PRUDENT_ECLAIRE = "prudent_eclaire"
    INNOVATEUR_ANCRE = "innovateur_ancre"
    EQUILIBRISTE = "equilibriste"
    PRAGMATIQUE_MODERNE = "pragmatique_moderne"
    PIONNIER_SPIRITUEL = "pionnier_spirituel"
    PROGRESSISTE_CRITIQUE = "progressiste_critique"
    EXPLORATEUR = "explorateur"


EMPHASIS_BANDS: dict[str, tuple[float, float]] = {
    "high": (3.5, 5.0),
    "moderate": (2.5, 3.5),
    "low": (1.0, 2.5),
}
EMPHASIS_WEIGHT: float = 1.0


def _prototype(bands: dict[Dimension, tuple[float, float, float]]) -> dict[Dimension, PrototypeBand]:
    return {
        dimension: PrototypeBand(min=low, max=high, weight=weight)
        for dimension, (low, high, weight) in bands.items()
    }


def _emphasis(pattern: dict[Dimension, str]) -> dict[Dimension, PrototypeBand]:
    prototype = {}
    for dimension, emphasis in pattern.items():
        low, high = EMPHASIS_BANDS[emphasis]
        prototype[dimension] = PrototypeBand(min=low, max=high, weight=EMPHASIS_WEIGHT)
    return prototype


# ══════════════════════════════════════════════════════════════════════════
# Primary profiles
# ══════════════════════════════════════════════════════════════════════════

PROFILE_CATALOG: tuple[ProfileDefinition, ...] = (
    ProfileDefinition(
        id=ProfileId.GARDIEN_TRADITION.value,
        title="Gardien de la Tradition",
        short_description="Protecteur des pratiques spirituelles authentiques",
        full_description=(
            "Vous êtes un pilier de la tradition, convaincu que les pratiques spirituelles ont "
            "traversé les siècles pour de bonnes raisons. L'IA représente pour vous une technologie "
            "qui, mal utilisée, pourrait éroder l'authenticité et la profondeur de la vie spirituelle. "
            "Votre prudence n'est pas du conservatisme aveugle, mais un discernement ancré dans une "
            "compréhension profonde de ce qui fait la valeur irremplaçable de l'humain dans la "
            "relation à Dieu."
        ),
        core_motivation="Préserver l'authenticité de la rencontre avec Dieu",
        primary_fear="Que la technologie déshumanise la vie spirituelle",
        communication_style="Réfléchi, citant volontiers la tradition et l'expérience",
        prototype=_prototype({
            D.RELIGIOSITY: (4, 5, 1.2),
            D.AI_OPENNESS: (1, 2.5, 1.5),
            D.SACRED_BOUNDARY: (4, 5, 1.5),
            D.ETHICAL_CONCERN: (3.5, 5, 1.0),
            D.PSYCHOLOGICAL_PERCEPTION: (3, 5, 0.8),
            D.COMMUNITY_INFLUENCE: (3.5, 5, 1.0),
            D.FUTURE_ORIENTATION: (1, 2.5, 0.8),
        }),
        sub_profiles=("protecteur_sacre", "sage_prudent", "berger_communautaire"),
    ),
    ProfileDefinition(
        id=ProfileId.PRUDENT_ECLAIRE.value,
        title="Prudent Éclairé",
        short_description="Discernement équilibré entre tradition et innovation",
        full_description=(
            "Vous représentez la voie du discernement. Attaché aux valeurs traditionnelles, vous "
            "n'êtes pas fermé au progrès mais vous exigez que chaque nouveauté prouve sa valeur avant "
            "de l'adopter. Vous testez, évaluez, et n'intégrez que ce qui enrichit véritablement sans "
            "compromettre l'essentiel. Votre approche méthodique fait de vous un conseiller précieux "
            "pour ceux qui cherchent à naviguer entre tradition et modernité."
        ),
        core_motivation="Adopter ce qui est bon après un discernement rigoureux",
        primary_fear="Accepter trop vite quelque chose de nuisible",
        communication_style="Analytique, posé, cherche les nuances",
        prototype=_prototype({
            D.RELIGIOSITY: (3.5, 5, 1.2),
            D.AI_OPENNESS: (2, 3.5, 1.3),
            D.SACRED_BOUNDARY: (3, 4.5, 1.2),
            D.ETHICAL_CONCERN: (3, 4.5, 1.1),
            D.PSYCHOLOGICAL_PERCEPTION: (2.5, 4, 0.9),
            D.COMMUNITY_INFLUENCE: (3, 4.5, 1.0),
            D.FUTURE_ORIENTATION: (2, 3.5, 1.0),
        }),
        sub_profiles=("analyste_spirituel", "discerneur_pastoral", "observateur_engage"),
    ),
    ProfileDefinition(
        id=ProfileId.INNOVATEUR_ANCRE.value,
        title="Innovateur Ancré",
        short_description="Alliance rare entre tradition profonde et adoption technologique",
        full_description=(
            "Vous êtes un profil rare et précieux : profondément ancré dans la tradition, vous voyez "
            "dans la technologie non pas une menace mais un outil au service de la mission. Vous "
            "innovez avec audace tout en restant solidement enraciné dans votre foi. Cette capacité à "
            "tenir ensemble deux mondes apparemment opposés fait de vous un pont naturel entre "
            "générations et sensibilités."
        ),
        core_motivation="Mettre la technologie au service de la mission spirituelle",
        primary_fear="Être incompris par les deux camps",
        communication_style="Enthousiaste, persuasif, cherche à rallier",
        prototype=_prototype({
            D.RELIGIOSITY: (4, 5, 1.4),
            D.AI_OPENNESS: (4, 5, 1.4),
            D.SACRED_BOUNDARY: (2, 3.5, 1.1),
            D.ETHICAL_CONCERN: (2, 3.5, 0.9),
            D.PSYCHOLOGICAL_PERCEPTION: (2, 4, 0.8),
            D.COMMUNITY_INFLUENCE: (2.5, 4, 0.9),
            D.FUTURE_ORIENTATION: (4, 5, 1.2),
        }),
        sub_profiles=("pont_generationnel", "evangeliste_digital", "theologien_techno"),
    ),
    ProfileDefinition(
        id=ProfileId.EQUILIBRISTE.value,
        title="Équilibriste Spirituel",
        short_description="Recherche constante du juste milieu",
        full_description=(
            "Vous incarnez la voie du milieu, cherchant toujours l'équilibre entre les extrêmes. Ni "
            "enthousiaste inconditionnel ni opposant farouche, vous pesez chaque décision, considérez "
            "les différents points de vue, et adoptez une approche mesurée. Cette position peut "
            "parfois être perçue comme de l'indécision, mais elle reflète en réalité une sagesse qui "
            "reconnaît la complexité des enjeux."
        ),
        core_motivation="Trouver le juste équilibre dans un monde complexe",
        primary_fear="Tomber dans un extrême qui causerait des dommages",
        communication_style="Nuancé, diplomate, cherche le consensus",
        prototype=_prototype({
            D.RELIGIOSITY: (2.5, 4, 1.0),
            D.AI_OPENNESS: (2.5, 3.5, 1.0),
            D.SACRED_BOUNDARY: (2.5, 3.5, 1.0),
            D.ETHICAL_CONCERN: (2.5, 3.5, 1.0),
            D.PSYCHOLOGICAL_PERCEPTION: (2.5, 3.5, 1.0),
            D.COMMUNITY_INFLUENCE: (2.5, 4, 1.1),
            D.FUTURE_ORIENTATION: (2.5, 3.5, 1.0),
        }),
        sub_profiles=("mediateur", "chercheur_sens", "adaptateur_prudent"),
    ),
    ProfileDefinition(
        id=ProfileId.PRAGMATIQUE_MODERNE.value,
        title="Pragmatique Moderne",
        short_description="L'efficacité au service de la mission",
        full_description=(
            "Vous êtes orienté vers les résultats. Pour vous, l'IA est avant tout un outil pratique "
            "qui peut libérer du temps et de l'énergie pour ce qui compte vraiment : les relations "
            "humaines et la mission. Vous n'êtes pas préoccupé par les débats théologiques abstraits "
            "sur l'IA ; ce qui vous intéresse, c'est comment elle peut concrètement améliorer votre "
            "ministère ou votre vie spirituelle."
        ),
        core_motivation="Maximiser l'impact positif avec les outils disponibles",
        primary_fear="Perdre du temps avec des débats improductifs",
        communication_style="Direct, orienté solutions, concret",
        prototype=_prototype({
            D.RELIGIOSITY: (2.5, 4, 0.9),
            D.AI_OPENNESS: (3.5, 5, 1.4),
            D.SACRED_BOUNDARY: (1.5, 3, 1.2),
            D.ETHICAL_CONCERN: (1.5, 3, 1.1),
            D.PSYCHOLOGICAL_PERCEPTION: (1.5, 3, 0.9),
            D.COMMUNITY_INFLUENCE: (2, 3.5, 0.8),
            D.FUTURE_ORIENTATION: (3.5, 5, 1.3),
        }),
        sub_profiles=("efficace_engage", "communicateur_digital", "optimisateur_pastoral"),
    ),
    ProfileDefinition(
        id=ProfileId.PIONNIER_SPIRITUEL.value,
        title="Pionnier Spirituel",
        short_description="Explorateur des nouvelles frontières foi-technologie",
        full_description=(
            "Vous êtes à l'avant-garde, explorant avec enthousiasme les territoires inconnus où se "
            "rencontrent spiritualité et intelligence artificielle. Vous voyez dans l'IA non seulement "
            "un outil mais potentiellement une nouvelle dimension de la réflexion spirituelle. "
            "Visionnaire, vous anticipez les possibilités que d'autres n'imaginent pas encore, même si "
            "cela vous place parfois en décalage avec votre communauté."
        ),
        core_motivation="Découvrir de nouvelles façons de vivre et partager la foi",
        primary_fear="Rester bloqué dans des pratiques dépassées",
        communication_style="Visionnaire, enthousiaste, parfois disruptif",
        prototype=_prototype({
            D.RELIGIOSITY: (2, 4.5, 0.8),
            D.AI_OPENNESS: (4, 5, 1.5),
            D.SACRED_BOUNDARY: (1, 2.5, 1.4),
            D.ETHICAL_CONCERN: (1, 3, 1.0),
            D.PSYCHOLOGICAL_PERCEPTION: (2, 4, 1.0),
            D.COMMUNITY_INFLUENCE: (1.5, 3, 0.8),
            D.FUTURE_ORIENTATION: (4, 5, 1.4),
        }),
        sub_profiles=("visionnaire", "experimentateur", "prophete_digital"),
    ),
    ProfileDefinition(
        id=ProfileId.PROGRESSISTE_CRITIQUE.value,
        title="Progressiste Critique",
        short_description="Ouverture au changement avec vigilance éthique",
        full_description=(
            "Vous êtes ouvert au progrès et au changement, mais votre esprit critique reste en éveil "
            "permanent. Vous questionnez non seulement les traditions mais aussi les nouvelles "
            "technologies. Pour vous, l'enthousiasme technologique doit être tempéré par une "
            "réflexion éthique rigoureuse. Vous refusez les réponses faciles, qu'elles viennent des "
            "conservateurs ou des technophiles."
        ),
        core_motivation="Avancer de manière responsable et éthique",
        primary_fear="Participer à des dérives technologiques nuisibles",
        communication_style="Questionneur, intellectuel, parfois provocateur",
        prototype=_prototype({
            D.RELIGIOSITY: (2, 4, 0.9),
            D.AI_OPENNESS: (2, 3.5, 1.1),
            D.SACRED_BOUNDARY: (2.5, 4, 1.1),
            D.ETHICAL_CONCERN: (4, 5, 1.5),
            D.PSYCHOLOGICAL_PERCEPTION: (3, 4.5, 1.2),
            D.COMMUNITY_INFLUENCE: (2, 3.5, 0.8),
            D.FUTURE_ORIENTATION: (3, 4.5, 1.1),
        }),
        sub_profiles=("ethicien", "reformateur_social", "philosophe_spirituel"),
    ),
    ProfileDefinition(
        id=ProfileId.EXPLORATEUR.value,
        title="Explorateur",
        short_description="En chemin, formant ses convictions",
        full_description=(
            "Vous êtes en phase d'exploration, aussi bien dans votre foi que dans votre rapport à la "
            "technologie. Cette position n'est pas une faiblesse mais une ouverture : vous êtes "
            "curieux, réceptif, prêt à apprendre de différentes perspectives. Votre parcours est "
            "encore en train de se dessiner, ce qui vous donne la liberté de forger vos propres "
            "convictions plutôt que d'hériter de positions toutes faites."
        ),
        core_motivation="Comprendre et former ses propres convictions",
        primary_fear="S'engager prématurément dans une voie inadaptée",
        communication_style="Curieux, questionneur, réceptif",
        prototype=_prototype({
            D.RELIGIOSITY: (1.5, 3.5, 0.9),
            D.AI_OPENNESS: (2, 4, 0.8),
            D.SACRED_BOUNDARY: (2, 4, 0.8),
            D.ETHICAL_CONCERN: (2, 4, 0.8),
            D.PSYCHOLOGICAL_PERCEPTION: (2, 4, 0.8),
            D.COMMUNITY_INFLUENCE: (1.5, 3, 0.9),
            D.FUTURE_ORIENTATION: (3, 4.5, 1.2),
        }),
        sub_profiles=("curieux_spirituel", "novice_technologique", "chercheur_seculier"),
    ),
)


# ══════════════════════════════════════════════════════════════════════════
# Sub-profiles
# ══════════════════════════════════════════════════════════════════════════

def _sub(
    id: str,
    parent: ProfileId,
    title: str,
    description: str,
    traits: tuple[str, ...],
    pattern: dict[Dimension, str],
) -> SubProfileDefinition:
    return SubProfileDefinition(
        id=id,
        parent=parent.value,
        title=title,
        description=description,
        distinguishing_traits=traits,
        prototype=_emphasis(pattern),
    )


SUB_PROFILE_CATALOG: tuple[SubProfileDefinition, ...] = (
    # ── Gardien de la Tradition ───────────────────────────────────────────
    _sub(
        "protecteur_sacre", ProfileId.GARDIEN_TRADITION, "Le Protecteur du Sacré",
        "Vous êtes particulièrement vigilant quant à la protection des espaces et moments sacrés. "
        "Pour vous, certaines dimensions de la vie spirituelle doivent absolument rester à l'abri "
        "de toute médiation technologique.",
        ("Forte distinction sacré/profane", "Attachement aux rituels traditionnels",
         "Sensibilité à l'authenticité spirituelle"),
        {D.SACRED_BOUNDARY: "high", D.PSYCHOLOGICAL_PERCEPTION: "high"},
    ),
    _sub(
        "sage_prudent", ProfileId.GARDIEN_TRADITION, "Le Sage Prudent",
        "Votre résistance à l'IA vient moins d'un rejet de principe que d'une sagesse acquise par "
        "l'expérience. Vous avez vu des modes passer et vous préférez attendre que les choses "
        "fassent leurs preuves.",
        ("Approche fondée sur l'expérience", "Capacité à voir au-delà des modes",
         "Ouverture à reconsidérer si preuves suffisantes"),
        {D.ETHICAL_CONCERN: "high", D.FUTURE_ORIENTATION: "moderate"},
    ),
    _sub(
        "berger_communautaire", ProfileId.GARDIEN_TRADITION, "Le Berger Communautaire",
        "Votre préoccupation principale est le bien de votre communauté. Vous protégez vos fidèles "
        "de ce qui pourrait les déstabiliser, tout en restant attentif à leurs besoins.",
        ("Forte conscience communautaire", "Sens pastoral développé",
         "Protection des plus vulnérables"),
        {D.COMMUNITY_INFLUENCE: "high", D.RELIGIOSITY: "high"},
    ),
    # ── Prudent Éclairé ───────────────────────────────────────────────────
    _sub(
        "analyste_spirituel", ProfileId.PRUDENT_ECLAIRE, "L'Analyste Spirituel",
        "Vous approchez l'IA avec une rigueur méthodique. Vous voulez comprendre avant d'adopter, "
        "tester avant de recommander, et former les autres à une utilisation éclairée.",
        ("Approche méthodique et structurée", "Intérêt pour la formation",
         "Goût pour la compréhension en profondeur"),
        {D.ETHICAL_CONCERN: "high", D.FUTURE_ORIENTATION: "moderate"},
    ),
    _sub(
        "discerneur_pastoral", ProfileId.PRUDENT_ECLAIRE, "Le Discerneur Pastoral",
        "Votre prudence est particulièrement orientée vers les implications pastorales de l'IA. Ce "
        "qui vous préoccupe, c'est l'impact sur les personnes, les relations, l'accompagnement.",
        ("Sensibilité pastorale développée", "Attention aux relations humaines",
         "Discernement cas par cas"),
        {D.SACRED_BOUNDARY: "high", D.COMMUNITY_INFLUENCE: "moderate"},
    ),
    _sub(
        "observateur_engage", ProfileId.PRUDENT_ECLAIRE, "L'Observateur Engagé",
        "Vous suivez attentivement l'évolution de l'IA et ses applications dans le domaine "
        "religieux. Vous êtes informé, vous observez, et vous vous engagez progressivement là où "
        "cela a du sens.",
        ("Curiosité intellectuelle", "Veille technologique active",
         "Engagement progressif et réfléchi"),
        {D.AI_OPENNESS: "moderate", D.FUTURE_ORIENTATION: "moderate"},
    ),
    # ── Innovateur Ancré ──────────────────────────────────────────────────
    _sub(
        "pont_generationnel", ProfileId.INNOVATEUR_ANCRE, "Le Pont Générationnel",
        "Vous avez le don de parler aux deux générations : vous comprenez les réticences des "
        "anciens et l'enthousiasme des jeunes, et vous créez des ponts entre ces mondes.",
        ("Capacité de médiation intergénérationnelle", "Bilinguisme tradition-innovation",
         "Rôle de traducteur culturel"),
        {D.COMMUNITY_INFLUENCE: "high", D.RELIGIOSITY: "high"},
    ),
    _sub(
        "evangeliste_digital", ProfileId.INNOVATEUR_ANCRE, "L'Évangéliste Digital",
        "Vous voyez dans l'IA un formidable outil d'évangélisation et de mission. Votre tradition "
        "vous donne le message, la technologie vous donne les moyens de le partager.",
        ("Passion pour la mission", "Créativité dans les moyens",
         "Vision stratégique du numérique"),
        {D.AI_OPENNESS: "high", D.FUTURE_ORIENTATION: "high"},
    ),
    _sub(
        "theologien_techno", ProfileId.INNOVATEUR_ANCRE, "Le Théologien Techno",
        "Vous réfléchissez théologiquement aux questions soulevées par l'IA. Pour vous, la "
        "tradition offre des ressources pour penser cette nouveauté, et l'IA pose des questions "
        "fécondes à la théologie.",
        ("Réflexion théologique approfondie", "Dialogue foi-science",
         "Production intellectuelle"),
        {D.PSYCHOLOGICAL_PERCEPTION: "high", D.ETHICAL_CONCERN: "moderate"},
    ),
    # ── Équilibriste ──────────────────────────────────────────────────────
    _sub(
        "mediateur", ProfileId.EQUILIBRISTE, "Le Médiateur",
        "Vous excellez dans l'art de la médiation, aidant les différentes sensibilités à se "
        "comprendre. Vous créez des espaces de dialogue où chacun peut s'exprimer.",
        ("Talent de médiation", "Écoute active de tous les camps", "Création de consensus"),
        {D.COMMUNITY_INFLUENCE: "high", D.ETHICAL_CONCERN: "moderate"},
    ),
    _sub(
        "chercheur_sens", ProfileId.EQUILIBRISTE, "Le Chercheur de Sens",
        "Votre équilibre vient d'une quête de sens profonde. Vous ne vous contentez pas de "
        "positions superficielles mais cherchez à comprendre les enjeux en profondeur.",
        ("Quête de sens approfondie", "Refus des positions superficielles",
         "Réflexion personnelle continue"),
        {D.PSYCHOLOGICAL_PERCEPTION: "moderate", D.RELIGIOSITY: "moderate"},
    ),
    _sub(
        "adaptateur_prudent", ProfileId.EQUILIBRISTE, "L'Adaptateur Prudent",
        "Vous vous adaptez aux situations avec prudence. Selon le contexte, vous pouvez utiliser "
        "l'IA ou vous en passer, toujours en fonction de ce qui sert le mieux le moment présent.",
        ("Adaptabilité contextuelle", "Pragmatisme modéré", "Flexibilité raisonnée"),
        {D.SACRED_BOUNDARY: "moderate", D.AI_OPENNESS: "moderate"},
    ),
    # ── Pragmatique Moderne ───────────────────────────────────────────────
    _sub(
        "efficace_engage", ProfileId.PRAGMATIQUE_MODERNE, "L'Efficace Engagé",
        "L'efficacité est votre maître-mot, mais au service d'un engagement profond. Vous "
        "optimisez vos processus pour consacrer plus de temps à ce qui compte : les personnes.",
        ("Optimisation des processus", "Focus sur les relations humaines",
         "Délégation stratégique à l'IA"),
        {D.AI_OPENNESS: "high", D.FUTURE_ORIENTATION: "high"},
    ),
    _sub(
        "communicateur_digital", ProfileId.PRAGMATIQUE_MODERNE, "Le Communicateur Digital",
        "Vous utilisez l'IA principalement pour la communication : réseaux sociaux, newsletters, "
        "création de contenu. Vous voulez que le message soit entendu le plus largement possible.",
        ("Compétences en communication", "Maîtrise des outils digitaux",
         "Souci de l'impact du message"),
        {D.SACRED_BOUNDARY: "low", D.COMMUNITY_INFLUENCE: "moderate"},
    ),
    _sub(
        "optimisateur_pastoral", ProfileId.PRAGMATIQUE_MODERNE, "L'Optimisateur Pastoral",
        "Vous utilisez l'IA pour optimiser votre accompagnement pastoral : meilleure préparation, "
        "réponses plus rapides, suivi facilité. L'objectif reste toujours la qualité de la relation.",
        ("Efficacité pastorale", "Utilisation ciblée de l'IA",
         "Focus sur la qualité relationnelle"),
        {D.ETHICAL_CONCERN: "low", D.RELIGIOSITY: "moderate"},
    ),
    # ── Pionnier Spirituel ────────────────────────────────────────────────
    _sub(
        "visionnaire", ProfileId.PIONNIER_SPIRITUEL, "Le Visionnaire",
        "Vous voyez loin, imaginant des applications de l'IA que d'autres ne perçoivent pas "
        "encore. Vous anticipez les évolutions et préparez l'Église de demain.",
        ("Vision à long terme", "Anticipation des évolutions", "Pensée prospective"),
        {D.FUTURE_ORIENTATION: "high", D.SACRED_BOUNDARY: "low"},
    ),
    _sub(
        "experimentateur", ProfileId.PIONNIER_SPIRITUEL, "L'Expérimentateur",
        "Vous testez toutes les nouvelles applications, explorez les limites, et partagez vos "
        "découvertes. Votre curiosité insatiable vous pousse à essayer ce que d'autres n'osent pas.",
        ("Curiosité exploratoire", "Apprentissage par l'expérimentation",
         "Partage des découvertes"),
        {D.AI_OPENNESS: "high", D.ETHICAL_CONCERN: "low"},
    ),
    _sub(
        "prophete_digital", ProfileId.PIONNIER_SPIRITUEL, "Le Prophète Digital",
        "Vous n'êtes pas seulement utilisateur mais aussi prédicateur de cette nouvelle ère. Vous "
        "appelez l'Église à embrasser ces technologies avec audace et discernement.",
        ("Engagement prophétique", "Influence sur la communauté", "Appel au renouveau"),
        {D.COMMUNITY_INFLUENCE: "moderate", D.RELIGIOSITY: "moderate"},
    ),
    # ── Progressiste Critique ─────────────────────────────────────────────
    _sub(
        "ethicien", ProfileId.PROGRESSISTE_CRITIQUE, "L'Éthicien",
        "Les questions éthiques sont au cœur de votre approche. Vous analysez chaque usage de l'IA "
        "à travers le prisme de la justice, de la dignité humaine et de la responsabilité.",
        ("Sensibilité éthique aiguë", "Réflexion sur les implications",
         "Vigilance face aux dérives"),
        {D.ETHICAL_CONCERN: "high", D.PSYCHOLOGICAL_PERCEPTION: "high"},
    ),
    _sub(
        "reformateur_social", ProfileId.PROGRESSISTE_CRITIQUE, "Le Réformateur Social",
        "Vous vous préoccupez des impacts sociaux de l'IA : qui est exclu ? Qui en profite ? Vous "
        "portez une attention particulière aux plus vulnérables et aux inégalités.",
        ("Conscience sociale développée", "Attention aux plus fragiles", "Combat pour l'équité"),
        {D.COMMUNITY_INFLUENCE: "moderate", D.ETHICAL_CONCERN: "high"},
    ),
    _sub(
        "philosophe_spirituel", ProfileId.PROGRESSISTE_CRITIQUE, "Le Philosophe Spirituel",
        "Vous aimez les questions profondes sur la nature de l'IA, de la conscience, de l'âme. Ces "
        "réflexions nourrissent votre prudence et votre discernement.",
        ("Goût pour les questions fondamentales", "Réflexion philosophique approfondie",
         "Dialogue entre disciplines"),
        {D.PSYCHOLOGICAL_PERCEPTION: "high", D.SACRED_BOUNDARY: "moderate"},
    ),
    # ── Explorateur ───────────────────────────────────────────────────────
    _sub(
        "curieux_spirituel", ProfileId.EXPLORATEUR, "Le Curieux Spirituel",
        "Vous explorez simultanément votre foi et le monde de l'IA. Cette double exploration vous "
        "enrichit et vous permet de construire votre propre chemin.",
        ("Double exploration foi-technologie", "Ouverture d'esprit", "Construction personnelle"),
        {D.FUTURE_ORIENTATION: "high", D.RELIGIOSITY: "moderate"},
    ),
    _sub(
        "novice_technologique", ProfileId.EXPLORATEUR, "Le Novice Technologique",
        "Votre foi est peut-être bien établie, mais vous découvrez encore le monde de l'IA. Vous "
        "apprenez, vous testez, vous vous formez progressivement.",
        ("Foi établie, IA en découverte", "Apprentissage progressif",
         "Humilité face à la technologie"),
        {D.RELIGIOSITY: "high", D.AI_OPENNESS: "moderate"},
    ),
    _sub(
        "chercheur_seculier", ProfileId.EXPLORATEUR, "Le Chercheur Séculier",
        "Votre exploration de la foi passe peut-être par les outils modernes. L'IA vous aide à "
        "questionner, à rechercher, à comprendre les traditions spirituelles.",
        ("Approche de la foi via la technologie", "Questionnement spirituel actif",
         "Ouverture aux ressources numériques"),
        {D.AI_OPENNESS: "high", D.RELIGIOSITY: "low"},
    ),
)

PROFILES_BY_ID: Mapping[str, ProfileDefinition] = MappingProxyType(
    {profile.id: profile for profile in PROFILE_CATALOG}
)
SUB_PROFILES_BY_ID: Mapping[str, SubProfileDefinition] = MappingProxyType(
    {sub.id: sub for sub in SUB_PROFILE_CATALOG}
)


def sub_profiles_of(profile_id: str) -> tuple[SubProfileDefinition, ...]:
    """The sub-profiles of ``profile_id`` in the parent's declared order."""
    return tuple(SUB_PROFILES_BY_ID[sub_id] for sub_id in PROFILES_BY_ID[profile_id].sub_profiles)
