"""
Faith & AI Profile Engine — static catalog registry.

Dimensions, score maps, contribution tables, profiles and narrative rules.
Everything here is immutable data, loaded at import and validated by
``validate_catalog`` before the engine serves its first request.
"""

from faithprofile.catalog.dimensions import DIMENSION_LABELS, DIMENSIONS, Dimension
from faithprofile.catalog.contributions import (
    DIMENSION_CONTRIBUTIONS,
    EXPECTED_ITEMS,
    Contribution,
)
from faithprofile.catalog.profiles import (
    PROFILE_CATALOG,
    PROFILES_BY_ID,
    SUB_PROFILE_CATALOG,
    SUB_PROFILES_BY_ID,
    ProfileId,
    sub_profiles_of,
)
from faithprofile.catalog.narratives import GROWTH_TEMPLATES
from faithprofile.catalog.validation import validate_catalog

__all__ = [
    "DIMENSION_LABELS",
    "DIMENSIONS",
    "Dimension",
    "DIMENSION_CONTRIBUTIONS",
    "EXPECTED_ITEMS",
    "Contribution",
    "PROFILE_CATALOG",
    "PROFILES_BY_ID",
    "SUB_PROFILE_CATALOG",
    "SUB_PROFILES_BY_ID",
    "ProfileId",
    "sub_profiles_of",
    "GROWTH_TEMPLATES",
    "validate_catalog",
]
