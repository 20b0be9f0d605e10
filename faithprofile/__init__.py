"""
Faith & AI Profile Engine.

Scores questionnaire answers on seven faith/AI dimensions, classifies the
respondent into one of eight archetypal profiles, generates the matching
French-language interpretation, and aggregates populations.
"""

from faithprofile.engine import (
    ScoringEngine,
    aggregate,
    compute_profile_spectrum,
    compute_validated_scores,
    get_engine,
)
from faithprofile.exceptions import ConfigurationError, FaithProfileError

__version__ = "1.0.0"

__all__ = [
    "ScoringEngine",
    "aggregate",
    "compute_profile_spectrum",
    "compute_validated_scores",
    "get_engine",
    "ConfigurationError",
    "FaithProfileError",
]
