"""
Faith & AI Profile Engine — Application Configuration

Loads every tunable of the scoring engine from environment variables (and an
optional .env file) using Pydantic Settings.  A cached ``get_settings()``
helper is provided so that every caller receives the same validated instance
without re-parsing the environment on every respondent.

Population parameters and finding thresholds are provisional expert values.
They are expected to be replaced once measured population statistics are
available (see ``RECALIBRATION_THRESHOLD``), which is why they live here and
not in the scoring code.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for the scoring engine."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------ #
    # Runtime
    # ------------------------------------------------------------------ #
    LOG_LEVEL: str = "INFO"

    # ------------------------------------------------------------------ #
    # Provisional population distribution (mean, stddev) per dimension
    # ------------------------------------------------------------------ #
    POPULATION_PARAMS: Dict[str, Dict[str, float]] = {
        "religiosity": {"mean": 3.8, "stddev": 0.9},
        "ai_openness": {"mean": 2.4, "stddev": 1.1},
        "sacred_boundary": {"mean": 3.5, "stddev": 1.0},
        "ethical_concern": {"mean": 3.8, "stddev": 0.8},
        "psychological_perception": {"mean": 3.0, "stddev": 0.9},
        "community_influence": {"mean": 2.8, "stddev": 0.9},
        "future_orientation": {"mean": 3.2, "stddev": 1.0},
    }
    RECALIBRATION_THRESHOLD: int = 500

    # ------------------------------------------------------------------ #
    # Social-desirability correction
    # ------------------------------------------------------------------ #
    BIAS_SENSITIVITY: Dict[str, float] = {
        "religiosity": 0.8,
        "ai_openness": 0.2,
        "sacred_boundary": 0.5,
        "ethical_concern": 0.7,
        "psychological_perception": 0.2,
        "community_influence": 0.3,
        "future_orientation": 0.4,
    }
    BIAS_ADJUSTMENT_FACTOR: float = 0.05

    # ------------------------------------------------------------------ #
    # Profile classification
    # ------------------------------------------------------------------ #
    MATCH_DECAY_RATE: float = 0.5
    SECONDARY_MATCH_THRESHOLD: float = 15.0
    SUB_PROFILE_NARRATIVE_THRESHOLD: float = 60.0
    TIE_BREAK_POLICY: Literal["catalog_order", "profile_id"] = "catalog_order"

    # ------------------------------------------------------------------ #
    # Population aggregation
    # ------------------------------------------------------------------ #
    LOW_CONFIDENCE_SAMPLE_SIZE: int = 30
    MODERATE_CONFIDENCE_SAMPLE_SIZE: int = 100
    FINDING_CORRELATION_THRESHOLD: float = 0.3
    FINDING_SEGMENT_DELTA: float = 0.5
    MAX_KEY_FINDINGS: int = 6

    # ------------------------------------------------------------------ #
    # Validators
    # ------------------------------------------------------------------ #
    @field_validator("POPULATION_PARAMS")
    @classmethod
    def _stddev_must_be_positive(
        cls, v: Dict[str, Dict[str, float]]
    ) -> Dict[str, Dict[str, float]]:
        for dimension, params in v.items():
            if "mean" not in params or "stddev" not in params:
                raise ValueError(f"{dimension}: population params need mean and stddev")
            if params["stddev"] <= 0:
                raise ValueError(
                    f"{dimension}: stddev must be positive, got {params['stddev']}"
                )
        return v

    @field_validator("BIAS_SENSITIVITY")
    @classmethod
    def _sensitivity_must_be_between_0_and_1(
        cls, v: Dict[str, float]
    ) -> Dict[str, float]:
        for dimension, sensitivity in v.items():
            if not 0.0 <= sensitivity <= 1.0:
                raise ValueError(
                    f"{dimension}: sensitivity must be between 0 and 1, got {sensitivity}"
                )
        return v

    @field_validator("MATCH_DECAY_RATE", "BIAS_ADJUSTMENT_FACTOR")
    @classmethod
    def _must_be_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"Value must be positive, got {v}")
        return v

    @field_validator("SECONDARY_MATCH_THRESHOLD", "SUB_PROFILE_NARRATIVE_THRESHOLD")
    @classmethod
    def _must_be_a_percentage(cls, v: float) -> float:
        if not 0.0 <= v <= 100.0:
            raise ValueError(f"Threshold must be between 0 and 100, got {v}")
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached, validated ``Settings`` instance.

    Using ``@lru_cache`` guarantees the .env file is read and validated
    exactly once per process lifetime::

        from faithprofile.config import get_settings
        settings = get_settings()
    """
    return Settings()
