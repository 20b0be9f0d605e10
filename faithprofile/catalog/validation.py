"""
Faith & AI Profile Engine — Catalog Validation

Checks the static tables once, at engine construction.  A broken catalog
must stop the engine outright: ``validate_catalog`` collects every problem
it finds and raises a single ``ConfigurationError`` listing them all.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Mapping

import structlog

from faithprofile.catalog.contributions import Contribution
from faithprofile.catalog.dimensions import DIMENSIONS, Dimension
from faithprofile.catalog.narratives import GrowthTemplate
from faithprofile.exceptions import ConfigurationError
from faithprofile.schemas.profile import ProfileDefinition, PrototypeBand, SubProfileDefinition

logger = structlog.get_logger("faithprofile.catalog")

SCALE_MIN: float = 1.0
SCALE_MAX: float = 5.0
AUDIENCES: frozenset[str] = frozenset({"all", "clergy", "lay"})


def _band_problems(owner: str, dimension: Dimension, band: PrototypeBand) -> list[str]:
    problems = []
    if band.min > band.max:
        problems.append(f"{owner}.{dimension.value}: min {band.min} > max {band.max}")
    if band.min < SCALE_MIN or band.max > SCALE_MAX:
        problems.append(
            f"{owner}.{dimension.value}: band [{band.min}, {band.max}] outside "
            f"[{SCALE_MIN}, {SCALE_MAX}]"
        )
    if band.weight <= 0:
        problems.append(f"{owner}.{dimension.value}: weight must be positive, got {band.weight}")
    return problems


def _duplicates(ids: Iterable[str]) -> list[str]:
    return sorted(item for item, count in Counter(ids).items() if count > 1)


def validate_catalog(
    profiles: tuple[ProfileDefinition, ...],
    sub_profiles: tuple[SubProfileDefinition, ...],
    contributions: Mapping[Dimension, tuple[Contribution, ...]],
    expected_items: Mapping[Dimension, int],
    growth_templates: Mapping[Dimension, GrowthTemplate],
    population_params: Mapping[str, Mapping[str, float]],
    bias_sensitivity: Mapping[str, float],
) -> None:
    """Raise ``ConfigurationError`` unless every table is complete and sane.

    Parameters
    ----------
    profiles, sub_profiles:
        The profile catalog in declaration order.
    contributions, expected_items:
        Dimension contribution tables and expected item counts.
    growth_templates:
        One growth-area template per dimension.
    population_params, bias_sensitivity:
        Per-dimension settings keyed by dimension value.
    """
    problems: list[str] = []

    # ── Profiles ──────────────────────────────────────────────────────────
    if not profiles:
        problems.append("profile catalog is empty")
    for duplicate in _duplicates(profile.id for profile in profiles):
        problems.append(f"duplicate profile id {duplicate!r}")

    sub_by_id = {sub.id: sub for sub in sub_profiles}
    for duplicate in _duplicates(sub.id for sub in sub_profiles):
        problems.append(f"duplicate sub-profile id {duplicate!r}")

    referenced: list[str] = []
    for profile in profiles:
        missing = [d.value for d in DIMENSIONS if d not in profile.prototype]
        if missing:
            problems.append(f"{profile.id}: prototype missing dimensions {missing}")
        for dimension, band in profile.prototype.items():
            problems.extend(_band_problems(profile.id, dimension, band))
        if not profile.sub_profiles:
            problems.append(f"{profile.id}: no sub-profiles")
        for sub_id in profile.sub_profiles:
            referenced.append(sub_id)
            sub = sub_by_id.get(sub_id)
            if sub is None:
                problems.append(f"{profile.id}: unknown sub-profile {sub_id!r}")
            elif sub.parent != profile.id:
                problems.append(
                    f"{profile.id}: sub-profile {sub_id!r} declares parent {sub.parent!r}"
                )
    for duplicate in _duplicates(referenced):
        problems.append(f"sub-profile {duplicate!r} referenced more than once")

    for sub in sub_profiles:
        if sub.id not in referenced:
            problems.append(f"sub-profile {sub.id!r} is not referenced by any profile")
        if not sub.prototype:
            problems.append(f"{sub.id}: empty prototype")
        for dimension, band in sub.prototype.items():
            problems.extend(_band_problems(sub.id, dimension, band))

    # ── Dimension tables ──────────────────────────────────────────────────
    for dimension in DIMENSIONS:
        table = contributions.get(dimension)
        if not table:
            problems.append(f"{dimension.value}: missing contribution table")
        else:
            for index, contribution in enumerate(table):
                if contribution.weight <= 0:
                    problems.append(
                        f"{dimension.value}[{index}]: weight must be positive, "
                        f"got {contribution.weight}"
                    )
                if contribution.audience not in AUDIENCES:
                    problems.append(
                        f"{dimension.value}[{index}]: unknown audience {contribution.audience!r}"
                    )
        if expected_items.get(dimension, 0) <= 0:
            problems.append(f"{dimension.value}: expected item count must be positive")
        if dimension not in growth_templates:
            problems.append(f"{dimension.value}: missing growth template")

        params = population_params.get(dimension.value)
        if params is None:
            problems.append(f"{dimension.value}: missing population parameters")
        elif params.get("stddev", 0) <= 0:
            problems.append(f"{dimension.value}: population stddev must be positive")
        if dimension.value not in bias_sensitivity:
            problems.append(f"{dimension.value}: missing bias sensitivity")

    if problems:
        logger.error("catalog.invalid", problems=problems)
        raise ConfigurationError("Invalid scoring catalog", problems)

    logger.debug(
        "catalog.validated",
        profiles=len(profiles),
        sub_profiles=len(sub_profiles),
    )
