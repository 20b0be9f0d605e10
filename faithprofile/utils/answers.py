"""Typed accessors over a loosely-typed answer mapping.

Absence and type mismatch are both "no answer": every accessor returns a
neutral value instead of raising.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

CLERGY_STATUSES: frozenset[str] = frozenset({"clerge", "religieux"})
LAY_STATUSES: frozenset[str] = frozenset({"laic_engagé", "laic_pratiquant", "curieux"})


def get_string(answers: Mapping[str, Any], key: str) -> str:
    """Return the answer as a string, or ``""``."""
    value = answers.get(key)
    return value if isinstance(value, str) else ""


def get_number(answers: Mapping[str, Any], key: str) -> float | None:
    """Return the answer as a finite float, or ``None``.

    Booleans are not numbers here, and neither are NaN or infinities.
    """
    value = answers.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return float(value)


def get_array(answers: Mapping[str, Any], key: str) -> list[str]:
    """Return the string members of a list/tuple answer, or ``[]``."""
    value = answers.get(key)
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, str)]


def get_mapping(answers: Mapping[str, Any], key: str) -> dict[str, float]:
    """Return the numeric cells of a matrix answer, or ``{}``."""
    value = answers.get(key)
    if not isinstance(value, Mapping):
        return {}
    cells: dict[str, float] = {}
    for row, cell in value.items():
        if isinstance(cell, bool) or not isinstance(cell, (int, float)):
            continue
        if math.isfinite(cell):
            cells[str(row)] = float(cell)
    return cells


def is_clergy(answers: Mapping[str, Any]) -> bool:
    return get_string(answers, "profil_statut") in CLERGY_STATUSES


def is_layperson(answers: Mapping[str, Any]) -> bool:
    return get_string(answers, "profil_statut") in LAY_STATUSES


def role_category(answers: Mapping[str, Any]) -> str:
    """Bucket ``profil_statut`` into ``clergy``, ``laity`` or ``other``."""
    if is_clergy(answers):
        return "clergy"
    if is_layperson(answers):
        return "laity"
    return "other"
