"""
Faith & AI Profile Engine — Sub-score Rules

A rule turns one or more raw answers into a 1-5 sub-score, or ``None``
when the answers carry nothing interpretable.  Rules are immutable value
objects so the contribution tables built from them can be shared freely
between threads.

Rule kinds
----------
- ``Lookup``          categorical answer through a score map
- ``NumericScale``    numeric answer, optionally inverted as ``6 - x``
- ``ArrayLength``     ``min(5, base + step × len)`` with a "none" token
- ``MatrixDelegation`` weighted delegation levels of a matrix question
- ``MatrixCell``      one cell of a matrix question, linearly rescaled
- ``FixedScore``      fixed score when the answer belongs to a value set
- ``ContextBreadth``  breadth of AI-use contexts, 1 for non-users
- ``SpiritualUse``    general versus spiritual use of AI
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from faithprofile.utils.answers import get_array, get_mapping, get_number, get_string

SUB_SCORE_MIN: float = 1.0
SUB_SCORE_MAX: float = 5.0

AI_FREQUENCY_KEY = "ctrl_ia_frequence"
AI_CONTEXTS_KEY = "ctrl_ia_contextes"
SPIRITUAL_CONTEXT = "spirituel"
NEVER = "jamais"


@dataclass(frozen=True)
class Lookup:
    key: str
    table: Mapping[str, float]

    @property
    def keys(self) -> tuple[str, ...]:
        return (self.key,)

    def __call__(self, answers: Mapping[str, Any]) -> float | None:
        value = get_string(answers, self.key)
        if not value:
            return None
        return self.table.get(value)


@dataclass(frozen=True)
class NumericScale:
    key: str
    invert: bool = False

    @property
    def keys(self) -> tuple[str, ...]:
        return (self.key,)

    def __call__(self, answers: Mapping[str, Any]) -> float | None:
        value = get_number(answers, self.key)
        if value is None:
            return None
        return 6 - value if self.invert else value


@dataclass(frozen=True)
class ArrayLength:
    key: str
    step: float
    none_token: str
    base: float = 1.0
    none_score: float = 1.0

    @property
    def keys(self) -> tuple[str, ...]:
        return (self.key,)

    def __call__(self, answers: Mapping[str, Any]) -> float | None:
        items = get_array(answers, self.key)
        if not items:
            return None
        if self.none_token in items:
            return self.none_score
        return min(SUB_SCORE_MAX, self.base + self.step * len(items))


@dataclass(frozen=True)
class MatrixDelegation:
    """``1 + (Σ level·w / Σ max_level·w) × 4`` over the answered rows."""

    key: str
    row_weights: Mapping[str, float]
    max_level: float = 3.0

    @property
    def keys(self) -> tuple[str, ...]:
        return (self.key,)

    def __call__(self, answers: Mapping[str, Any]) -> float | None:
        cells = get_mapping(answers, self.key)
        achieved = 0.0
        possible = 0.0
        for row, weight in self.row_weights.items():
            if row in cells:
                achieved += cells[row] * weight
                possible += self.max_level * weight
        if possible <= 0:
            return None
        return 1 + (achieved / possible) * 4


@dataclass(frozen=True)
class MatrixCell:
    """``intercept + slope × level`` for a single matrix row."""

    key: str
    row: str
    intercept: float
    slope: float

    @property
    def keys(self) -> tuple[str, ...]:
        return (self.key,)

    def __call__(self, answers: Mapping[str, Any]) -> float | None:
        level = get_mapping(answers, self.key).get(self.row)
        if level is None:
            return None
        return self.intercept + self.slope * level


@dataclass(frozen=True)
class FixedScore:
    """Score ``cases[i][1]`` when the answer is in ``cases[i][0]``.

    ``otherwise`` scores any other non-empty answer.
    """

    key: str
    cases: tuple[tuple[frozenset[str], float], ...]
    otherwise: float | None = None

    @property
    def keys(self) -> tuple[str, ...]:
        return (self.key,)

    def __call__(self, answers: Mapping[str, Any]) -> float | None:
        value = get_string(answers, self.key)
        if not value:
            return None
        for members, score in self.cases:
            if value in members:
                return score
        return self.otherwise


@dataclass(frozen=True)
class ContextBreadth:
    """Non-users score 1; users score ``min(5, 1 + step × contexts)``."""

    step: float = 0.7

    @property
    def keys(self) -> tuple[str, ...]:
        return (AI_FREQUENCY_KEY, AI_CONTEXTS_KEY)

    def __call__(self, answers: Mapping[str, Any]) -> float | None:
        if get_string(answers, AI_FREQUENCY_KEY) == NEVER:
            return 1.0
        contexts = get_array(answers, AI_CONTEXTS_KEY)
        if not contexts:
            return None
        return min(SUB_SCORE_MAX, 1 + self.step * len(contexts))


@dataclass(frozen=True)
class SpiritualUse:
    """Compare general AI use with use in spiritual contexts.

    Exactly one of the three outcomes applies to a respondent who answered
    the usage questions, which is why the table lists this rule once per
    outcome with the outcome's own weight:

    - ``"general_only"``: uses AI, never for spiritual purposes
    - ``"spiritual"``: lists the spiritual context
    - ``"non_user"``: does not use AI at all
    """

    outcome: str
    score: float

    @property
    def keys(self) -> tuple[str, ...]:
        return (AI_FREQUENCY_KEY, AI_CONTEXTS_KEY)

    def __call__(self, answers: Mapping[str, Any]) -> float | None:
        frequency = get_string(answers, AI_FREQUENCY_KEY)
        contexts = get_array(answers, AI_CONTEXTS_KEY)
        if not frequency and not contexts:
            return None
        uses_generally = bool(frequency) and frequency != NEVER
        uses_spiritually = SPIRITUAL_CONTEXT in contexts
        if uses_spiritually:
            observed = "spiritual"
        elif uses_generally:
            observed = "general_only"
        else:
            observed = "non_user"
        return self.score if observed == self.outcome else None
