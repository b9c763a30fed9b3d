"""Orientation, per-criterion results and first-index best selection."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum

import numpy as np

from dtl.matrix import normalize_weights


class Orientation(str, Enum):
    GAIN = "gain"
    COST = "cost"


@dataclass(frozen=True)
class CriterionResult:
    scores: list[float]
    best_index: int

    @property
    def best_score(self) -> float | None:
        if not self.scores:
            return None
        return self.scores[self.best_index]


class CriteriaMixin:
    """Shared accessors for result dataclasses holding CriterionResult fields."""

    def criteria(self) -> dict[str, CriterionResult]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if isinstance(getattr(self, f.name), CriterionResult)
        }

    def best_indices(self) -> dict[str, int]:
        return {name: criterion.best_index for name, criterion in self.criteria().items()}


def select_index(scores: list[float], maximize: bool) -> int:
    """Index of the best score; the first alternative reaching the extreme wins.

    Uses strict comparisons so later equal scores never replace the current
    pick. An empty sequence yields 0.
    """
    if not scores:
        return 0
    best_idx = 0
    current = scores[0]
    for idx in range(1, len(scores)):
        candidate = scores[idx]
        if (maximize and candidate > current) or (not maximize and candidate < current):
            current = candidate
            best_idx = idx
    return best_idx


def pick(scores, maximize: bool) -> CriterionResult:
    score_list = [float(s) for s in scores]
    return CriterionResult(scores=score_list, best_index=select_index(score_list, maximize))


def payoff_array(payoffs: list[list[float]]) -> np.ndarray:
    """Copy a rectangular payoff matrix into an (m, n) float array, keeping m=0 or n=0 shapes."""
    rows = len(payoffs)
    cols = len(payoffs[0]) if rows else 0
    return np.asarray(payoffs, dtype=float).reshape(rows, cols)


def state_weights(weights: list[float], n: int) -> np.ndarray:
    """Normalize the first n weights; states without a weight get 0."""
    normalized = normalize_weights(list(weights)[:n])
    normalized += [0.0] * (n - len(normalized))
    return np.asarray(normalized, dtype=float)


def row_extremes(values: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Per-row (max, min); rows without states report 0 for both."""
    rows, cols = values.shape
    if cols == 0:
        return np.zeros(rows), np.zeros(rows)
    return values.max(axis=1), values.min(axis=1)
