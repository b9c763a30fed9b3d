"""Result tables and best-alternative summaries for the lab pages."""

from __future__ import annotations

import pandas as pd

from .config import ALTERNATIVE_PREFIX, STATE_PREFIX
from .engines import Orientation, RiskResult, UncertaintyResult, regret_matrix
from .matrix import create_matrix, resize_labels, set_cell

CRITERION_TITLES: dict[str, str] = {
    "maximax": "Maximax",
    "wald": "Wald",
    "hurwicz": "Hurwicz",
    "laplace": "Laplace",
    "expected_value": "Expected value",
    "savage": "Savage (minimax regret)",
    "mean_variance": "Mean-variance utility",
    "threshold": "Threshold probability",
    "most_likely": "Most likely state",
}


def criterion_titles(result: UncertaintyResult | RiskResult) -> dict[str, str]:
    """Display title per criterion key, in result order."""
    titles = {name: CRITERION_TITLES[name] for name in result.criteria()}
    if isinstance(result, UncertaintyResult) and result.bayes:
        titles["laplace"] = "Bayes-Laplace"
    return titles


def _row_labels(result: UncertaintyResult | RiskResult, alternative_labels: list[str] | None) -> list[str]:
    count = len(next(iter(result.criteria().values())).scores)
    return resize_labels(alternative_labels or [], count, ALTERNATIVE_PREFIX)


def results_frame(result: UncertaintyResult | RiskResult, alternative_labels: list[str] | None = None) -> pd.DataFrame:
    """One row per alternative, one column per criterion."""
    titles = criterion_titles(result)
    frame = pd.DataFrame(
        {titles[name]: criterion.scores for name, criterion in result.criteria().items()},
        index=_row_labels(result, alternative_labels),
        dtype=float,
    )
    frame.index.name = "Alternative"
    return frame


def best_positions(result: UncertaintyResult | RiskResult) -> dict[str, int]:
    """Winning row position keyed by column title, for highlighting."""
    titles = criterion_titles(result)
    return {titles[name]: index for name, index in result.best_indices().items()}


def best_alternatives(result: UncertaintyResult | RiskResult, alternative_labels: list[str] | None = None) -> dict[str, str]:
    labels = _row_labels(result, alternative_labels)
    if not labels:
        return {}
    return {title: labels[index] for title, index in best_positions(result).items()}


def summary_text(result: UncertaintyResult | RiskResult, alternative_labels: list[str] | None = None) -> str:
    best = best_alternatives(result, alternative_labels)
    if not best:
        return "No alternatives to compare."
    parts = "; ".join(f"{title} - {label}" for title, label in best.items())
    return f"Best alternatives: {parts}."


def payoff_frame(
    matrix: list[list[float]],
    alternative_labels: list[str] | None = None,
    state_labels: list[str] | None = None,
) -> pd.DataFrame:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    frame = pd.DataFrame(
        matrix,
        index=resize_labels(alternative_labels or [], rows, ALTERNATIVE_PREFIX),
        columns=resize_labels(state_labels or [], cols, STATE_PREFIX),
        dtype=float,
    )
    frame.index.name = "Alternative"
    return frame


def regret_frame(
    payoffs: list[list[float]],
    orientation: Orientation | str,
    alternative_labels: list[str] | None = None,
    state_labels: list[str] | None = None,
) -> pd.DataFrame:
    """Labelled regret table: each cell's gap to the best outcome of its state."""
    return payoff_frame(regret_matrix(payoffs, orientation), alternative_labels, state_labels)


def frame_to_matrix(frame: pd.DataFrame) -> list[list[float]]:
    """Read an edited payoff table back into a plain matrix; blank or non-finite cells become 0."""
    numeric = frame.apply(pd.to_numeric, errors="coerce")
    rows, cols = numeric.shape
    matrix = create_matrix(rows, cols)
    for i, row in enumerate(numeric.itertuples(index=False, name=None)):
        for j, value in enumerate(row):
            matrix = set_cell(matrix, i, j, value)
    return matrix
