"""Shape-safe payoff matrix helpers and weight normalization."""

from __future__ import annotations

import math


def create_matrix(rows: int, cols: int, fill: float = 0.0) -> list[list[float]]:
    """Return a rows x cols matrix with every cell set to `fill`."""
    return [[fill for _ in range(max(0, cols))] for _ in range(max(0, rows))]


def resize_matrix(matrix: list[list[float]], rows: int, cols: int) -> list[list[float]]:
    """Return a copy truncated or zero-padded to exactly rows x cols.

    Trailing rows/columns are dropped when shrinking and zero rows/columns are
    appended when growing. The input is never mutated.
    """
    rows = max(0, rows)
    cols = max(0, cols)
    resized = [list(row[:cols]) + [0.0] * max(0, cols - len(row)) for row in matrix[:rows]]
    while len(resized) < rows:
        resized.append([0.0] * cols)
    return resized


def set_cell(matrix: list[list[float]], row: int, col: int, value: float) -> list[list[float]]:
    """Return a copy of `matrix` with one cell replaced; non-finite or unparsable values become 0."""
    updated = [list(r) for r in matrix]
    if 0 <= row < len(updated) and 0 <= col < len(updated[row]):
        number = _as_float(value)
        updated[row][col] = number if math.isfinite(number) else 0.0
    return updated


def probability_sum(weights: list[float]) -> float:
    return sum(w for w in map(_as_float, weights) if math.isfinite(w))


def normalize_weights(weights: list[float]) -> list[float]:
    """Scale weights to sum to 1, falling back to uniform when the sum is not positive.

    Non-finite or unparsable entries count as 0 in the sum. They stay in place
    in the output, unparsable ones as nan.
    """
    values = [_as_float(w) for w in weights]
    total = probability_sum(values)
    if total <= 0:
        return [1 / len(values) for _ in values]
    return [w / total for w in values]


def resize_labels(labels: list[str], count: int, prefix: str) -> list[str]:
    """Truncate or pad labels; padded names are `prefix` plus the 1-based position."""
    resized = list(labels[: max(0, count)])
    while len(resized) < count:
        resized.append(f"{prefix}{len(resized) + 1}")
    return resized


def resize_probabilities(probabilities: list[float], count: int) -> list[float]:
    """Truncate or pad probabilities; padded slots get 1 / count."""
    resized = [float(p) for p in probabilities[: max(0, count)]]
    while len(resized) < count:
        resized.append(1 / count)
    return resized


def _as_float(value) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan
