"""Decision criteria under risk with known state probabilities."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from .selection import CriteriaMixin, CriterionResult, Orientation, payoff_array, pick, select_index, state_weights

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RiskResult(CriteriaMixin):
    expected_value: CriterionResult
    savage: CriterionResult
    mean_variance: CriterionResult
    threshold: CriterionResult
    most_likely: CriterionResult
    most_likely_state: int = 0


def expected_values(values: np.ndarray, p: np.ndarray) -> np.ndarray:
    if values.shape[1] == 0:
        return np.zeros(values.shape[0])
    return values @ p


def variances(values: np.ndarray, p: np.ndarray) -> np.ndarray:
    """Probability-weighted population variance of each row around its own mean."""
    if values.shape[1] == 0:
        return np.zeros(values.shape[0])
    deviations = values - expected_values(values, p)[:, None]
    return (deviations**2) @ p


def column_best(values: np.ndarray, is_gain: bool) -> np.ndarray:
    rows, cols = values.shape
    if rows == 0:
        return np.zeros(cols)
    return values.max(axis=0) if is_gain else values.min(axis=0)


def regret_matrix(payoffs: list[list[float]], orientation: Orientation | str) -> list[list[float]]:
    """Gap to the best outcome of each state, clamped at 0."""
    is_gain = Orientation(orientation) is Orientation.GAIN
    return _regret(payoff_array(payoffs), is_gain).tolist()


def _regret(values: np.ndarray, is_gain: bool) -> np.ndarray:
    best = column_best(values, is_gain)
    gap = best - values if is_gain else values - best
    return np.maximum(gap, 0.0)


def compute_risk(
    payoffs: list[list[float]],
    probabilities: list[float],
    orientation: Orientation | str,
    risk_aversion_k: float,
    threshold: float,
) -> RiskResult:
    """Score every alternative under the five risk criteria.

    Probabilities are always normalized; summing to 1 is checked by the caller,
    not here.
    """
    orientation = Orientation(orientation)
    is_gain = orientation is Orientation.GAIN
    values = payoff_array(payoffs)
    m, n = values.shape
    p = state_weights(probabilities, n)

    mean = expected_values(values, p)
    variance = variances(values, p)

    regret = _regret(values, is_gain)
    savage = regret.max(axis=1) if n else np.zeros(m)

    if is_gain:
        utility = mean - risk_aversion_k * variance
        meets = values >= threshold
    else:
        utility = -(mean + risk_aversion_k * variance)
        meets = values <= threshold
    success = np.where(meets, p, 0.0).sum(axis=1) if n else np.zeros(m)

    likely_state = select_index(p.tolist(), maximize=True)
    likely = values[:, likely_state] if n else np.zeros(m)

    result = RiskResult(
        expected_value=pick(mean, maximize=is_gain),
        savage=pick(savage, maximize=False),
        mean_variance=pick(utility, maximize=True),
        threshold=pick(success, maximize=True),
        most_likely=pick(likely, maximize=is_gain),
        most_likely_state=likely_state,
    )
    logger.debug(
        "risk %dx%d %s k=%s T=%s best=%s", m, n, orientation.value, risk_aversion_k, threshold, result.best_indices()
    )
    return result
