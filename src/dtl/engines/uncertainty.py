"""Decision criteria under uncertainty: Maximax, Wald, Hurwicz and Laplace."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from .selection import CriteriaMixin, CriterionResult, Orientation, payoff_array, pick, row_extremes, state_weights

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UncertaintyResult(CriteriaMixin):
    maximax: CriterionResult
    wald: CriterionResult
    hurwicz: CriterionResult
    laplace: CriterionResult
    bayes: bool = False


def compute_uncertainty(
    payoffs: list[list[float]],
    weights: list[float] | None,
    q: float,
    orientation: Orientation | str,
) -> UncertaintyResult:
    """Score every alternative under the four classical uncertainty criteria.

    `q` is the pessimism coefficient and is used as given. With `weights=None`
    the states are equally likely (Laplace); otherwise the normalized weights
    turn the Laplace column into Bayes-Laplace.
    """
    orientation = Orientation(orientation)
    is_gain = orientation is Orientation.GAIN
    values = payoff_array(payoffs)
    m, n = values.shape

    if weights is None:
        w = np.full(n, 1 / n) if n else np.zeros(0)
    else:
        w = state_weights(weights, n)

    row_max, row_min = row_extremes(values)
    best = row_max if is_gain else row_min
    worst = row_min if is_gain else row_max

    hurwicz = q * worst + (1 - q) * best
    laplace = values @ w if n else np.zeros(m)

    result = UncertaintyResult(
        maximax=pick(best, maximize=is_gain),
        wald=pick(worst, maximize=is_gain),
        # Hurwicz is picked by maximizing for both orientations.
        hurwicz=pick(hurwicz, maximize=True),
        laplace=pick(laplace, maximize=is_gain),
        bayes=weights is not None,
    )
    logger.debug("uncertainty %dx%d %s q=%s best=%s", m, n, orientation.value, q, result.best_indices())
    return result
