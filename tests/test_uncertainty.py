from __future__ import annotations

import pytest

from dtl.engines import Orientation, compute_uncertainty, select_index


def test_classic_example_with_gains() -> None:
    result = compute_uncertainty([[4, 2, 5], [3, 6, 1]], None, 0.5, Orientation.GAIN)

    assert result.maximax.scores == [5.0, 6.0]
    assert result.maximax.best_index == 1
    assert result.wald.scores == [2.0, 1.0]
    assert result.wald.best_index == 0
    assert result.hurwicz.scores == pytest.approx([3.5, 3.5])
    assert result.hurwicz.best_index == 0
    assert result.laplace.scores == pytest.approx([11 / 3, 10 / 3])
    assert result.laplace.best_index == 0
    assert result.bayes is False


def test_cost_orientation_flips_best_and_worst() -> None:
    result = compute_uncertainty([[4, 2, 5], [3, 6, 1]], None, 0.25, "cost")

    assert result.maximax.scores == [2.0, 1.0]
    assert result.maximax.best_index == 1
    assert result.wald.scores == [5.0, 6.0]
    assert result.wald.best_index == 0
    assert result.hurwicz.scores == pytest.approx([0.25 * 5 + 0.75 * 2, 0.25 * 6 + 0.75 * 1])
    assert result.laplace.best_index == 1


def test_hurwicz_is_maximized_for_costs_too() -> None:
    result = compute_uncertainty([[1, 1], [5, 5]], None, 0.5, Orientation.COST)

    assert result.hurwicz.scores == pytest.approx([1.0, 5.0])
    assert result.hurwicz.best_index == 1


def test_bayes_laplace_uses_normalized_weights() -> None:
    result = compute_uncertainty([[10, 0], [0, 10]], [3, 1], 0.5, Orientation.GAIN)

    assert result.laplace.scores == pytest.approx([7.5, 2.5])
    assert result.laplace.best_index == 0
    assert result.bayes is True


def test_zero_weights_fall_back_to_laplace() -> None:
    weighted = compute_uncertainty([[4, 2, 5], [3, 6, 1]], [0, 0, 0], 0.5, Orientation.GAIN)
    uniform = compute_uncertainty([[4, 2, 5], [3, 6, 1]], None, 0.5, Orientation.GAIN)

    assert weighted.laplace.scores == pytest.approx(uniform.laplace.scores)


def test_single_state_scores_equal_the_value() -> None:
    result = compute_uncertainty([[3], [-2], [7]], None, 0.3, Orientation.GAIN)

    for criterion in (result.maximax, result.wald, result.laplace):
        assert criterion.scores == pytest.approx([3.0, -2.0, 7.0])


def test_wald_is_maximin_for_gains_and_minimax_for_costs() -> None:
    payoffs = [[8, 1, 9], [4, 3, 5], [6, 2, 7]]

    gain = compute_uncertainty(payoffs, None, 0.5, Orientation.GAIN)
    cost = compute_uncertainty(payoffs, None, 0.5, Orientation.COST)

    assert gain.wald.best_index == 1
    assert cost.wald.best_index == 1
    assert cost.wald.scores == [9.0, 5.0, 7.0]


def test_empty_matrix_returns_empty_scores() -> None:
    result = compute_uncertainty([], None, 0.5, Orientation.GAIN)

    assert result.maximax.scores == []
    assert result.best_indices() == {"maximax": 0, "wald": 0, "hurwicz": 0, "laplace": 0}
    assert result.maximax.best_score is None


def test_input_matrix_is_not_mutated() -> None:
    payoffs = [[1, 2], [3, 4]]
    weights = [2, 2]

    compute_uncertainty(payoffs, weights, 0.5, Orientation.GAIN)

    assert payoffs == [[1, 2], [3, 4]]
    assert weights == [2, 2]


def test_select_index_keeps_first_of_ties() -> None:
    assert select_index([1, 3, 3, 2], maximize=True) == 1
    assert select_index([2, 1, 1], maximize=False) == 1
    assert select_index([], maximize=True) == 0


def test_unknown_orientation_is_rejected() -> None:
    with pytest.raises(ValueError):
        compute_uncertainty([[1]], None, 0.5, "profit")
