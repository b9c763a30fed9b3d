from __future__ import annotations

import math

import pandas as pd
import pytest

from dtl.engines import Orientation, compute_risk, compute_uncertainty
from dtl.report import best_alternatives, frame_to_matrix, payoff_frame, regret_frame, results_frame, summary_text


def test_results_frame_has_one_column_per_criterion() -> None:
    result = compute_uncertainty([[4, 2, 5], [3, 6, 1]], None, 0.5, Orientation.GAIN)

    frame = results_frame(result, ["Wheat", "Corn"])

    assert list(frame.columns) == ["Maximax", "Wald", "Hurwicz", "Laplace"]
    assert list(frame.index) == ["Wheat", "Corn"]
    assert frame.loc["Corn", "Maximax"] == 6.0


def test_results_frame_titles_bayes_laplace_and_pads_labels() -> None:
    result = compute_uncertainty([[1, 2], [3, 4], [5, 6]], [1, 1], 0.5, Orientation.GAIN)

    frame = results_frame(result, ["Only"])

    assert "Bayes-Laplace" in frame.columns
    assert list(frame.index) == ["Only", "A2", "A3"]


def test_best_alternatives_and_summary_use_labels() -> None:
    result = compute_risk([[10, 0], [4, 4]], [0.5, 0.5], Orientation.GAIN, 1.0, 5.0)

    best = best_alternatives(result, ["Corn", "Wheat"])
    text = summary_text(result, ["Corn", "Wheat"])

    assert best["Expected value"] == "Corn"
    assert best["Mean-variance utility"] == "Wheat"
    assert text.startswith("Best alternatives: Expected value - Corn;")


def test_summary_for_empty_result() -> None:
    result = compute_uncertainty([], None, 0.5, Orientation.GAIN)

    assert summary_text(result) == "No alternatives to compare."
    assert results_frame(result).empty


def test_payoff_frame_round_trips_edited_values() -> None:
    frame = payoff_frame([[1.0, 2.0]], ["A1"], ["Rain"])
    assert list(frame.columns) == ["Rain", "F2"]

    edited = pd.DataFrame({"Rain": [None], "F2": [math.inf]}, index=["A1"])

    assert frame_to_matrix(frame) == [[1.0, 2.0]]
    assert frame_to_matrix(edited) == [[0.0, 0.0]]


def test_mean_variance_score_in_frame() -> None:
    result = compute_risk([[10, 0], [4, 4]], [0.5, 0.5], Orientation.GAIN, 1.0, 5.0)

    frame = results_frame(result)

    assert frame.loc["A1", "Mean-variance utility"] == pytest.approx(5 - 25)


def test_regret_frame_labels_the_regret_matrix() -> None:
    frame = regret_frame([[10, 0], [4, 4]], Orientation.GAIN, ["Corn", "Wheat"], ["Rain"])

    assert list(frame.index) == ["Corn", "Wheat"]
    assert list(frame.columns) == ["Rain", "F2"]
    assert frame.values.tolist() == [[0.0, 4.0], [6.0, 0.0]]


def test_regret_frame_for_costs() -> None:
    frame = regret_frame([[3, 7], [5, 2]], "cost")

    assert frame.loc["A1"].tolist() == [0.0, 5.0]
    assert frame.loc["A2"].tolist() == [2.0, 0.0]


def test_frame_to_matrix_parses_text_and_zeroes_garbage() -> None:
    edited = pd.DataFrame({"F1": ["2.5", "abc"], "F2": [-math.inf, 4]}, index=["A1", "A2"])

    assert frame_to_matrix(edited) == [[2.5, 0.0], [0.0, 4.0]]
