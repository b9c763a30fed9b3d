"""Session-state plumbing and widgets shared by the uncertainty and risk pages."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from dtl.config import (
    ALTERNATIVE_PREFIX,
    DEFAULT_ALTERNATIVES,
    DEFAULT_PROBABILITIES,
    DEFAULT_STATES,
    MAX_DIMENSION,
    SCORE_DECIMALS,
    STATE_PREFIX,
)
from dtl.engines import Orientation
from dtl.matrix import create_matrix, resize_labels, resize_matrix, resize_probabilities
from dtl.report import best_positions, frame_to_matrix, payoff_frame, results_frame, summary_text

ORIENTATION_LABELS = {"Gains (maximize)": Orientation.GAIN, "Costs (minimize)": Orientation.COST}


def init_lab_state(prefix: str) -> None:
    defaults = {
        "matrix": create_matrix(DEFAULT_ALTERNATIVES, DEFAULT_STATES),
        "alt_names": resize_labels([], DEFAULT_ALTERNATIVES, ALTERNATIVE_PREFIX),
        "state_names": resize_labels([], DEFAULT_STATES, STATE_PREFIX),
        "probabilities": list(DEFAULT_PROBABILITIES),
        "result": None,
    }
    for key, value in defaults.items():
        st.session_state.setdefault(f"{prefix}_{key}", value)


def sync_dimensions(prefix: str, alternatives: int, states: int) -> None:
    """Keep matrix, labels and probabilities the same size as the declared counts."""
    state = st.session_state
    state[f"{prefix}_matrix"] = resize_matrix(state[f"{prefix}_matrix"], alternatives, states)
    state[f"{prefix}_alt_names"] = resize_labels(state[f"{prefix}_alt_names"], alternatives, ALTERNATIVE_PREFIX)
    state[f"{prefix}_state_names"] = resize_labels(state[f"{prefix}_state_names"], states, STATE_PREFIX)
    state[f"{prefix}_probabilities"] = resize_probabilities(state[f"{prefix}_probabilities"], states)


def dimension_inputs(prefix: str) -> tuple[int, int]:
    c1, c2 = st.columns(2)
    alternatives = c1.number_input(
        "Number of alternatives", min_value=1, max_value=MAX_DIMENSION, value=DEFAULT_ALTERNATIVES, step=1, key=f"{prefix}_num_alt"
    )
    states = c2.number_input(
        "Number of states of nature", min_value=1, max_value=MAX_DIMENSION, value=DEFAULT_STATES, step=1, key=f"{prefix}_num_states"
    )
    return int(alternatives), int(states)


def orientation_input(prefix: str) -> Orientation:
    choice = st.radio("Matrix values", list(ORIENTATION_LABELS.keys()), horizontal=True, key=f"{prefix}_orientation")
    return ORIENTATION_LABELS[choice]


def label_inputs(prefix: str, alternatives: int, states: int) -> None:
    st.markdown("**Alternative and state names**")
    left, right = st.columns(2)
    alt_names = st.session_state[f"{prefix}_alt_names"]
    state_names = st.session_state[f"{prefix}_state_names"]
    with left:
        st.caption("Alternatives")
        for i in range(alternatives):
            alt_names[i] = st.text_input(f"Alternative {i + 1}", value=alt_names[i], key=f"{prefix}_alt_{i}", label_visibility="collapsed")
    with right:
        st.caption("States")
        for j in range(states):
            state_names[j] = st.text_input(f"State {j + 1}", value=state_names[j], key=f"{prefix}_state_{j}", label_visibility="collapsed")


def matrix_editor(prefix: str) -> list[list[float]]:
    st.markdown("**Payoff / cost matrix**")
    matrix = st.session_state[f"{prefix}_matrix"]
    frame = payoff_frame(matrix, st.session_state[f"{prefix}_alt_names"], st.session_state[f"{prefix}_state_names"])
    rows, cols = frame.shape
    edited = st.data_editor(frame, use_container_width=True, key=f"{prefix}_editor_{rows}x{cols}")
    st.session_state[f"{prefix}_matrix"] = frame_to_matrix(edited)
    return st.session_state[f"{prefix}_matrix"]


def probability_inputs(prefix: str, states: int) -> list[float]:
    st.markdown("**State probabilities (sum = 1)**")
    probabilities = st.session_state[f"{prefix}_probabilities"]
    state_names = st.session_state[f"{prefix}_state_names"]
    columns = st.columns(states)
    for j in range(states):
        probabilities[j] = float(
            columns[j].number_input(state_names[j] or f"{STATE_PREFIX}{j + 1}", min_value=0.0, value=float(probabilities[j]), step=0.01, key=f"{prefix}_prob_{j}")
        )
    return probabilities[:states]


def _highlight_best(frame: pd.DataFrame, positions: dict[str, int]):
    def bold_column(column: pd.Series) -> list[str]:
        best = positions.get(column.name)
        return ["font-weight: bold" if idx == best else "" for idx in range(len(column))]

    return frame.style.format(precision=SCORE_DECIMALS).apply(bold_column, axis=0)


def render_results(result, alt_names: list[str], caption: str) -> None:
    with st.container(border=True):
        st.subheader("Results")
        st.caption(caption)
        frame = results_frame(result, alt_names)
        st.dataframe(_highlight_best(frame, best_positions(result)), use_container_width=True)
        st.write(summary_text(result, alt_names))


def render_error(message: str, exc: Exception):
    st.error(message)
    with st.expander("Details"):
        st.exception(exc)
