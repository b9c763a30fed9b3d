from __future__ import annotations

import logging
import traceback

import streamlit as st

from dtl.config import DEFAULT_PESSIMISM
from dtl.engines import Orientation, compute_uncertainty
from dtl.logging_helpers import configure_logging, result_log_payload
from lab_state import (
    dimension_inputs,
    init_lab_state,
    label_inputs,
    matrix_editor,
    orientation_input,
    probability_inputs,
    render_error,
    render_results,
    sync_dimensions,
)
from ui_guards import clamp_pessimism, validate_dimensions, validate_probabilities

PREFIX = "uncertainty"

configure_logging()
logger = logging.getLogger("dtl.app.uncertainty")

st.set_page_config(page_title="Decision Theory Lab", layout="wide")
st.title("Lab 1. Choosing alternatives under uncertainty")
st.caption("Educational decision support. Open the Risk page in the sidebar for decisions with known probabilities.")


def describe_criteria() -> None:
    with st.expander("Criteria", expanded=False):
        st.markdown(
            "- **Maximax** (optimistic): the alternative with the best possible outcome.\n"
            "- **Wald** (pessimistic, maximin for gains / minimax for costs): the best of the worst outcomes.\n"
            "- **Hurwicz**: blends worst and best outcome; the pessimism coefficient q weights the worst case.\n"
            "- **Laplace / Bayes-Laplace**: equally likely states when probabilities are unknown, "
            "otherwise outcomes weighted by the known probabilities."
        )


def run_compute(matrix: list[list[float]], weights: list[float] | None, q: float, orientation: Orientation):
    result = compute_uncertainty(matrix, weights, q, orientation)
    logger.info("uncertainty computed orientation=%s q=%.2f best=%s", orientation.value, q, result_log_payload(result))
    return result


def run_app() -> None:
    init_lab_state(PREFIX)
    describe_criteria()

    alternatives, states = dimension_inputs(PREFIX)
    ok, message = validate_dimensions(alternatives, states)
    if not ok:
        st.warning(message)
        return
    sync_dimensions(PREFIX, alternatives, states)

    c1, c2, c3 = st.columns([2, 2, 1])
    with c1:
        orientation = orientation_input(PREFIX)
    with c2:
        q = clamp_pessimism(st.slider("Pessimism coefficient q", min_value=0.0, max_value=1.0, value=DEFAULT_PESSIMISM, step=0.01, key=f"{PREFIX}_q"))
    with c3:
        use_prob = st.toggle("Known state probabilities", value=False, key=f"{PREFIX}_use_prob")

    label_inputs(PREFIX, alternatives, states)
    matrix = matrix_editor(PREFIX)

    weights = None
    if use_prob:
        weights = probability_inputs(PREFIX, states)
    prob_ok, prob_message = validate_probabilities(weights or [], required=use_prob)
    if not prob_ok:
        st.error(prob_message)

    if st.button("Compute", disabled=not prob_ok, key=f"{PREFIX}_compute"):
        try:
            st.session_state[f"{PREFIX}_result"] = {
                "result": run_compute(matrix, weights, q, orientation),
                "orientation": orientation,
                "q": q,
                "use_prob": use_prob,
            }
        except Exception as exc:
            logger.exception("uncertainty computation failed")
            render_error("Computation failed. Please verify inputs and try again.", exc)

    computed = st.session_state[f"{PREFIX}_result"]
    if computed is None:
        st.info("Fill in the matrix and press **Compute**.")
        return

    goal = "maximizing gains" if computed["orientation"] is Orientation.GAIN else "minimizing costs"
    laplace_mode = "known probabilities (Bayes-Laplace)" if computed["use_prob"] else "equally likely states"
    render_results(
        computed["result"],
        st.session_state[f"{PREFIX}_alt_names"],
        f"Orientation: {goal}; q = {computed['q']:.2f}; Laplace with {laplace_mode}.",
    )


try:
    run_app()
except Exception as exc:
    print("Startup failure in app construction:", exc)
    traceback.print_exc()
    raise
