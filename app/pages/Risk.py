from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

import streamlit as st

APP_PATH = Path(__file__).resolve().parents[1]
if str(APP_PATH) not in sys.path:
    sys.path.insert(0, str(APP_PATH))

from dtl.config import DEFAULT_RISK_AVERSION, DEFAULT_THRESHOLD, RISK_AVERSION_MAX, SCORE_DECIMALS
from dtl.engines import Orientation, compute_risk
from dtl.logging_helpers import configure_logging, result_log_payload
from dtl.report import regret_frame
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
from ui_guards import validate_dimensions, validate_probabilities

PREFIX = "risk"

configure_logging()
logger = logging.getLogger("dtl.app.risk")

st.set_page_config(page_title="Risk", layout="wide")
st.title("Lab 2. Choosing a decision under risk")
st.caption("State probabilities are known from history or forecasts.")


def describe_criteria() -> None:
    with st.expander("Criteria", expanded=False):
        st.markdown(
            "- **Expected value**: the best probability-weighted outcome (lowest expected cost for costs).\n"
            "- **Savage**: regret is the gap to the best outcome of each state; pick the smallest maximum regret.\n"
            "- **Mean-variance**: expected value penalised by variance; larger k means stronger risk aversion.\n"
            "- **Threshold**: the highest probability of reaching T (>= T for gains, <= T for costs).\n"
            "- **Most likely state**: the best outcome in the single most probable state."
        )


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
        risk_k = st.slider(
            "Risk aversion k", min_value=0.0, max_value=RISK_AVERSION_MAX, value=DEFAULT_RISK_AVERSION, step=0.05, key=f"{PREFIX}_k"
        )
    with c3:
        threshold = st.number_input("Threshold T", value=DEFAULT_THRESHOLD, step=0.1, key=f"{PREFIX}_threshold")

    label_inputs(PREFIX, alternatives, states)
    matrix = matrix_editor(PREFIX)
    probabilities = probability_inputs(PREFIX, states)

    prob_ok, prob_message = validate_probabilities(probabilities)
    if not prob_ok:
        st.error(prob_message)

    if st.button("Compute", disabled=not prob_ok, key=f"{PREFIX}_compute"):
        try:
            result = compute_risk(matrix, probabilities, orientation, float(risk_k), float(threshold))
            logger.info(
                "risk computed orientation=%s k=%.2f T=%s best=%s", orientation.value, risk_k, threshold, result_log_payload(result)
            )
            st.session_state[f"{PREFIX}_result"] = {
                "result": result,
                "matrix": [list(row) for row in matrix],
                "orientation": orientation,
                "k": float(risk_k),
                "threshold": float(threshold),
            }
        except Exception as exc:
            logger.exception("risk computation failed")
            render_error("Computation failed. Please verify inputs and try again.", exc)

    computed = st.session_state[f"{PREFIX}_result"]
    if computed is None:
        st.info("Fill in the matrix and probabilities, then press **Compute**.")
        return

    goal = "maximizing gains" if computed["orientation"] is Orientation.GAIN else "minimizing costs"
    render_results(
        computed["result"],
        st.session_state[f"{PREFIX}_alt_names"],
        f"Orientation: {goal}; k = {computed['k']:.2f}; threshold T = {computed['threshold']}",
    )

    with st.expander("Regret matrix", expanded=False):
        regret = regret_frame(
            computed["matrix"],
            computed["orientation"],
            st.session_state[f"{PREFIX}_alt_names"],
            st.session_state[f"{PREFIX}_state_names"],
        )
        st.dataframe(regret.style.format(precision=SCORE_DECIMALS), use_container_width=True)


try:
    run_app()
except Exception as exc:
    print("Startup failure in app construction:", exc)
    traceback.print_exc()
    raise
