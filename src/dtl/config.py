"""Lab defaults and limits shared by the engine and the Streamlit pages."""

from __future__ import annotations

import os

PROB_SUM_TOLERANCE = 1e-6

DEFAULT_ALTERNATIVES = 3
DEFAULT_STATES = 3
MAX_DIMENSION = int(os.getenv("DTL_MAX_DIMENSION", "20"))

DEFAULT_PROBABILITIES = [0.33, 0.33, 0.34]

DEFAULT_PESSIMISM = 0.5
DEFAULT_RISK_AVERSION = 0.5
RISK_AVERSION_MAX = 2.0
DEFAULT_THRESHOLD = 0.0

SCORE_DECIMALS = 3

ALTERNATIVE_PREFIX = "A"
STATE_PREFIX = "F"

LOG_LEVEL = os.getenv("DTL_LOG_LEVEL", "INFO").upper()
