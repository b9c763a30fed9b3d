from __future__ import annotations

from dtl.config import MAX_DIMENSION, PROB_SUM_TOLERANCE
from dtl.matrix import probability_sum


def validate_probabilities(probabilities: list[float], required: bool = True) -> tuple[bool, str | None]:
    """Block a computation when known probabilities do not add up to 1."""
    if not required:
        return True, None
    total = probability_sum(probabilities)
    if abs(total - 1) >= PROB_SUM_TOLERANCE:
        return False, f"State probabilities must sum to 1. Current sum: {total:.3f}"
    return True, None


def validate_dimensions(alternatives: int, states: int) -> tuple[bool, str | None]:
    """Validate alternative/state counts exposed in the UI."""
    if alternatives < 1 or states < 1:
        return False, "At least one alternative and one state of nature are required."
    if alternatives > MAX_DIMENSION or states > MAX_DIMENSION:
        return False, f"This lab supports up to {MAX_DIMENSION} alternatives and {MAX_DIMENSION} states."
    return True, None


def clamp_pessimism(q: float) -> float:
    return min(1.0, max(0.0, float(q)))
