"""Uncertainty and risk evaluation engines."""

from .risk import RiskResult, compute_risk, regret_matrix
from .selection import CriterionResult, Orientation, select_index
from .uncertainty import UncertaintyResult, compute_uncertainty

__all__ = [
    "CriterionResult",
    "Orientation",
    "RiskResult",
    "UncertaintyResult",
    "compute_risk",
    "compute_uncertainty",
    "regret_matrix",
    "select_index",
]
