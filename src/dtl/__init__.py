"""Decision Theory Lab evaluation engine package."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .engines import Orientation, compute_risk, compute_uncertainty
from .matrix import create_matrix, normalize_weights, resize_matrix

try:
    __version__ = version("decision-theory-lab")
except PackageNotFoundError:
    # Fallback for editable/local source execution without installed package metadata.
    __version__ = "0.1.0"

__all__ = [
    "__version__",
    "Orientation",
    "compute_risk",
    "compute_uncertainty",
    "create_matrix",
    "normalize_weights",
    "resize_matrix",
]
