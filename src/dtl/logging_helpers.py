from __future__ import annotations

import logging
from typing import Any

from .config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Attach one stream handler to the package logger; repeated calls only adjust the level."""
    logger = logging.getLogger("dtl")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)


def result_log_payload(result: Any) -> dict[str, Any]:
    """Return the winning index and score per criterion."""
    payload: dict[str, Any] = {}
    for name, criterion in result.criteria().items():
        payload[name] = {"best_index": criterion.best_index, "best_score": criterion.best_score}
    return payload
