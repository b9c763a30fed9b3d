import logging

from dtl.engines import Orientation, compute_uncertainty
from dtl.logging_helpers import configure_logging, result_log_payload


def test_result_log_payload_reports_winners() -> None:
    result = compute_uncertainty([[4, 2, 5], [3, 6, 1]], None, 0.5, Orientation.GAIN)

    payload = result_log_payload(result)

    assert payload["maximax"] == {"best_index": 1, "best_score": 6.0}
    assert payload["wald"] == {"best_index": 0, "best_score": 2.0}
    assert set(payload) == {"maximax", "wald", "hurwicz", "laplace"}


def test_configure_logging_adds_single_handler() -> None:
    configure_logging("DEBUG")
    configure_logging("WARNING")

    logger = logging.getLogger("dtl")

    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
