from __future__ import annotations

import logging
from typing import Any, Callable

from prometheus_client import Counter, Gauge

_log = logging.getLogger(__name__)

confusables_load_total = Counter(
    "confusables_load_total",
    "Confusables record sets loaded, by result",
    ["result"],
)

confusables_mappings_loaded = Gauge(
    "confusables_mappings_loaded",
    "Number of mappings in the most recently loaded database",
)

confusables_requests_total = Counter(
    "confusables_requests_total",
    "Confusables HTTP queries served, by operation",
    ["op"],
)


# -----------------------------------------------------------------------------
# Metrics never raise into the load or request path; failures are logged at
# DEBUG only.
# -----------------------------------------------------------------------------
def _best_effort(msg: str, fn: Callable[[], Any]) -> None:
    try:
        fn()
    except Exception as e:  # pragma: no cover
        _log.debug("%s: %s", msg, e)


def record_load(result: str, mappings: int = 0) -> None:
    _best_effort(
        "confusables_load_total inc failed",
        lambda: confusables_load_total.labels(result=result).inc(),
    )
    if result == "ok":
        _best_effort(
            "confusables_mappings_loaded set failed",
            lambda: confusables_mappings_loaded.set(mappings),
        )


def record_request(op: str) -> None:
    _best_effort(
        "confusables_requests_total inc failed",
        lambda: confusables_requests_total.labels(op=op).inc(),
    )


__all__ = [
    "confusables_load_total",
    "confusables_mappings_loaded",
    "confusables_requests_total",
    "record_load",
    "record_request",
]
