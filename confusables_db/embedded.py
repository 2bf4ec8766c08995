"""Process-wide database built from the embedded dataset."""

from __future__ import annotations

import logging
import threading
from importlib import resources
from typing import Optional

from confusables_db.database import Database
from confusables_db.errors import LoadError
from confusables_db.loader import load

log = logging.getLogger(__name__)

EMBEDDED_RESOURCE = "confusables.json"

_lock = threading.Lock()
_default: Optional[Database] = None


def embedded_data() -> bytes:
    return resources.files("confusables_db.data").joinpath(EMBEDDED_RESOURCE).read_bytes()


def default() -> Database:
    """Return the shared database, loading the embedded dataset on first use.

    The embedded data is validated when it is generated, so a failure here is
    a packaging defect: it is logged and re-raised as RuntimeError instead of
    handing back a broken database.
    """
    global _default
    db = _default
    if db is not None:
        return db
    with _lock:
        if _default is None:
            try:
                built = load(embedded_data())
            except (LoadError, OSError) as exc:
                log.critical("failed to load embedded confusables data: %s", exc)
                raise RuntimeError(
                    f"confusables: failed to load embedded data: {exc}"
                ) from exc
            _default = built
        return _default


def reset_default() -> None:
    """Drop the cached database. Tests only."""
    global _default
    with _lock:
        _default = None


__all__ = ["default", "embedded_data", "reset_default"]
