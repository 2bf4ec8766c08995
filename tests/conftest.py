# tests/conftest.py
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest
from starlette.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from confusables_db import telemetry  # noqa: E402
from confusables_db.config import get_settings  # noqa: E402
from confusables_db.database import Database  # noqa: E402
from confusables_db.embedded import default  # noqa: E402
from confusables_db.routes import confusables as confusables_routes  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    confusables_routes._configured_database.cache_clear()
    yield
    get_settings.cache_clear()
    confusables_routes._configured_database.cache_clear()


@pytest.fixture()
def db() -> Database:
    return default()


@pytest.fixture()
def make_payload() -> Callable[..., bytes]:
    """Build a serialized record set from ``(source, targets)`` pairs."""

    def _make(
        mappings: List[Dict[str, Any]],
        *,
        unicode_version: str = "16.0.0",
        generated_at: Optional[str] = "2024-08-15T00:00:00Z",
    ) -> bytes:
        doc: Dict[str, Any] = {
            "unicode_version": unicode_version,
            "source_url": "https://example.test/confusables.txt",
            "source_date": "2024-08-14, 23:05:00 GMT",
            "mappings": mappings,
        }
        if generated_at is not None:
            doc["generated_at"] = generated_at
        return json.dumps(doc).encode("utf-8")

    return _make


@pytest.fixture()
def app(monkeypatch):
    # Keep pytest's log capture handlers on the root logger.
    monkeypatch.setattr(telemetry, "_configured", True)
    from confusables_db.main import create_app

    return create_app()


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c
