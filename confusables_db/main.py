# confusables_db/main.py
from __future__ import annotations

import logging
import platform
import sys

from fastapi import FastAPI
from fastapi.responses import Response
from prometheus_client import REGISTRY, generate_latest

from confusables_db import config
from confusables_db.routes.confusables import router as confusables_router
from confusables_db.telemetry import configure_root_logging

log = logging.getLogger(__name__)

# Classic Prometheus text exposition content type.
TEXT_EXPO_V004 = "text/plain; version=0.0.4; charset=utf-8"


def create_app() -> FastAPI:
    settings = config.get_settings()
    configure_root_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

    app = FastAPI(title="Confusables API", version=config.APP_VERSION)
    app.include_router(confusables_router)

    @app.get("/health", tags=["ops"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/version", tags=["ops"])
    def version() -> dict[str, object]:
        return {
            "version": config.APP_VERSION,
            "runtime": {
                "python": sys.version.split(" ")[0],
                "platform": platform.platform(),
            },
        }

    if settings.METRICS_ENABLED:

        @app.get("/metrics", include_in_schema=False)
        def metrics() -> Response:
            return Response(generate_latest(REGISTRY), media_type=TEXT_EXPO_V004)

    log.debug("confusables app created")
    return app
