from __future__ import annotations

import logging
import os

import uvicorn
from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from edge_proxy.api import routes
from edge_proxy.core.config import settings
from edge_proxy.core.log import configure_logging

logger = logging.getLogger(__name__)


def create_app(static_dir: str | None = None) -> FastAPI:
    static_dir = os.path.abspath(static_dir or settings.STATIC_DIR)
    app = FastAPI(title="Finance Frontend")

    app.include_router(routes.router, tags=["proxy"])

    # === Root -> index.html ===
    @app.get("/", include_in_schema=False)
    def _root():
        return FileResponse(os.path.join(static_dir, "index.html"))

    # === Static files (UI), everything the routes above did not match ===
    app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    logger.info("Serving static UI from %s", static_dir)
    return app


app = create_app()


def run() -> None:
    configure_logging(settings.LOG_LEVEL)
    logger.info(
        "Finance frontend listening on %s:%s (backend %s)",
        settings.HOST,
        settings.PORT,
        settings.BACKEND_URL,
    )
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
