from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ledger_api.api.v1.routes import health, transactions
from ledger_api.core.config import settings
from ledger_api.core.errors import register_error_handlers
from ledger_api.core.log import configure_logging
from ledger_api.database.session import dispose_engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # the store is reached lazily on the first request, not here
    yield
    dispose_engine()


def create_app() -> FastAPI:
    app = FastAPI(title="Finance Ledger API", lifespan=lifespan)

    # -------------------------------------------------------------------------
    # CORS: the browser talks to the edge proxy, so this is off unless asked
    # -------------------------------------------------------------------------
    if settings.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_error_handlers(app)

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------
    app.include_router(transactions.router, prefix="/api", tags=["transactions"])
    app.include_router(health.router, tags=["health"])
    return app


app = create_app()


def run() -> None:
    configure_logging(settings.LOG_LEVEL)
    logger.info("Finance backend listening on %s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
