from __future__ import annotations

import logging
import threading
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker

from ledger_api.core.config import ConfigurationError, settings
from ledger_api.database.init_db import init_db

logger = logging.getLogger(__name__)

# one engine (pool) per process, built on first use
_engine: Engine | None = None
_lock = threading.Lock()

SessionLocal = sessionmaker(autoflush=False, expire_on_commit=False)


def _build_engine(url: str) -> Engine:
    connect_args = {}
    if make_url(url).get_backend_name() == "sqlite":
        # the pool hands connections to FastAPI's worker threads
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=settings.SQL_ECHO, connect_args=connect_args)


def get_engine() -> Engine:
    """
    Returns the shared engine, creating it (and the schema) on first use.

    Concurrent first callers block on the same lock, so only one engine is
    ever built; everybody else reuses it.
    """
    global _engine
    if _engine is not None:
        return _engine
    with _lock:
        if _engine is None:
            url = settings.DATABASE_URL
            if not url:
                raise ConfigurationError("DATABASE_URL (or SQL_CONNECTION) env var not set.")
            engine = _build_engine(url)
            init_db(engine)
            logger.info("Connected to store %s", make_url(url).render_as_string(hide_password=True))
            _engine = engine
    return _engine


def dispose_engine() -> None:
    global _engine
    with _lock:
        if _engine is not None:
            _engine.dispose()
            _engine = None


def get_db() -> Iterator[Session]:
    db = SessionLocal(bind=get_engine())
    try:
        yield db
    finally:
        db.close()
