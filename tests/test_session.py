import time
from concurrent.futures import ThreadPoolExecutor

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import inspect

from ledger_api.core.config import ConfigurationError, settings
from ledger_api.database import session
from ledger_api.main import create_app


@pytest.fixture
def no_database(monkeypatch):
    monkeypatch.setattr(settings, "DATABASE_URL", "")
    session.dispose_engine()
    yield
    session.dispose_engine()


def test_missing_url_fails_at_first_use(no_database):
    with pytest.raises(ConfigurationError):
        session.get_engine()


def test_missing_url_is_a_generic_server_error(no_database):
    client = TestClient(create_app())
    r = client.get("/api/transactions")
    assert r.status_code == 500
    assert r.json() == {"error": "Internal server error"}

    # liveness never touches the store
    assert client.get("/health").status_code == 200


def test_engine_is_created_once_and_reused(database_url):
    first = session.get_engine()
    assert session.get_engine() is first
    assert "Transactions" in inspect(first).get_table_names()


def test_concurrent_first_use_shares_one_engine(database_url, monkeypatch):
    calls = []
    build = session._build_engine

    def slow_build(url):
        calls.append(url)
        time.sleep(0.05)
        return build(url)

    monkeypatch.setattr(session, "_build_engine", slow_build)

    with ThreadPoolExecutor(max_workers=8) as pool:
        engines = list(pool.map(lambda _: session.get_engine(), range(8)))

    assert calls == [database_url]
    assert all(e is engines[0] for e in engines)


def test_dispose_forgets_the_engine(database_url):
    first = session.get_engine()
    session.dispose_engine()
    assert session.get_engine() is not first
