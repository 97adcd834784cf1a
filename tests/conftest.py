import pytest
from fastapi.testclient import TestClient
from sqlalchemy import func, select

from ledger_api.core.config import settings
from ledger_api.database import session
from ledger_api.main import create_app
from ledger_api.models.transaction import Transaction


@pytest.fixture
def database_url(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'ledger.db'}"
    monkeypatch.setattr(settings, "DATABASE_URL", url)
    session.dispose_engine()
    yield url
    session.dispose_engine()


@pytest.fixture
def client(database_url):
    with TestClient(create_app()) as c:
        yield c


@pytest.fixture
def db(database_url):
    s = session.SessionLocal(bind=session.get_engine())
    yield s
    s.close()


@pytest.fixture
def row_count(database_url):
    def _count():
        with session.get_engine().connect() as conn:
            return conn.scalar(select(func.count()).select_from(Transaction))

    return _count
