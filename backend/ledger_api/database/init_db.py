# ledger_api/database/init_db.py
from sqlalchemy import Engine

from ledger_api.database.base import Base


def init_db(engine: Engine) -> None:
    # models must be imported so they register on the metadata
    from ledger_api.models.transaction import Transaction  # noqa: F401

    Base.metadata.create_all(bind=engine)
