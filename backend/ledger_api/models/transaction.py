from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import Date, DateTime, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column

from ledger_api.database.base import Base

INCOME = "income"
EXPENSE = "expense"


class Transaction(Base):
    __tablename__ = "Transactions"

    id: Mapped[int] = mapped_column("Id", primary_key=True, autoincrement=True)
    tx_date: Mapped[date] = mapped_column("TxDate", Date, nullable=False)
    category: Mapped[str] = mapped_column("Category", String(100), nullable=False)
    note: Mapped[str | None] = mapped_column("Note", String(400), nullable=True)
    # positive (or zero) for income, negative for expense
    amount: Mapped[Decimal] = mapped_column("Amount", Numeric(18, 2), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        "CreatedAt", DateTime, server_default=func.now(), nullable=False
    )

    @property
    def tx_type(self) -> str:
        """Derived from the sign of ``amount``, never stored."""
        return EXPENSE if self.amount < 0 else INCOME
