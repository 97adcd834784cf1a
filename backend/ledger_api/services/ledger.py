from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from sqlalchemy import case, desc, func, select
from sqlalchemy.orm import Session

from ledger_api.models.transaction import INCOME, Transaction
from ledger_api.schemas.transaction import SummaryOut, TransactionCreate

LIST_LIMIT = 100
CENTS = Decimal("0.01")


def signed_amount(amount: Decimal | float | int, tx_type: Any = None) -> Decimal:
    """
    Applies the sign convention: expense (negative) unless ``tx_type`` is
    exactly the string ``"income"``. Anything else, including ``"expense"``,
    a typo or no value at all, stays an expense.
    """
    value = Decimal(str(amount)).quantize(CENTS, rounding=ROUND_HALF_UP)
    final = -abs(value)
    if tx_type == INCOME:
        final = abs(value)
    # -0.00 would read back as an expense on some stores
    return final if final else Decimal("0.00")


def _cents(value) -> Decimal:
    # SQLite sums REAL values, so drift past the cents is dropped here
    return Decimal(str(value or 0)).quantize(CENTS, rounding=ROUND_HALF_UP)


def list_transactions(db: Session, limit: int = LIST_LIMIT) -> list[Transaction]:
    stmt = (
        select(Transaction)
        # Id desc breaks ties when the store clock has coarse resolution
        .order_by(desc(Transaction.created_at), desc(Transaction.id))
        .limit(limit)
    )
    return list(db.scalars(stmt))


def create_transaction(db: Session, data: TransactionCreate) -> Transaction:
    tx = Transaction(
        tx_date=data.tx_date,
        category=data.category,
        note=data.note or None,
        amount=signed_amount(data.amount, data.tx_type),
    )
    db.add(tx)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(tx)
    return tx


def summarize(db: Session) -> SummaryOut:
    amount = Transaction.amount
    row = db.execute(
        select(
            func.coalesce(func.sum(case((amount > 0, amount), else_=0)), 0).label("total_income"),
            func.coalesce(func.sum(case((amount < 0, -amount), else_=0)), 0).label("total_expense"),
            func.coalesce(func.sum(amount), 0).label("balance"),
        )
    ).one()

    income = _cents(row.total_income)
    expense = _cents(row.total_expense)
    balance = _cents(row.balance)
    return SummaryOut(
        total_income=float(income),
        total_expense=float(expense),
        balance=float(balance),
    )
