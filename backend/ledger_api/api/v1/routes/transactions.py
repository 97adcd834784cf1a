# ledger_api/api/v1/routes/transactions.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Body, Depends, HTTPException, status
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ledger_api.database.session import get_db
from ledger_api.schemas.transaction import ErrorOut, SummaryOut, TransactionCreate, TransactionOut
from ledger_api.services import ledger

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {500: {"model": ErrorOut}}


@router.get("/transactions", response_model=list[TransactionOut], responses=ERROR_RESPONSES)
def list_transactions(db: Session = Depends(get_db)):
    """Latest 100 transactions, most recently created first."""
    try:
        rows = ledger.list_transactions(db)
    except SQLAlchemyError:
        logger.exception("GET /api/transactions error")
        raise HTTPException(500, "Failed to fetch transactions")
    return [TransactionOut.model_validate(tx) for tx in rows]


@router.post(
    "/transactions",
    status_code=status.HTTP_201_CREATED,
    response_model=TransactionOut,
    responses={400: {"model": ErrorOut}, **ERROR_RESPONSES},
)
def create_transaction(payload: dict = Body(...), db: Session = Depends(get_db)):
    try:
        data = TransactionCreate.model_validate(payload)
    except ValidationError as e:
        raise HTTPException(400, e.errors()[0]["msg"])

    try:
        tx = ledger.create_transaction(db, data)
    except SQLAlchemyError:
        logger.exception("POST /api/transactions error")
        raise HTTPException(500, "Failed to create transaction")
    return TransactionOut.model_validate(tx)


@router.get("/summary", response_model=SummaryOut, responses=ERROR_RESPONSES)
def get_summary(db: Session = Depends(get_db)):
    try:
        return ledger.summarize(db)
    except SQLAlchemyError:
        logger.exception("GET /api/summary error")
        raise HTTPException(500, "Failed to compute summary")
