"""
Request/response schemas shared by the ledger service and the edge proxy.

Responses keep the column names of the ``Transactions`` table (``Id``,
``TxDate``, ...) on the wire; the summary uses camelCase keys.
"""
from __future__ import annotations

import math
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic_core import PydanticCustomError

REQUIRED_FIELDS_MSG = "txDate, category, amount are required"
MAX_AMOUNT = Decimal(10) ** 16

TxType = Literal["income", "expense"]


class TransactionCreate(BaseModel):
    # read by wire name only: "tx_date" or "tx_type" keys are ignored
    tx_date: date = Field(None, alias="txDate", validate_default=True)
    category: str = Field(None, validate_default=True)
    amount: Decimal = Field(None, validate_default=True)
    note: Optional[str] = None
    # only steers the sign of the amount, never stored
    tx_type: Any = Field(None, alias="type")

    @field_validator("tx_date", mode="before")
    @classmethod
    def _check_tx_date(cls, v):
        if not v:
            raise PydanticCustomError("required", REQUIRED_FIELDS_MSG)
        if isinstance(v, date):
            return v
        if not isinstance(v, str):
            raise PydanticCustomError("date_type", "txDate must be an ISO date (YYYY-MM-DD)")
        # "2024-01-05T00:00:00.000Z" is accepted as its date part
        if v[10:] and v[10] not in ("T", " "):
            raise PydanticCustomError("date_parsing", "txDate must be an ISO date (YYYY-MM-DD)")
        try:
            return date.fromisoformat(v[:10])
        except ValueError:
            raise PydanticCustomError("date_parsing", "txDate must be an ISO date (YYYY-MM-DD)")

    @field_validator("category", mode="before")
    @classmethod
    def _check_category(cls, v):
        if not v:
            raise PydanticCustomError("required", REQUIRED_FIELDS_MSG)
        if not isinstance(v, str):
            raise PydanticCustomError("string_type", "category must be a string")
        if len(v) > 100:
            raise PydanticCustomError("string_too_long", "category must be at most 100 characters")
        return v

    @field_validator("amount", mode="before")
    @classmethod
    def _check_amount(cls, v):
        # bool is an int subclass but not a JSON number
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise PydanticCustomError("required", REQUIRED_FIELDS_MSG)
        if isinstance(v, float) and not math.isfinite(v):
            raise PydanticCustomError("finite_number", "amount must be a finite number")
        value = Decimal(str(v))
        # Amount is DECIMAL(18,2): 16 integer digits at most
        if abs(value) >= MAX_AMOUNT:
            raise PydanticCustomError("amount_range", "amount is out of range")
        return value

    @field_validator("note", mode="before")
    @classmethod
    def _check_note(cls, v):
        if not v:
            return None
        if not isinstance(v, str):
            raise PydanticCustomError("string_type", "note must be a string")
        if len(v) > 400:
            raise PydanticCustomError("string_too_long", "note must be at most 400 characters")
        return v


class TransactionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(serialization_alias="Id")
    tx_date: date = Field(serialization_alias="TxDate")
    category: str = Field(serialization_alias="Category")
    note: Optional[str] = Field(None, serialization_alias="Note")
    amount: Decimal = Field(serialization_alias="Amount")
    created_at: datetime = Field(serialization_alias="CreatedAt")
    tx_type: TxType = Field(serialization_alias="Type")

    @field_serializer("amount")
    def _amount_as_number(self, v: Decimal) -> float:
        return float(v) or 0.0


class SummaryOut(BaseModel):
    total_income: float = Field(0.0, serialization_alias="totalIncome")
    total_expense: float = Field(0.0, serialization_alias="totalExpense")
    balance: float = 0.0


class ErrorOut(BaseModel):
    error: str
