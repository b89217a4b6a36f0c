import datetime as dt
from typing import Literal

from pydantic import field_validator

from finboard.schemas.common import CamelModel

TxType = Literal["income", "expense"]


class TransactionCreate(CamelModel):
    amount: float
    category: str
    date: dt.date
    description: str
    notes: str | None = None
    type: TxType

    @field_validator("amount")
    @classmethod
    def amount_must_be_finite(cls, v: float):
        if v != v:
            raise ValueError("amount must be a number")
        if v == float("inf") or v == float("-inf"):
            raise ValueError("amount must be finite")
        return v

    @field_validator("category", "description")
    @classmethod
    def required_trim(cls, v: str):
        v = v.strip()
        if not v:
            raise ValueError("value is required")
        return v


class TransactionUpdate(CamelModel):
    amount: float | None = None
    category: str | None = None
    date: dt.date | None = None
    description: str | None = None
    notes: str | None = None
    type: TxType | None = None


class Transaction(CamelModel):
    id: int
    amount: float = 0
    category: str | None = None
    date: str | None = None
    description: str | None = None
    notes: str | None = None
    type: str | None = None
    created_at: str | None = None
