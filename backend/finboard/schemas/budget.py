from pydantic import Field, field_validator

from finboard.schemas.common import CamelModel
from finboard.utils.months import validate_month_key


class BudgetCreate(CamelModel):
    category: str
    month: str
    monthly_limit: float = Field(ge=0)

    @field_validator("month")
    @classmethod
    def month_format(cls, v: str):
        return validate_month_key(v)


class BudgetUpdate(CamelModel):
    category: str | None = None
    month: str | None = None
    monthly_limit: float | None = Field(default=None, ge=0)
    spent: float | None = Field(default=None, ge=0)
    rollover: float | None = None

    @field_validator("month")
    @classmethod
    def month_format(cls, v: str | None):
        if v is None:
            return None
        return validate_month_key(v)


class Budget(CamelModel):
    id: int
    category: str | None = None
    month: str | None = None
    monthly_limit: float = 0
    spent: float = 0
    rollover: float = 0


class SpentUpdate(CamelModel):
    category: str
    month: str
    amount: float = Field(ge=0)

    @field_validator("month")
    @classmethod
    def month_format(cls, v: str):
        return validate_month_key(v)
