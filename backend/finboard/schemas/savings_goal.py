import datetime as dt

from pydantic import Field, computed_field

from finboard.schemas.common import CamelModel


class SavingsGoalCreate(CamelModel):
    name: str = Field(min_length=1, max_length=128)
    target_amount: float = Field(ge=0)
    deadline: dt.date | None = None
    priority: int = 0


class SavingsGoalUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=128)
    target_amount: float | None = Field(default=None, ge=0)
    current_amount: float | None = Field(default=None, ge=0)
    deadline: dt.date | None = None
    priority: int | None = None


class Contribution(CamelModel):
    amount: float = Field(gt=0)


class SavingsGoal(CamelModel):
    id: int
    name: str | None = None
    target_amount: float = 0
    current_amount: float = 0
    deadline: str | None = None
    priority: int | None = None
    created_at: str | None = None

    @computed_field
    @property
    def is_completed(self) -> bool:
        return self.current_amount >= self.target_amount
