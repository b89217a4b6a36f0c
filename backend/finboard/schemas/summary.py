from finboard.schemas.common import CamelModel


class BudgetSummary(CamelModel):
    total_budget: float = 0
    total_spent: float = 0
    remaining: float = 0
    percentage: float = 0
    categories: int = 0


class GoalsSummary(CamelModel):
    total_target_amount: float = 0
    total_current_amount: float = 0
    total_remaining: float = 0
    overall_progress: float = 0
    active_goals_count: int = 0
    completed_goals_count: int = 0
    total_goals_count: int = 0


class TrendPoint(CamelModel):
    month: str
    income: float = 0
    expenses: float = 0
    net: float = 0


class CategoryAmount(CamelModel):
    category: str | None
    amount: float
