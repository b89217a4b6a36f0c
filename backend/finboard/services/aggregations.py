from __future__ import annotations

from typing import Iterable

from finboard.schemas.budget import Budget
from finboard.schemas.savings_goal import SavingsGoal
from finboard.schemas.summary import BudgetSummary, CategoryAmount, GoalsSummary, TrendPoint
from finboard.schemas.transaction import Transaction


def budget_summary(budgets: Iterable[Budget]) -> BudgetSummary:
    bs = list(budgets)
    if not bs:
        return BudgetSummary()

    total_budget = sum((b.monthly_limit or 0) for b in bs)
    total_spent = sum((b.spent or 0) for b in bs)
    percentage = (total_spent / total_budget) * 100 if total_budget > 0 else 0

    return BudgetSummary(
        total_budget=total_budget,
        total_spent=total_spent,
        remaining=total_budget - total_spent,
        percentage=percentage,
        categories=len(bs),
    )


def goals_summary(goals: Iterable[SavingsGoal]) -> GoalsSummary:
    gs = list(goals)
    if not gs:
        return GoalsSummary()

    total_target = sum((g.target_amount or 0) for g in gs)
    total_current = sum((g.current_amount or 0) for g in gs)
    completed = sum(1 for g in gs if g.is_completed)

    return GoalsSummary(
        total_target_amount=total_target,
        total_current_amount=total_current,
        total_remaining=total_target - total_current,
        overall_progress=(total_current / total_target) * 100 if total_target > 0 else 0,
        active_goals_count=len(gs) - completed,
        completed_goals_count=completed,
        total_goals_count=len(gs),
    )


def month_trend_point(month: str, transactions: Iterable[Transaction]) -> TrendPoint:
    income = 0.0
    expenses = 0.0
    for t in transactions:
        if t.type == "income":
            income += t.amount or 0
        elif t.type == "expense":
            expenses += t.amount or 0
    return TrendPoint(month=month, income=income, expenses=expenses, net=income - expenses)


def category_breakdown(transactions: Iterable[Transaction]) -> list[CategoryAmount]:
    """Expense totals per category; income is ignored. Order is first appearance."""
    totals: dict[str | None, float] = {}
    for t in transactions:
        if t.type != "expense":
            continue
        totals[t.category] = totals.get(t.category, 0) + (t.amount or 0)
    return [CategoryAmount(category=c, amount=a) for c, a in totals.items()]
