from random import Random

import pytest

from finboard.schemas.budget import Budget
from finboard.schemas.savings_goal import SavingsGoal
from finboard.schemas.transaction import Transaction
from finboard.services.aggregations import (
    budget_summary,
    category_breakdown,
    goals_summary,
    month_trend_point,
)


def _budget(i: int, category: str, limit: float, spent: float) -> Budget:
    return Budget(id=i, category=category, month="2024-01", monthly_limit=limit, spent=spent)


def _goal(i: int, target: float, current: float) -> SavingsGoal:
    return SavingsGoal(id=i, name=f"goal-{i}", target_amount=target, current_amount=current)


def _tx(i: int, type_: str, amount: float, category: str | None = None) -> Transaction:
    return Transaction(id=i, type=type_, amount=amount, category=category, date="2024-01-05")


def test_budget_summary_example():
    out = budget_summary([_budget(1, "Food", 500, 300), _budget(2, "Rent", 1000, 1000)])

    assert out.total_budget == 1500
    assert out.total_spent == 1300
    assert out.remaining == 200
    assert out.percentage == pytest.approx(86.67, abs=0.01)
    assert out.categories == 2


def test_budget_summary_empty_is_all_zero():
    out = budget_summary([])
    assert out.model_dump() == {
        "total_budget": 0,
        "total_spent": 0,
        "remaining": 0,
        "percentage": 0,
        "categories": 0,
    }


def test_budget_summary_zero_limits_gives_zero_percentage():
    out = budget_summary([_budget(1, "Food", 0, 40)])
    assert out.total_budget == 0
    assert out.percentage == 0
    assert out.remaining == -40
    assert out.categories == 1


def test_budget_summary_serializes_camel_case():
    out = budget_summary([_budget(1, "Food", 100, 25)]).model_dump(by_alias=True)
    assert out["totalBudget"] == 100
    assert out["totalSpent"] == 25
    assert out["percentage"] == 25


def test_goals_summary_partitions_active_and_completed():
    goals = [_goal(1, 1000, 250), _goal(2, 500, 500), _goal(3, 200, 300)]
    out = goals_summary(goals)

    assert out.total_target_amount == 1700
    assert out.total_current_amount == 1050
    assert out.total_remaining == 650
    assert out.overall_progress == pytest.approx(1050 / 1700 * 100)
    assert out.active_goals_count == 1
    assert out.completed_goals_count == 2
    assert out.total_goals_count == 3


def test_goals_summary_empty_and_zero_target():
    assert goals_summary([]).total_goals_count == 0
    out = goals_summary([_goal(1, 0, 0)])
    assert out.overall_progress == 0
    assert out.completed_goals_count == 1


def test_aggregation_invariants_randomized():
    rng = Random(20240101)
    for _ in range(200):
        n = rng.randint(0, 12)
        budgets = [_budget(i, f"c{i}", rng.choice([0, rng.randint(1, 5000)]), rng.randint(0, 5000)) for i in range(n)]
        goals = [_goal(i, rng.randint(0, 3000), rng.randint(0, 3000)) for i in range(n)]

        bs = budget_summary(budgets)
        assert bs.total_budget == sum(b.monthly_limit for b in budgets)
        if bs.total_budget == 0:
            assert bs.percentage == 0
        else:
            assert bs.percentage == pytest.approx(bs.total_spent / bs.total_budget * 100)

        gs = goals_summary(goals)
        assert gs.active_goals_count + gs.completed_goals_count == gs.total_goals_count == n
        assert gs.active_goals_count == sum(1 for g in goals if g.current_amount < g.target_amount)


def test_category_breakdown_example():
    txs = [
        _tx(1, "expense", 50, "Food"),
        _tx(2, "expense", 20, "Food"),
        _tx(3, "income", 1000),
    ]
    out = category_breakdown(txs)
    assert [(c.category, c.amount) for c in out] == [("Food", 70)]


def test_category_breakdown_each_expense_category_once():
    txs = [
        _tx(1, "expense", 10, "Food"),
        _tx(2, "income", 500, "Salary"),
        _tx(3, "expense", 5, "Transport"),
        _tx(4, "expense", 15, "Food"),
        _tx(5, "expense", 0, "Transport"),
    ]
    out = {c.category: c.amount for c in category_breakdown(txs)}
    assert out == {"Food": 25, "Transport": 5}


def test_category_breakdown_no_expenses():
    assert category_breakdown([_tx(1, "income", 100, "Salary")]) == []
    assert category_breakdown([]) == []


def test_month_trend_point_nets_income_against_expenses():
    txs = [_tx(1, "income", 3000), _tx(2, "expense", 1200), _tx(3, "expense", 300), _tx(4, "transfer", 99)]
    p = month_trend_point("2024-03", txs)
    assert p.month == "2024-03"
    assert p.income == 3000
    assert p.expenses == 1500
    assert p.net == 1500
