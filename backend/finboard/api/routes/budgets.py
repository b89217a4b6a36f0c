from fastapi import APIRouter, Depends, HTTPException, Query

from finboard.api.deps import budgets, unwrap
from finboard.schemas.budget import Budget, BudgetCreate, BudgetUpdate, SpentUpdate
from finboard.schemas.summary import BudgetSummary
from finboard.services.budgets import BudgetService
from finboard.utils.months import validate_month_key

router = APIRouter(prefix="/budgets", tags=["budgets"])


def _month_or_422(v: str) -> str:
    try:
        return validate_month_key(v)
    except ValueError:
        raise HTTPException(status_code=422, detail="invalid_month")


def _require_budget(svc: BudgetService, budget_id: int) -> Budget:
    return unwrap(svc.get_result(budget_id), "budget_not_found")


def _reject_duplicate(svc: BudgetService, category: str, month: str, budget_id: int | None = None) -> None:
    existing = unwrap(svc.month_result(month), "budget_not_found")
    if any(b.category == category and b.id != budget_id for b in existing):
        raise HTTPException(status_code=409, detail="budget_exists")


@router.get("", response_model=list[Budget])
def list_budgets(month: str | None = Query(None), svc: BudgetService = Depends(budgets)):
    if month is not None:
        return unwrap(svc.month_result(_month_or_422(month)), "budget_not_found")
    return unwrap(svc.fetch_result(), "budget_not_found")


@router.get("/summary", response_model=BudgetSummary)
def budget_summary(month: str = Query(...), svc: BudgetService = Depends(budgets)):
    return svc.get_budget_summary(_month_or_422(month))


@router.put("/spent", response_model=Budget)
def update_spent(body: SpentUpdate, svc: BudgetService = Depends(budgets)):
    return unwrap(svc.spent_result(body.category, body.month, body.amount), "budget_not_found", "invalid_spent")


@router.get("/{budget_id}", response_model=Budget)
def get_budget(budget_id: int, svc: BudgetService = Depends(budgets)):
    return _require_budget(svc, budget_id)


@router.post("", response_model=Budget)
def create_budget(body: BudgetCreate, svc: BudgetService = Depends(budgets)):
    _reject_duplicate(svc, body.category, body.month)
    return unwrap(svc.create_result(body), "budget_not_found")


@router.patch("/{budget_id}", response_model=Budget)
def update_budget(budget_id: int, body: BudgetUpdate, svc: BudgetService = Depends(budgets)):
    current = _require_budget(svc, budget_id)
    if body.category is not None or body.month is not None:
        _reject_duplicate(svc, body.category or current.category, body.month or current.month, budget_id)
    return unwrap(svc.update_result(budget_id, body), "budget_not_found")


@router.delete("/{budget_id}")
def delete_budget(budget_id: int, svc: BudgetService = Depends(budgets)):
    _require_budget(svc, budget_id)
    unwrap(svc.delete_result(budget_id), "budget_not_found")
    return {"ok": True}
