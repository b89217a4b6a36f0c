from fastapi import APIRouter, Depends, HTTPException, Query

from finboard.api.deps import transactions, unwrap
from finboard.core.config import settings
from finboard.schemas.summary import CategoryAmount, TrendPoint
from finboard.schemas.transaction import Transaction, TransactionCreate, TransactionUpdate
from finboard.services.transactions import TransactionService
from finboard.store.query import where_equal
from finboard.utils.months import recent_months, validate_month_key

router = APIRouter(prefix="/transactions", tags=["transactions"])


def _month_or_422(v: str) -> str:
    try:
        return validate_month_key(v)
    except ValueError:
        raise HTTPException(status_code=422, detail="invalid_month")


@router.get("", response_model=list[Transaction])
def list_transactions(
    month: str | None = Query(None),
    category: str | None = Query(None),
    svc: TransactionService = Depends(transactions),
):
    if month is not None:
        r = svc.month_result(_month_or_422(month))
    elif category is not None:
        r = svc.fetch_result(where=[where_equal("category_c", category)], notify=False)
    else:
        r = svc.fetch_result(order=svc.default_order)
    items = unwrap(r, "transaction_not_found")
    if month is not None and category is not None:
        items = [t for t in items if t.category == category]
    return items


@router.get("/trend", response_model=list[TrendPoint])
def income_expense_trend(
    months: list[str] | None = Query(None),
    svc: TransactionService = Depends(transactions),
):
    keys = [_month_or_422(m) for m in months] if months else recent_months(settings.trend_months)
    return svc.get_income_expense_trend(keys)


@router.get("/breakdown", response_model=list[CategoryAmount])
def category_breakdown(month: str = Query(...), svc: TransactionService = Depends(transactions)):
    return svc.get_category_breakdown(_month_or_422(month))


def _require_transaction(svc: TransactionService, tx_id: int) -> Transaction:
    return unwrap(svc.get_result(tx_id), "transaction_not_found")


@router.get("/{tx_id}", response_model=Transaction)
def get_transaction(tx_id: int, svc: TransactionService = Depends(transactions)):
    return _require_transaction(svc, tx_id)


@router.post("", response_model=Transaction)
def create_transaction(body: TransactionCreate, svc: TransactionService = Depends(transactions)):
    return unwrap(svc.create_result(body), "transaction_not_found")


@router.patch("/{tx_id}", response_model=Transaction)
def update_transaction(tx_id: int, body: TransactionUpdate, svc: TransactionService = Depends(transactions)):
    _require_transaction(svc, tx_id)
    return unwrap(svc.update_result(tx_id, body), "transaction_not_found")


@router.delete("/{tx_id}")
def delete_transaction(tx_id: int, svc: TransactionService = Depends(transactions)):
    _require_transaction(svc, tx_id)
    unwrap(svc.delete_result(tx_id), "transaction_not_found")
    return {"ok": True}
