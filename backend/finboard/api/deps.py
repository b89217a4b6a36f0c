from fastapi import Depends, HTTPException

from finboard.core.config import settings
from finboard.db.session import SessionLocal
from finboard.services.budgets import BudgetService
from finboard.services.categories import CategoryService
from finboard.services.notify import BufferedNotifier, Notifier
from finboard.services.result import ErrorKind, MapperError
from finboard.services.savings_goals import SavingsGoalService
from finboard.services.transactions import TransactionService
from finboard.store.base import RecordStore
from finboard.store.http import HttpRecordStore
from finboard.store.sql import SqlRecordStore

alerts = BufferedNotifier()


def store():
    if settings.record_store_backend == "http":
        st = HttpRecordStore.from_settings(settings)
        try:
            yield st
        finally:
            st.close()
        return

    s = SessionLocal()
    try:
        yield SqlRecordStore(s)
    finally:
        s.close()


def notifier() -> Notifier:
    return alerts


def transactions(st: RecordStore = Depends(store), n: Notifier = Depends(notifier)) -> TransactionService:
    return TransactionService(st, n)


def budgets(st: RecordStore = Depends(store), n: Notifier = Depends(notifier)) -> BudgetService:
    return BudgetService(st, n)


def categories(st: RecordStore = Depends(store), n: Notifier = Depends(notifier)) -> CategoryService:
    return CategoryService(st, n)


def savings_goals(st: RecordStore = Depends(store), n: Notifier = Depends(notifier)) -> SavingsGoalService:
    return SavingsGoalService(st, n)


def raise_for_error(err: MapperError, not_found: str, rule_violation: str = "rule_violation"):
    if err.kind is ErrorKind.NOT_FOUND:
        raise HTTPException(status_code=404, detail=not_found)
    if err.kind is ErrorKind.RULE_VIOLATION:
        raise HTTPException(status_code=409, detail=rule_violation)
    raise HTTPException(status_code=502, detail="store_unavailable")


def unwrap(result, not_found: str, rule_violation: str = "rule_violation"):
    if not result.ok:
        raise_for_error(result.error, not_found, rule_violation)
    return result.value
