from datetime import date

import pytest

from finboard.schemas.transaction import TransactionCreate, TransactionUpdate
from finboard.services.result import ErrorKind
from finboard.services.transactions import TransactionService


def _add(svc: TransactionService, d: date, type_: str, amount: float, category: str, description: str = "x"):
    out = svc.create(TransactionCreate(date=d, type=type_, amount=amount, category=category, description=description))
    assert out is not None
    return out


def test_create_maps_fields_and_defaults(sql_store, notifier):
    svc = TransactionService(sql_store, notifier)
    t = _add(svc, date(2024, 1, 5), "expense", 42.5, "Food", description="Groceries")

    assert t.id > 0
    assert t.amount == 42.5
    assert t.category == "Food"
    assert t.date == "2024-01-05"
    assert t.description == "Groceries"
    assert t.notes == ""
    assert t.type == "expense"
    assert t.created_at is not None

    raw = sql_store.get_record_by_id("transaction_c", t.id, {})["data"]
    assert raw["Name"] == "Groceries"


def test_read_defaults_amount_and_description(scripted, notifier):
    scripted.responses["get"] = {
        "success": True,
        "data": {"Id": 3, "Name": "Coffee", "amount_c": None, "description_c": "", "type_c": "expense"},
    }
    t = TransactionService(scripted, notifier).get_by_id(3)
    assert t.amount == 0
    assert t.description == "Coffee"


def test_get_all_orders_by_date_desc(sql_store, notifier):
    svc = TransactionService(sql_store, notifier)
    _add(svc, date(2024, 1, 5), "expense", 1, "Food")
    _add(svc, date(2024, 3, 1), "expense", 2, "Food")
    _add(svc, date(2024, 2, 9), "income", 3, "Salary")

    assert [t.date for t in svc.get_all()] == ["2024-03-01", "2024-02-09", "2024-01-05"]


def test_get_by_month_and_category(sql_store, notifier):
    svc = TransactionService(sql_store, notifier)
    _add(svc, date(2024, 1, 5), "expense", 1, "Food")
    _add(svc, date(2024, 1, 28), "expense", 2, "Rent")
    _add(svc, date(2024, 2, 1), "expense", 3, "Food")

    assert [t.date for t in svc.get_by_month("2024-01")] == ["2024-01-28", "2024-01-05"]
    assert sorted(t.amount for t in svc.get_by_category("Food")) == [1, 3]
    assert svc.get_by_month("2023-12") == []


def test_update_sends_only_fields_that_were_set(scripted, notifier):
    svc = TransactionService(scripted, notifier)
    out = svc.update("12", TransactionUpdate(amount=25))

    op, collection, (params,) = scripted.calls[-1]
    assert (op, collection) == ("update", "transaction_c")
    assert params == {"records": [{"Id": 12, "amount_c": 25.0}]}
    assert out.amount == 25


def test_update_description_mirrors_into_name(scripted, notifier):
    TransactionService(scripted, notifier).update(4, TransactionUpdate(description="Rent", date=date(2024, 5, 1)))
    _, _, (params,) = scripted.calls[-1]
    assert params["records"][0] == {"Id": 4, "Name": "Rent", "description_c": "Rent", "date_c": "2024-05-01"}


def test_transport_failure_collapses_to_defaults(scripted, notifier):
    scripted.raise_on = {"fetch", "get", "create", "update", "delete"}
    svc = TransactionService(scripted, notifier)

    assert svc.get_all() == []
    assert svc.get_by_id(1) is None
    assert svc.update(1, TransactionUpdate(amount=1)) is None
    assert svc.delete(1) is False

    r = svc.fetch_result()
    assert not r.ok
    assert r.error.kind is ErrorKind.TRANSPORT


def test_backend_failure_notifies_on_list_but_not_on_lookup(scripted, notifier):
    scripted.responses["fetch"] = {"success": False, "data": [], "message": "table locked"}
    scripted.responses["get"] = {"success": False, "data": None, "message": "table locked"}
    svc = TransactionService(scripted, notifier)

    assert svc.get_all() == []
    assert svc.get_by_id(1) is None
    assert notifier.drain() == ["table locked"]

    assert svc.get_by_month("2024-01") == []
    assert notifier.drain() == []


def test_failed_batch_items_notify_once_each(scripted, notifier):
    scripted.responses["delete"] = {
        "success": True,
        "results": [{"success": False, "message": "locked"}, {"success": False, "message": "gone"}],
        "message": "",
    }
    r = TransactionService(scripted, notifier).delete_result(1)
    assert not r.ok
    assert r.error.kind is ErrorKind.BACKEND
    assert notifier.drain() == ["locked", "gone"]


def test_missing_record_is_not_found(sql_store, notifier):
    svc = TransactionService(sql_store, notifier)
    r = svc.get_result(999)
    assert r.error.kind is ErrorKind.NOT_FOUND
    assert svc.get_result("abc").error.kind is ErrorKind.NOT_FOUND


def test_trend_preserves_month_order_and_fills_gaps(sql_store, notifier):
    svc = TransactionService(sql_store, notifier)
    _add(svc, date(2024, 1, 2), "income", 3000, "Salary")
    _add(svc, date(2024, 1, 9), "expense", 1000, "Rent")
    _add(svc, date(2024, 3, 4), "expense", 200, "Food")

    trend = svc.get_income_expense_trend(["2024-03", "2024-01", "2024-02"])

    assert [p.month for p in trend] == ["2024-03", "2024-01", "2024-02"]
    assert (trend[0].income, trend[0].expenses, trend[0].net) == (0, 200, -200)
    assert (trend[1].income, trend[1].expenses, trend[1].net) == (3000, 1000, 2000)
    assert (trend[2].income, trend[2].expenses, trend[2].net) == (0, 0, 0)


def test_trend_emits_zero_point_for_failed_month(scripted, notifier):
    def fetch(collection, params):
        month = params["where"][0]["Values"][0]
        if month == "2024-02":
            return {"success": False, "data": [], "message": "timeout"}
        return {"success": True, "data": [{"Id": 1, "type_c": "income", "amount_c": 10, "date_c": month + "-01"}]}

    scripted.responses["fetch"] = fetch
    trend = TransactionService(scripted, notifier).get_income_expense_trend(["2024-01", "2024-02", "2024-03"])

    assert len(trend) == 3
    assert [p.income for p in trend] == [10, 0, 10]
    assert [c[0] for c in scripted.calls] == ["fetch", "fetch", "fetch"]


def test_category_breakdown_for_month(sql_store, notifier):
    svc = TransactionService(sql_store, notifier)
    _add(svc, date(2024, 1, 2), "expense", 50, "Food")
    _add(svc, date(2024, 1, 3), "expense", 20, "Food")
    _add(svc, date(2024, 1, 4), "income", 1000, "Salary")
    _add(svc, date(2024, 2, 4), "expense", 99, "Food")

    out = svc.get_category_breakdown("2024-01")
    assert [(c.category, c.amount) for c in out] == [("Food", 70)]
    assert svc.get_category_breakdown("2024-05") == []


def test_create_rejects_unknown_type():
    with pytest.raises(ValueError):
        TransactionCreate(date=date(2024, 1, 1), type="transfer", amount=1, category="x", description="y")
