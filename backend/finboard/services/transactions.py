from __future__ import annotations

from typing import Iterable

from finboard.schemas.summary import CategoryAmount, TrendPoint
from finboard.schemas.transaction import Transaction, TransactionCreate, TransactionUpdate
from finboard.services.aggregations import category_breakdown, month_trend_point
from finboard.services.mapper import RecordMapper
from finboard.store.query import DESC, order_by, where_equal, where_starts_with

_BY_DATE_DESC = [order_by("date_c", DESC)]


class TransactionService(RecordMapper[Transaction]):
    collection = "transaction_c"
    label = "transactions"
    fields = ("Name", "amount_c", "category_c", "date_c", "description_c", "notes_c", "type_c", "CreatedOn")
    default_order = _BY_DATE_DESC

    def to_entity(self, raw: dict) -> Transaction:
        return Transaction(
            id=raw.get("Id"),
            amount=raw.get("amount_c") or 0,
            category=raw.get("category_c"),
            date=raw.get("date_c"),
            description=raw.get("description_c") or raw.get("Name"),
            notes=raw.get("notes_c"),
            type=raw.get("type_c"),
            created_at=raw.get("CreatedOn"),
        )

    def to_create_record(self, data: TransactionCreate) -> dict:
        return {
            "Name": data.description,
            "amount_c": data.amount,
            "category_c": data.category,
            "date_c": data.date.isoformat(),
            "description_c": data.description,
            "notes_c": data.notes or "",
            "type_c": data.type,
        }

    def to_update_record(self, data: TransactionUpdate) -> dict:
        patch = data.model_dump(exclude_unset=True)
        out: dict = {}
        if "description" in patch:
            out["Name"] = patch["description"]
            out["description_c"] = patch["description"]
        if "amount" in patch:
            out["amount_c"] = patch["amount"]
        if "category" in patch:
            out["category_c"] = patch["category"]
        if "date" in patch:
            out["date_c"] = patch["date"].isoformat() if patch["date"] is not None else None
        if "notes" in patch:
            out["notes_c"] = patch["notes"]
        if "type" in patch:
            out["type_c"] = patch["type"]
        return out

    def month_result(self, month: str):
        return self.fetch_result(where=[where_starts_with("date_c", month)], order=_BY_DATE_DESC, notify=False)

    def get_by_month(self, month: str) -> list[Transaction]:
        return self.month_result(month).get_or_else([])

    def get_by_category(self, category: str) -> list[Transaction]:
        return self.fetch_result(where=[where_equal("category_c", category)], notify=False).get_or_else([])

    def get_income_expense_trend(self, months: Iterable[str]) -> list[TrendPoint]:
        # one fetch per month, in the caller's order
        return [month_trend_point(m, self.get_by_month(m)) for m in months]

    def get_category_breakdown(self, month: str) -> list[CategoryAmount]:
        return category_breakdown(self.get_by_month(month))
