from __future__ import annotations

import logging

from finboard.schemas.budget import Budget, BudgetCreate, BudgetUpdate
from finboard.schemas.summary import BudgetSummary
from finboard.services.aggregations import budget_summary
from finboard.services.mapper import RecordMapper
from finboard.services.result import ErrorKind, Result
from finboard.store.query import where_equal

logger = logging.getLogger(__name__)


class BudgetService(RecordMapper[Budget]):
    collection = "budget_c"
    label = "budgets"
    fields = ("Name", "category_c", "month_c", "monthly_limit_c", "spent_c", "rollover_c")

    def to_entity(self, raw: dict) -> Budget:
        return Budget(
            id=raw.get("Id"),
            category=raw.get("category_c"),
            month=raw.get("month_c"),
            monthly_limit=raw.get("monthly_limit_c") or 0,
            spent=raw.get("spent_c") or 0,
            rollover=raw.get("rollover_c") or 0,
        )

    def to_create_record(self, data: BudgetCreate) -> dict:
        return {
            "Name": data.category,
            "category_c": data.category,
            "month_c": data.month,
            "monthly_limit_c": data.monthly_limit,
            "spent_c": 0,
            "rollover_c": 0,
        }

    def to_update_record(self, data: BudgetUpdate) -> dict:
        patch = data.model_dump(exclude_unset=True)
        out: dict = {}
        if "category" in patch:
            out["Name"] = patch["category"]
            out["category_c"] = patch["category"]
        if "month" in patch:
            out["month_c"] = patch["month"]
        if "monthly_limit" in patch:
            out["monthly_limit_c"] = patch["monthly_limit"]
        if "spent" in patch:
            out["spent_c"] = patch["spent"]
        if "rollover" in patch:
            out["rollover_c"] = patch["rollover"]
        return out

    def month_result(self, month: str):
        return self.fetch_result(where=[where_equal("month_c", month)], notify=False)

    def get_by_month(self, month: str) -> list[Budget]:
        return self.month_result(month).get_or_else([])

    def spent_result(self, category: str, month: str, amount: float) -> Result[Budget]:
        """Overwrite ``spent`` on the (category, month) budget.

        Read-then-write with no version check: two callers updating the same
        budget at once can lose one of the writes.
        """
        if amount < 0:
            logger.error("refusing negative spent %s for %s/%s", amount, category, month)
            return Result.failure(ErrorKind.RULE_VIOLATION, "spent must be non-negative")

        found = self.month_result(month)
        if not found.ok:
            return found
        budget = next((b for b in found.value if b.category == category), None)
        if budget is None:
            return Result.failure(ErrorKind.NOT_FOUND, f"no budget for {category} in {month}")
        return self.update_result(budget.id, BudgetUpdate(spent=amount))

    def update_spent(self, category: str, month: str, amount: float) -> Budget | None:
        return self.spent_result(category, month, amount).get_or_else(None)

    def get_budget_summary(self, month: str) -> BudgetSummary:
        return budget_summary(self.get_by_month(month))
