from __future__ import annotations

import logging

from pydantic import ValidationError

from finboard.schemas.savings_goal import SavingsGoal, SavingsGoalCreate, SavingsGoalUpdate
from finboard.schemas.summary import GoalsSummary
from finboard.services.aggregations import goals_summary
from finboard.services.mapper import RecordMapper
from finboard.services.result import ErrorKind
from finboard.store.base import StoreError
from finboard.store.query import ASC, order_by

logger = logging.getLogger(__name__)


class GoalNotFoundError(LookupError):
    def __init__(self, goal_id):
        super().__init__(f"Savings goal {goal_id} not found")
        self.goal_id = goal_id


class InvalidContributionError(ValueError):
    pass


class SavingsGoalService(RecordMapper[SavingsGoal]):
    collection = "savings_goal_c"
    label = "savings goals"
    fields = ("Name", "name_c", "target_amount_c", "current_amount_c", "deadline_c", "priority_c", "CreatedOn")
    default_order = [order_by("priority_c", ASC)]

    def to_entity(self, raw: dict) -> SavingsGoal:
        return SavingsGoal(
            id=raw.get("Id"),
            name=raw.get("name_c") or raw.get("Name"),
            target_amount=raw.get("target_amount_c") or 0,
            current_amount=raw.get("current_amount_c") or 0,
            deadline=raw.get("deadline_c"),
            priority=raw.get("priority_c"),
            created_at=raw.get("CreatedOn"),
        )

    def to_create_record(self, data: SavingsGoalCreate) -> dict:
        return {
            "Name": data.name,
            "name_c": data.name,
            "target_amount_c": data.target_amount,
            "current_amount_c": 0,
            "deadline_c": data.deadline.isoformat() if data.deadline is not None else None,
            "priority_c": data.priority,
        }

    def to_update_record(self, data: SavingsGoalUpdate) -> dict:
        patch = data.model_dump(exclude_unset=True)
        out: dict = {}
        if "name" in patch:
            out["Name"] = patch["name"]
            out["name_c"] = patch["name"]
        if "target_amount" in patch:
            out["target_amount_c"] = patch["target_amount"]
        if "current_amount" in patch:
            out["current_amount_c"] = patch["current_amount"]
        if "deadline" in patch:
            out["deadline_c"] = patch["deadline"].isoformat() if patch["deadline"] is not None else None
        if "priority" in patch:
            out["priority_c"] = patch["priority"]
        return out

    def add_contribution(self, goal_id, amount: float) -> SavingsGoal | None:
        """Add ``amount`` to the goal's current amount.

        Not atomic: the goal is read, incremented locally and written back, so
        concurrent contributions to one goal can overwrite each other.
        Raises ``GoalNotFoundError`` / ``StoreError`` when the goal can't be read
        and ``InvalidContributionError`` when the new amount would go below zero.
        """
        found = self.get_result(goal_id)
        if not found.ok:
            logger.error("Error adding contribution to goal %s: %s", goal_id, found.error.message)
            if found.error.kind is ErrorKind.NOT_FOUND:
                raise GoalNotFoundError(goal_id)
            raise StoreError(found.error.message)

        new_amount = found.value.current_amount + amount
        try:
            patch = SavingsGoalUpdate(current_amount=new_amount)
        except ValidationError as e:
            logger.error("Error adding contribution to goal %s: current amount would be %s", goal_id, new_amount)
            raise InvalidContributionError(f"contribution of {amount} leaves goal {goal_id} at {new_amount}") from e
        return self.update(goal_id, patch)

    def get_goals_summary(self) -> GoalsSummary:
        return goals_summary(self.get_all())
