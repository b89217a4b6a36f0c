from fastapi import APIRouter, Depends, HTTPException

from finboard.api.deps import savings_goals, unwrap
from finboard.schemas.savings_goal import Contribution, SavingsGoal, SavingsGoalCreate, SavingsGoalUpdate
from finboard.schemas.summary import GoalsSummary
from finboard.services.savings_goals import GoalNotFoundError, InvalidContributionError, SavingsGoalService
from finboard.store.base import StoreError

router = APIRouter(prefix="/goals", tags=["goals"])


def _require_goal(svc: SavingsGoalService, goal_id: int) -> SavingsGoal:
    return unwrap(svc.get_result(goal_id), "goal_not_found")


@router.get("", response_model=list[SavingsGoal])
def list_goals(svc: SavingsGoalService = Depends(savings_goals)):
    return unwrap(svc.fetch_result(order=svc.default_order), "goal_not_found")


@router.get("/summary", response_model=GoalsSummary)
def goals_summary(svc: SavingsGoalService = Depends(savings_goals)):
    return svc.get_goals_summary()


@router.get("/{goal_id}", response_model=SavingsGoal)
def get_goal(goal_id: int, svc: SavingsGoalService = Depends(savings_goals)):
    return _require_goal(svc, goal_id)


@router.post("", response_model=SavingsGoal)
def create_goal(body: SavingsGoalCreate, svc: SavingsGoalService = Depends(savings_goals)):
    return unwrap(svc.create_result(body), "goal_not_found")


@router.patch("/{goal_id}", response_model=SavingsGoal)
def update_goal(goal_id: int, body: SavingsGoalUpdate, svc: SavingsGoalService = Depends(savings_goals)):
    _require_goal(svc, goal_id)
    return unwrap(svc.update_result(goal_id, body), "goal_not_found")


@router.post("/{goal_id}/contributions", response_model=SavingsGoal)
def add_contribution(goal_id: int, body: Contribution, svc: SavingsGoalService = Depends(savings_goals)):
    try:
        out = svc.add_contribution(goal_id, body.amount)
    except GoalNotFoundError:
        raise HTTPException(status_code=404, detail="goal_not_found")
    except InvalidContributionError:
        raise HTTPException(status_code=422, detail="invalid_contribution")
    except StoreError:
        raise HTTPException(status_code=502, detail="store_unavailable")
    if out is None:
        raise HTTPException(status_code=502, detail="store_unavailable")
    return out


@router.delete("/{goal_id}")
def delete_goal(goal_id: int, svc: SavingsGoalService = Depends(savings_goals)):
    _require_goal(svc, goal_id)
    unwrap(svc.delete_result(goal_id), "goal_not_found")
    return {"ok": True}
