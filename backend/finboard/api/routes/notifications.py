from fastapi import APIRouter, Depends

from finboard.api.deps import notifier
from finboard.services.notify import BufferedNotifier

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("")
def drain_notifications(n: BufferedNotifier = Depends(notifier)):
    return {"messages": n.drain()}
