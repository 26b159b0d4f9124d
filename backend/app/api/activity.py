from fastapi import APIRouter, Depends

from app.models.activity import InteractionRecordResponse, UnlockStatus
from app.services.activity import get_unlock_status, record_platform_interaction
from app.services.activity_store import ActivityStore, get_activity_store
from app.services.telemetry import instrument

router = APIRouter(prefix="/api/activity", tags=["activity"])


@router.post("/{user_id}/interactions", response_model=InteractionRecordResponse)
@instrument(route="/api/activity/interactions", version="v1")
def record_interaction(user_id: str, store: ActivityStore = Depends(get_activity_store)):
    """Record that the user opened the platform today. Never fails the page."""
    dates = record_platform_interaction(user_id, store)
    return InteractionRecordResponse(
        user_id=user_id,
        recorded=dates is not None,
        last_interaction_dates=dates or [],
    )


@router.get("/{user_id}/unlock-status", response_model=UnlockStatus)
@instrument(route="/api/activity/unlock-status", version="v1")
def unlock_status(user_id: str, store: ActivityStore = Depends(get_activity_store)):
    return get_unlock_status(user_id, store)
