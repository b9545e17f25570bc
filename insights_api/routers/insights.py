from fastapi import APIRouter

from ..schemas.insights import UserInsights
from ..services.insights import get_user_insights

router = APIRouter(prefix="/v1/analytics/user-activity", tags=["analytics"])


@router.get("/{user_id}/insights", response_model=UserInsights)
async def get_user_activity_insights(user_id: str):
    """Get simulated activity insights for a user.

    Unknown users still get a 200; the outcome is in the body's `status`.
    """
    return get_user_insights(user_id)
