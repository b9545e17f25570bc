"""
Insights Service - simulated user activity insights.

Returns a fixed summary and four-week trend for every user except the
reserved "unknownuser" id, which gets an empty error record instead.
No data source is consulted; values are rebuilt on every call.
"""

import logging
from datetime import date
from typing import Tuple

from ..schemas.insights import InsightStatus, UserInsights, WeeklyActivity

logger = logging.getLogger(__name__)

UNKNOWN_USER_ID = "unknownuser"

TOTAL_INTERACTIONS_LAST_YEAR = 1540
AVERAGE_INTERACTIONS_PER_WEEK = 29
SUCCESSFUL_OUTCOMES = 120  # closed issues / merged PRs

WEEKLY_TREND = (
    (date(2025, 12, 1), 35),
    (date(2025, 12, 8), 42),
    (date(2025, 12, 15), 58),
    (date(2025, 12, 22), 65),
)


def is_unknown_user(user_id: str) -> bool:
    """Case-insensitive match against the reserved unknown user id."""
    return user_id.casefold() == UNKNOWN_USER_ID


def build_activity_trend() -> Tuple[WeeklyActivity, ...]:
    """Weekly activity, oldest week first."""
    return tuple(
        WeeklyActivity(week_starting=week, interaction_count=count)
        for week, count in WEEKLY_TREND
    )


def get_user_insights(user_id: str) -> UserInsights:
    """Get activity insights for a user.

    The id is echoed back untouched. Anything other than a case variant
    of "unknownuser" gets the success payload, including empty or
    whitespace-only ids.
    """
    if is_unknown_user(user_id):
        logger.debug(
            f"No insights for reserved user id {user_id!r}",
            extra={"user_id": user_id},
        )
        return UserInsights(
            user_id=user_id,
            status=InsightStatus.ERROR,
            total_interactions_last_year=None,
            average_interactions_per_week=None,
            successful_outcomes=None,
            activity_trend=(),
        )

    logger.debug(
        f"Returning simulated insights for {user_id!r}",
        extra={"user_id": user_id},
    )
    return UserInsights(
        user_id=user_id,
        status=InsightStatus.SUCCESS,
        total_interactions_last_year=TOTAL_INTERACTIONS_LAST_YEAR,
        average_interactions_per_week=AVERAGE_INTERACTIONS_PER_WEEK,
        successful_outcomes=SUCCESSFUL_OUTCOMES,
        activity_trend=build_activity_trend(),
    )
