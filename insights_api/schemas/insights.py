from pydantic import BaseModel, ConfigDict, NonNegativeInt
from pydantic.alias_generators import to_camel
from datetime import date
from enum import Enum
from typing import Optional, Tuple


class InsightStatus(str, Enum):
    """Coarse outcome of an insights lookup, carried in the response body."""
    SUCCESS = "success"
    ERROR = "error"


class WeeklyActivity(BaseModel):
    """Interaction tally for the week starting on `week_starting`."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    week_starting: date
    interaction_count: NonNegativeInt


class UserInsights(BaseModel):
    """Activity summary and weekly trend for a user."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    user_id: str
    status: InsightStatus
    total_interactions_last_year: Optional[int] = None
    average_interactions_per_week: Optional[int] = None
    successful_outcomes: Optional[int] = None
    activity_trend: Tuple[WeeklyActivity, ...] = ()
