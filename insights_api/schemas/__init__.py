from .insights import InsightStatus, WeeklyActivity, UserInsights

__all__ = [
    "InsightStatus",
    "WeeklyActivity",
    "UserInsights",
]
