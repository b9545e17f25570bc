from .insights import get_user_insights, is_unknown_user, UNKNOWN_USER_ID

__all__ = [
    "get_user_insights",
    "is_unknown_user",
    "UNKNOWN_USER_ID",
]
