from app.schemas.analytics import (
    DailyAnalyticsSchema,
    MonthlyAnalyticsSchema,
    StreakOutSchema,
    StreakUpdateSchema,
    WeeklyAnalyticsSchema,
)
from app.schemas.auth import LoginOutSchema, LoginSchema
from app.schemas.profile import ProfileOutSchema, ProfileUpdateSchema
from app.schemas.task import TaskCreateSchema, TaskOutSchema, TaskPatchSchema

__all__ = [
    "DailyAnalyticsSchema",
    "LoginOutSchema",
    "LoginSchema",
    "MonthlyAnalyticsSchema",
    "ProfileOutSchema",
    "ProfileUpdateSchema",
    "StreakOutSchema",
    "StreakUpdateSchema",
    "TaskCreateSchema",
    "TaskOutSchema",
    "TaskPatchSchema",
    "WeeklyAnalyticsSchema",
]
