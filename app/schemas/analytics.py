"""Pydantic schemas for analytics responses and the streak upsert body."""
from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DailyAnalyticsSchema(_CamelSchema):
    date: date
    total_tasks: int
    total_planned_hours: float
    total_actual_hours: float
    completed_tasks: int
    partial_tasks: int
    skipped_tasks: int
    completion_percentage: int


class DailyCategoryHoursSchema(BaseModel):
    task_date: date
    category: str
    hours: float


class DayHoursSchema(BaseModel):
    date: date
    hours: float


class CategoryStatSchema(BaseModel):
    category: str
    total_hours: float
    task_count: int


class WeeklyAnalyticsSchema(_CamelSchema):
    daily_breakdown: list[DailyCategoryHoursSchema]
    category_stats: list[CategoryStatSchema]


class MonthlyAnalyticsSchema(_CamelSchema):
    month: str
    daily_breakdown: list[DayHoursSchema]
    category_stats: list[CategoryStatSchema]


class StreakEntrySchema(BaseModel):
    streak_date: date
    hours_completed: float
    tasks_completed: int

    class Config:
        from_attributes = True


class StreakOutSchema(_CamelSchema):
    current_streak: int
    longest_streak: int
    streak_history: list[StreakEntrySchema]


class StreakUpdateSchema(_CamelSchema):
    date: date
    hours: float = Field(ge=0, lt=1000)
    task_count: int = Field(ge=0)
