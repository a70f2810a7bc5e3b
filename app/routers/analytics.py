"""Analytics routes: daily/weekly/monthly aggregates and streaks."""
from datetime import date, timedelta

from fastapi import APIRouter, Query

from app.core.errors import BadRequestError
from app.routers.deps import AppSettings, CurrentUser, DbSession
from app.schemas.analytics import (
    DailyAnalyticsSchema,
    MonthlyAnalyticsSchema,
    StreakOutSchema,
    StreakUpdateSchema,
    WeeklyAnalyticsSchema,
)
from app.services import analytics as analytics_service

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("/daily", response_model=DailyAnalyticsSchema)
async def daily(
    db: DbSession,
    user: CurrentUser,
    target: date | None = Query(default=None, alias="date"),
):
    return await analytics_service.daily_summary(db, user.id, target or date.today())


@router.get("/weekly", response_model=WeeklyAnalyticsSchema)
async def weekly(
    db: DbSession,
    user: CurrentUser,
    start_date: date | None = Query(default=None, alias="startDate"),
):
    """Per-day/category hours since startDate (default: a week ago)."""
    start = start_date or date.today() - timedelta(days=7)
    return await analytics_service.weekly_summary(db, user.id, start)


@router.get("/monthly", response_model=MonthlyAnalyticsSchema)
async def monthly(
    db: DbSession,
    user: CurrentUser,
    month: str | None = Query(default=None),
):
    month = month or date.today().strftime("%Y-%m")
    try:
        analytics_service.month_bounds(month)
    except ValueError:
        raise BadRequestError("month must be YYYY-MM")
    return await analytics_service.monthly_summary(db, user.id, month)


@router.get("/streak", response_model=StreakOutSchema)
async def streak(db: DbSession, user: CurrentUser, settings: AppSettings):
    return await analytics_service.streak_summary(
        db, user.id, today=date.today(), window=settings.streak_window
    )


@router.post("/streak/update")
async def update_streak(body: StreakUpdateSchema, db: DbSession, user: CurrentUser):
    await analytics_service.record_streak(db, user.id, body.date, body.hours, body.task_count)
    return {"message": "Streak updated successfully"}
