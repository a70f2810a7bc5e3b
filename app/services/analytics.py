"""Aggregate queries over tasks and streak rollups."""
import calendar
import logging
import math
from datetime import date

from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import upsert_insert
from app.models.streak import Streak
from app.models.task import Task, TaskStatus
from app.schemas.analytics import (
    CategoryStatSchema,
    DailyAnalyticsSchema,
    DailyCategoryHoursSchema,
    DayHoursSchema,
    MonthlyAnalyticsSchema,
    StreakEntrySchema,
    StreakOutSchema,
    WeeklyAnalyticsSchema,
)
from app.services.streaks import compute_streaks

logger = logging.getLogger(__name__)


def _status_count(status: TaskStatus):
    return func.count(case((Task.status == status.value, 1)))


def month_bounds(month: str) -> tuple[date, date]:
    """First and last day of a `YYYY-MM` month. Raises ValueError if malformed."""
    year_s, sep, month_s = month.partition("-")
    if not sep or len(year_s) != 4 or len(month_s) != 2:
        raise ValueError(f"invalid month: {month!r}")
    year, mon = int(year_s), int(month_s)
    if not 1 <= mon <= 12:
        raise ValueError(f"invalid month: {month!r}")
    last_day = calendar.monthrange(year, mon)[1]
    return date(year, mon, 1), date(year, mon, last_day)


async def daily_summary(db: AsyncSession, user_id: int, target: date) -> DailyAnalyticsSchema:
    result = await db.execute(
        select(
            func.count(Task.id),
            func.sum(Task.planned_hours),
            func.sum(Task.actual_hours),
            _status_count(TaskStatus.COMPLETED),
            _status_count(TaskStatus.PARTIAL),
            _status_count(TaskStatus.SKIPPED),
        ).where(Task.user_id == user_id, Task.task_date == target)
    )
    total, planned, actual, completed, partial, skipped = result.one()
    planned = float(planned or 0)
    actual = float(actual or 0)
    # half-up, so 62.5% reports as 63
    pct = math.floor(actual / planned * 100 + 0.5) if planned > 0 else 0

    return DailyAnalyticsSchema(
        date=target,
        total_tasks=total or 0,
        total_planned_hours=planned,
        total_actual_hours=actual,
        completed_tasks=completed or 0,
        partial_tasks=partial or 0,
        skipped_tasks=skipped or 0,
        completion_percentage=pct,
    )


async def _category_stats(db: AsyncSession, user_id: int, *conditions) -> list[CategoryStatSchema]:
    total_hours = func.coalesce(func.sum(Task.actual_hours), 0)
    result = await db.execute(
        select(Task.category, total_hours.label("total_hours"), func.count(Task.id))
        .where(Task.user_id == user_id, *conditions)
        .group_by(Task.category)
        .order_by(total_hours.desc(), Task.category)
    )
    return [
        CategoryStatSchema(category=category, total_hours=float(hours or 0), task_count=count)
        for category, hours, count in result.all()
    ]


async def weekly_summary(db: AsyncSession, user_id: int, start: date) -> WeeklyAnalyticsSchema:
    result = await db.execute(
        select(Task.task_date, Task.category, func.coalesce(func.sum(Task.actual_hours), 0))
        .where(Task.user_id == user_id, Task.task_date >= start)
        .group_by(Task.task_date, Task.category)
        .order_by(Task.task_date.desc(), Task.category)
    )
    breakdown = [
        DailyCategoryHoursSchema(task_date=d, category=category, hours=float(hours or 0))
        for d, category, hours in result.all()
    ]
    return WeeklyAnalyticsSchema(
        daily_breakdown=breakdown,
        category_stats=await _category_stats(db, user_id, Task.task_date >= start),
    )


async def monthly_summary(db: AsyncSession, user_id: int, month: str) -> MonthlyAnalyticsSchema:
    first, last = month_bounds(month)
    in_month = (Task.task_date >= first, Task.task_date <= last)

    result = await db.execute(
        select(Task.task_date, func.coalesce(func.sum(Task.actual_hours), 0))
        .where(Task.user_id == user_id, *in_month)
        .group_by(Task.task_date)
        .order_by(Task.task_date)
    )
    breakdown = [DayHoursSchema(date=d, hours=float(hours or 0)) for d, hours in result.all()]
    return MonthlyAnalyticsSchema(
        month=month,
        daily_breakdown=breakdown,
        category_stats=await _category_stats(db, user_id, *in_month),
    )


async def recent_streaks(db: AsyncSession, user_id: int, limit: int) -> list[Streak]:
    result = await db.execute(
        select(Streak)
        .where(Streak.user_id == user_id)
        .order_by(Streak.streak_date.desc())
        .limit(limit)
    )
    return list(result.scalars().all())


async def streak_summary(db: AsyncSession, user_id: int, today: date, window: int) -> StreakOutSchema:
    rows = await recent_streaks(db, user_id, window)
    summary = compute_streaks([r.streak_date for r in rows], today)
    return StreakOutSchema(
        current_streak=summary.current_streak,
        longest_streak=summary.longest_streak,
        streak_history=[StreakEntrySchema.model_validate(r) for r in rows],
    )


async def record_streak(
    db: AsyncSession,
    user_id: int,
    day: date,
    hours: float,
    task_count: int,
) -> Streak:
    """Insert or overwrite the rollup row for (user_id, day) in one statement."""
    stmt = upsert_insert(db, Streak).values(
        user_id=user_id,
        streak_date=day,
        hours_completed=hours,
        tasks_completed=task_count,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=["user_id", "streak_date"],
        set_={
            "hours_completed": stmt.excluded.hours_completed,
            "tasks_completed": stmt.excluded.tasks_completed,
        },
    )
    await db.execute(stmt)
    await db.commit()

    result = await db.execute(
        select(Streak)
        .where(Streak.user_id == user_id, Streak.streak_date == day)
        .execution_options(populate_existing=True)
    )
    logger.info("Recorded streak for user %s on %s: %.2fh / %d tasks", user_id, day, hours, task_count)
    return result.scalar_one()


async def recent_daily_totals(db: AsyncSession, user_id: int, since: date) -> list[dict]:
    """Per-day hours and task counts since `since`, newest first."""
    result = await db.execute(
        select(Task.task_date, func.coalesce(func.sum(Task.actual_hours), 0), func.count(Task.id))
        .where(Task.user_id == user_id, Task.task_date >= since)
        .group_by(Task.task_date)
        .order_by(Task.task_date.desc())
    )
    return [
        {"task_date": d.isoformat(), "hours": float(hours or 0), "tasks": count}
        for d, hours, count in result.all()
    ]


async def category_performance(db: AsyncSession, user_id: int, since: date) -> list[dict]:
    """Planned vs. actual hours and completion counts per category since `since`."""
    result = await db.execute(
        select(
            Task.category,
            func.coalesce(func.sum(Task.planned_hours), 0),
            func.coalesce(func.sum(Task.actual_hours), 0),
            func.count(Task.id),
            _status_count(TaskStatus.COMPLETED),
        )
        .where(Task.user_id == user_id, Task.task_date >= since)
        .group_by(Task.category)
        .order_by(Task.category)
    )
    return [
        {
            "category": category,
            "planned": float(planned or 0),
            "actual": float(actual or 0),
            "task_count": count,
            "completed": completed,
        }
        for category, planned, actual, count, completed in result.all()
    ]
