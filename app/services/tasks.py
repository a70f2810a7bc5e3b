"""Task storage: per-user listing, creation, patching and deletion."""
import logging
from datetime import date

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func

from app.models.task import Task, TaskStatus
from app.schemas.task import TaskCreateSchema, TaskPatchSchema

logger = logging.getLogger(__name__)


async def list_tasks(db: AsyncSession, user_id: int, task_date: date) -> list[Task]:
    result = await db.execute(
        select(Task)
        .where(Task.user_id == user_id, Task.task_date == task_date)
        .order_by(Task.created_at.desc(), Task.id.desc())
    )
    return list(result.scalars().all())


async def get_task(db: AsyncSession, user_id: int, task_id: int) -> Task | None:
    result = await db.execute(
        select(Task)
        .where(Task.user_id == user_id, Task.id == task_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def create_task(db: AsyncSession, user_id: int, body: TaskCreateSchema) -> Task:
    task = Task(
        user_id=user_id,
        title=body.title,
        category=body.category,
        planned_hours=body.planned_hours,
        actual_hours=0,
        status=TaskStatus.PENDING.value,
        task_date=body.task_date,
    )
    db.add(task)
    await db.commit()
    await db.refresh(task)
    logger.info("Created task %s for user %s on %s", task.id, user_id, task.task_date)
    return task


async def update_task(
    db: AsyncSession,
    user_id: int,
    task_id: int,
    patch: TaskPatchSchema,
) -> Task | None:
    """Apply only the fields present in `patch`; always touch updated_at.

    Returns None when (user_id, task_id) matches no row, so another user's
    task is never modified.
    """
    changes = patch.changes()
    result = await db.execute(
        update(Task)
        .where(Task.user_id == user_id, Task.id == task_id)
        .values(**changes, updated_at=func.now())
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        await db.rollback()
        return None

    await db.commit()
    logger.info("Updated task %s fields=%s", task_id, sorted(changes))
    return await get_task(db, user_id, task_id)


async def delete_task(db: AsyncSession, user_id: int, task_id: int) -> bool:
    result = await db.execute(
        delete(Task)
        .where(Task.user_id == user_id, Task.id == task_id)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        await db.rollback()
        return False

    await db.commit()
    logger.info("Deleted task %s for user %s", task_id, user_id)
    return True
