"""Task routes: list by date, create, partial update, delete."""
from datetime import date

from fastapi import APIRouter, Query, status

from app.core.errors import NotFoundError
from app.routers.deps import CurrentUser, DbSession
from app.schemas.task import TaskCreateSchema, TaskOutSchema, TaskPatchSchema
from app.services import tasks as task_service

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("", response_model=list[TaskOutSchema])
async def list_tasks(
    db: DbSession,
    user: CurrentUser,
    task_date: date | None = Query(default=None, alias="date"),
):
    """Tasks for one day (default today), newest first."""
    return await task_service.list_tasks(db, user.id, task_date or date.today())


@router.post("", response_model=TaskOutSchema, status_code=status.HTTP_201_CREATED)
async def create_task(body: TaskCreateSchema, db: DbSession, user: CurrentUser):
    return await task_service.create_task(db, user.id, body)


@router.put("/{task_id}", response_model=TaskOutSchema)
async def update_task(task_id: int, body: TaskPatchSchema, db: DbSession, user: CurrentUser):
    """Change only the fields present in the body."""
    task = await task_service.update_task(db, user.id, task_id, body)
    if task is None:
        raise NotFoundError("Task")
    return task


@router.delete("/{task_id}")
async def delete_task(task_id: int, db: DbSession, user: CurrentUser):
    if not await task_service.delete_task(db, user.id, task_id):
        raise NotFoundError("Task")
    return {"message": "Task deleted successfully"}
