"""Pydantic schemas for tasks, including the partial-update patch."""
from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator

from app.models.task import TaskStatus


class TaskCreateSchema(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    category: str = Field(min_length=1, max_length=100)
    planned_hours: float = Field(gt=0, lt=1000)
    task_date: date


class TaskPatchSchema(BaseModel):
    """Fields a client may change. Only the ones present in the body are applied."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    category: str | None = Field(default=None, min_length=1, max_length=100)
    planned_hours: float | None = Field(default=None, gt=0, lt=1000)
    actual_hours: float | None = Field(default=None, ge=0, lt=1000)
    status: TaskStatus | None = None
    task_date: date | None = None

    @field_validator("*")
    @classmethod
    def _reject_explicit_null(cls, v):
        # Validators only see values that were sent, so None here means an explicit null
        if v is None:
            raise ValueError("may not be null")
        return v

    def changes(self) -> dict:
        """Column -> value for every field the client actually sent."""
        data = self.model_dump(exclude_unset=True)
        if "status" in data:
            data["status"] = data["status"].value
        return data


class TaskOutSchema(BaseModel):
    id: int
    user_id: int
    title: str
    category: str
    planned_hours: float
    actual_hours: float
    status: str
    task_date: date
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
