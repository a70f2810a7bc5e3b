"""Pydantic schemas for the onboarding profile."""
from datetime import datetime

from pydantic import BaseModel, Field


class ProfileUpdateSchema(BaseModel):
    """Every field optional; null/omitted keeps the stored value."""

    studying_topics: list[str] | None = None
    goals: str | None = None
    focus_areas: list[str] | None = None
    daily_hours_target: float | None = Field(default=None, ge=0, le=24)
    onboarding_completed: bool | None = None


class ProfileOutSchema(BaseModel):
    id: int
    user_id: int
    studying_topics: list[str] | None = None
    goals: str | None = None
    focus_areas: list[str] | None = None
    daily_hours_target: float | None = None
    onboarding_completed: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
