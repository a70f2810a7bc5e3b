"""AI routes: build a prompt from the user's data and forward it to Gemini."""
from datetime import date, timedelta
from typing import Annotated

from fastapi import APIRouter, Depends

from app.core.config import Settings
from app.core.errors import BadRequestError
from app.routers.deps import AppSettings, CurrentUser, DbSession, get_text_generator
from app.schemas.ai import ChatRequestSchema, OnboardingRequestSchema, SuggestionRequestSchema
from app.schemas.task import TaskOutSchema
from app.services import ai as ai_service
from app.services import analytics as analytics_service
from app.services import profile as profile_service
from app.services import tasks as task_service
from app.services.ai import TextGenerator
from app.services.streaks import compute_streaks

router = APIRouter(prefix="/api/ai", tags=["ai"])

Generator = Annotated[TextGenerator, Depends(get_text_generator)]


def _resolve_api_key(api_key: str | None, settings: Settings) -> str:
    """Caller-supplied key wins; the server key is only a fallback."""
    key = api_key or settings.gemini_api_key
    if not key:
        raise BadRequestError("AI API key is required")
    return key


@router.post("/onboarding")
async def onboarding(
    body: OnboardingRequestSchema,
    user: CurrentUser,
    settings: AppSettings,
    generator: Generator,
):
    api_key = _resolve_api_key(body.api_key, settings)
    text = await generator.generate(api_key, ai_service.onboarding_prompt(body.user_responses))
    return {"aiResponse": text}


@router.post("/daily-suggestion")
async def daily_suggestion(
    body: SuggestionRequestSchema,
    db: DbSession,
    user: CurrentUser,
    settings: AppSettings,
    generator: Generator,
):
    """Suggestion based on profile, today's tasks, last week and current streak."""
    api_key = _resolve_api_key(body.api_key, settings)
    today = date.today()

    profile = await profile_service.get_profile(db, user.id)
    profile_data = {}
    if profile is not None:
        profile_data = {
            "focus_areas": profile.focus_areas,
            "goals": profile.goals,
            "daily_hours_target": profile.daily_hours_target,
        }

    tasks = [
        TaskOutSchema.model_validate(t).model_dump(mode="json", exclude={"created_at", "updated_at"})
        for t in await task_service.list_tasks(db, user.id, today)
    ]
    history = await analytics_service.recent_daily_totals(db, user.id, today - timedelta(days=7))
    streak_rows = await analytics_service.recent_streaks(db, user.id, settings.streak_window)
    streak = compute_streaks([r.streak_date for r in streak_rows], today).current_streak

    prompt = ai_service.daily_suggestion_prompt(profile_data, tasks, history, streak)
    text = await generator.generate(api_key, prompt)
    return {"suggestion": text}


@router.post("/weekly-insight")
async def weekly_insight(
    body: SuggestionRequestSchema,
    db: DbSession,
    user: CurrentUser,
    settings: AppSettings,
    generator: Generator,
):
    api_key = _resolve_api_key(body.api_key, settings)
    week_start = date.today() - timedelta(days=7)
    stats = await analytics_service.category_performance(db, user.id, week_start)
    text = await generator.generate(api_key, ai_service.weekly_insight_prompt(stats))
    return {"insight": text}


@router.post("/chat")
async def chat(
    body: ChatRequestSchema,
    user: CurrentUser,
    settings: AppSettings,
    generator: Generator,
):
    if not body.message:
        raise BadRequestError("API key and message are required")
    api_key = _resolve_api_key(body.api_key, settings)
    text = await generator.generate(api_key, ai_service.chat_prompt(body.message))
    return {"response": text}
