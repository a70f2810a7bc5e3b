"""Gemini text generation and the prompt templates for each AI endpoint."""
import json
import logging
from typing import Any, Protocol

from google import genai

from app.core.errors import UpstreamError

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    async def generate(self, api_key: str, prompt: str) -> str: ...


class GeminiTextGenerator:
    """Single-shot Gemini call with a per-request API key. No retries."""

    def __init__(self, model: str) -> None:
        self.model = model

    async def generate(self, api_key: str, prompt: str) -> str:
        client = genai.Client(api_key=api_key)
        try:
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
            )
        except Exception as exc:
            raise UpstreamError(f"Gemini request failed: {exc.__class__.__name__}") from exc

        text = ""
        if response.candidates:
            candidate = response.candidates[0]
            if candidate.content and candidate.content.parts:
                text = candidate.content.parts[0].text or ""
        if not text:
            raise UpstreamError("Gemini returned no text")
        return text


def _json(value: Any, indent: int | None = None) -> str:
    return json.dumps(value, indent=indent, default=str, ensure_ascii=False)


def onboarding_prompt(user_responses: Any) -> str:
    return f"""You are a helpful productivity coach. Based on the following user responses about their study goals, provide a concise summary and recommendations.

User Responses:
{_json(user_responses, indent=2)}

Please provide:
1. A brief summary of their goals
2. Recommended study focus areas
3. Suggested daily hours breakdown by topic

Format your response as JSON with keys: summary, focusAreas (array), suggestedSchedule (object)."""


def daily_suggestion_prompt(
    profile: dict[str, Any],
    tasks: list[dict[str, Any]],
    history: list[dict[str, Any]],
    streak: int,
) -> str:
    focus_areas = ", ".join(profile.get("focus_areas") or []) or "Not set"
    goals = profile.get("goals") or "Not set"
    target = profile.get("daily_hours_target")
    target_s = "Not set" if target is None else f"{target:g}"
    tasks_s = _json(tasks) if tasks else "No tasks planned"

    return f"""You are a productivity assistant helping a student stay on track with their learning goals.

User Profile:
- Focus Areas: {focus_areas}
- Goals: {goals}
- Daily Target: {target_s} hours

Today's Tasks: {tasks_s}

Recent History (last 7 days): {_json(history)}

Current Streak: {streak} days

Provide:
1. A motivational message (2-3 sentences)
2. What to prioritize today
3. One actionable tip for productivity

Keep it brief and encouraging!"""


def weekly_insight_prompt(stats: list[dict[str, Any]]) -> str:
    return f"""You are a productivity coach analyzing a student's weekly performance.

Weekly Statistics:
{_json(stats, indent=2)}

Provide a concise weekly insight including:
1. Overall performance assessment
2. Strongest area (most consistent)
3. Area needing improvement
4. One specific recommendation for next week

Keep it constructive and actionable!"""


def chat_prompt(message: str) -> str:
    return f"""You are a helpful productivity and study assistant. The user asks: "{message}"

Provide a concise, helpful response focused on productivity and learning."""
