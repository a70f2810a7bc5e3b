"""Pydantic schemas for the AI proxy endpoints."""
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _AIRequestSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    api_key: str | None = None


class OnboardingRequestSchema(_AIRequestSchema):
    user_responses: Any = None


class SuggestionRequestSchema(_AIRequestSchema):
    pass


class ChatRequestSchema(_AIRequestSchema):
    message: str | None = None
