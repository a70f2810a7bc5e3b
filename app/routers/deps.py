"""Shared request dependencies: settings, bearer auth, AI generator."""
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings
from app.core.errors import ForbiddenError, UnauthorizedError
from app.core.security import get_user_id_from_token
from app.db.session import get_db
from app.models.user import User
from app.services.ai import GeminiTextGenerator, TextGenerator

# auto_error=False so a missing header is our 401, not HTTPBearer's 403
bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> User:
    if credentials is None or not credentials.credentials:
        # a token under another scheme is still a token we cannot verify
        _, _, token = request.headers.get("Authorization", "").partition(" ")
        if token.strip():
            raise ForbiddenError()
        raise UnauthorizedError()

    user_id = get_user_id_from_token(settings, credentials.credentials)
    if user_id is None:
        raise ForbiddenError()

    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if user is None:
        raise ForbiddenError()
    return user


def get_text_generator(settings: Annotated[Settings, Depends(get_app_settings)]) -> TextGenerator:
    return GeminiTextGenerator(model=settings.gemini_model)


DbSession = Annotated[AsyncSession, Depends(get_db)]
CurrentUser = Annotated[User, Depends(get_current_user)]
AppSettings = Annotated[Settings, Depends(get_app_settings)]
