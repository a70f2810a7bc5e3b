"""Provision the default account on startup."""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings
from app.core.security import hash_password
from app.models.user import User

logger = logging.getLogger(__name__)


async def seed_default_user(db: AsyncSession, settings: Settings) -> User:
    """Create the default user if missing. An existing row is left as is."""
    result = await db.execute(select(User).where(User.username == settings.default_username))
    user = result.scalar_one_or_none()
    if user is not None:
        return user

    user = User(
        username=settings.default_username,
        password_hash=hash_password(settings.default_password),
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    logger.info("Seeded default user %r (id=%s)", user.username, user.id)
    return user
