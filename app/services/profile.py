"""Profile upsert with coalesce-on-null semantics."""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func

from app.db.session import upsert_insert
from app.models.profile import UserProfile
from app.schemas.profile import ProfileUpdateSchema

logger = logging.getLogger(__name__)


async def get_profile(db: AsyncSession, user_id: int) -> UserProfile | None:
    result = await db.execute(
        select(UserProfile)
        .where(UserProfile.user_id == user_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def upsert_profile(db: AsyncSession, user_id: int, body: ProfileUpdateSchema) -> UserProfile:
    """Create the profile on first write; afterwards overwrite only non-null fields.

    One INSERT ... ON CONFLICT (user_id) DO UPDATE, so concurrent first writes
    for the same user cannot both insert.
    """
    values = body.model_dump(exclude_none=True)

    stmt = upsert_insert(db, UserProfile).values(
        user_id=user_id,
        **{"onboarding_completed": False, **values},
    )
    # null fields are left out of SET, which keeps the stored value
    updates = {field: stmt.excluded[field] for field in values}
    updates["updated_at"] = func.now()
    stmt = stmt.on_conflict_do_update(index_elements=["user_id"], set_=updates)

    await db.execute(stmt)
    await db.commit()
    logger.info("Upserted profile for user %s (%s)", user_id, ", ".join(sorted(values)) or "no fields")
    return await get_profile(db, user_id)
