"""Profile routes: read and upsert the onboarding profile."""
from fastapi import APIRouter

from app.routers.deps import CurrentUser, DbSession
from app.schemas.profile import ProfileOutSchema, ProfileUpdateSchema
from app.services import profile as profile_service

router = APIRouter(prefix="/api/profile", tags=["profile"])


@router.get("")
async def get_profile(db: DbSession, user: CurrentUser):
    profile = await profile_service.get_profile(db, user.id)
    if profile is None:
        return {"onboarding_completed": False}
    return ProfileOutSchema.model_validate(profile)


@router.put("", response_model=ProfileOutSchema)
async def update_profile(body: ProfileUpdateSchema, db: DbSession, user: CurrentUser):
    """Upsert; fields sent as null or left out keep their stored values."""
    return await profile_service.upsert_profile(db, user.id, body)
