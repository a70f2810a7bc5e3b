"""Auth routes: password login for the single seeded account."""
import logging

from fastapi import APIRouter
from sqlalchemy import select

from app.core.errors import BadRequestError, UnauthorizedError
from app.core.security import create_access_token, verify_password
from app.models.user import User
from app.routers.deps import AppSettings, DbSession
from app.schemas.auth import LoginOutSchema, LoginSchema

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=LoginOutSchema)
async def login(body: LoginSchema, db: DbSession, settings: AppSettings):
    """Check the password against the default account and issue a bearer token."""
    if not body.password:
        raise BadRequestError("Password is required")

    result = await db.execute(select(User).where(User.username == settings.default_username))
    user = result.scalar_one_or_none()
    if user is None or not verify_password(body.password, user.password_hash):
        logger.warning("Failed login attempt")
        raise UnauthorizedError("Invalid credentials")

    token = create_access_token(settings, user.id)
    return LoginOutSchema(token=token, user_id=user.id, username=user.username)
