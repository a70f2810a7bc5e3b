"""Personal Tracker - FastAPI app entry point."""
import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Settings, get_settings
from app.core.errors import register_exception_handlers
from app.core.logging import setup_logging
from app.db.base import Base
from app.db.session import create_engine, create_sessionmaker
from app.routers import ai, analytics, auth, profile, tasks
from app.services.seeding import seed_default_user

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = app.state.engine

    logger.info("Creating database tables")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with app.state.sessionmaker() as db:
        await seed_default_user(db, app.state.settings)

    yield

    await engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app with its own engine and session factory on app.state."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Personal productivity tracker API",
        lifespan=lifespan,
    )

    engine = create_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.sessionmaker = create_sessionmaker(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "%s %s - %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - start) * 1000,
        )
        return response

    register_exception_handlers(app)

    app.include_router(auth.router)
    app.include_router(tasks.router)
    app.include_router(analytics.router)
    app.include_router(profile.router)
    app.include_router(ai.router)

    @app.get("/health")
    async def health():
        return {"status": "ok", "message": "Personal Tracker API is running"}

    return app


app = create_app()
