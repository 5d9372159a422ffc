"""Registration Form - FastAPI app entry point."""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import APP_DIR, Settings, get_settings
from app.db.base import Base
from app.db.session import create_engine_for, create_session_factory
from app.routers import registration, web

logger = logging.getLogger(__name__)


def check_store_credentials(settings: Settings) -> None:
    """Exit the process when database credentials are missing."""
    if not settings.has_store_credentials:
        logger.error("Database username or password not set in environment variables")
        raise SystemExit(1)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    check_store_credentials(settings)

    engine = create_engine_for(settings)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except (SQLAlchemyError, OSError):
        logger.exception("Failed to connect to the database")
        await engine.dispose()
        raise SystemExit(1)
    logger.info("Connected to the database")

    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    yield

    await engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        description="User registration form",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Mount static files at /static
    app.mount("/static", StaticFiles(directory=str(APP_DIR / "static")), name="static")

    app.include_router(web.router)
    app.include_router(registration.router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the default app on the configured port."""
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)
