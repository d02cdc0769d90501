from contextlib import asynccontextmanager

from fastapi import FastAPI

from .database import Base, engine
from .models import *  # noqa: F401,F403
from .auth import router as auth_router
from .core.logging import configure_logging
from .core.settings import settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Validate configuration for the current runtime environment
    settings.validate_for_runtime()
    configure_logging(settings.LOG_LEVEL)
    Base.metadata.create_all(bind=engine)
    yield


def create_app() -> FastAPI:
    app = FastAPI(title="Credential Store API", version="1.0.0", lifespan=lifespan)
    app.include_router(auth_router)
    return app


# Module-level app for `uvicorn credstore.main:app`
app = create_app()
