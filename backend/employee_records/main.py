"""FastAPI application entry point.

Run with: uvicorn employee_records.main:app --reload
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from . import __version__, models
from .config import get_settings
from .database import engine
from .logging_config import get_logger, setup_logging
from .routers.employees import router as employees_router
from .routers.system import router as system_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and make sure the schema exists."""

    settings = get_settings()
    setup_logging(settings)
    logger.info("starting", strategy=settings.list_strategy)

    async with engine.begin() as conn:
        await conn.run_sync(models.Base.metadata.create_all)

    yield

    await engine.dispose()
    logger.info("stopped")


app = FastAPI(title="Employee Records", version=__version__, lifespan=lifespan)
app.include_router(employees_router)
app.include_router(system_router)
