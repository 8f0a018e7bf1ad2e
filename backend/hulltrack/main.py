"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import IntegrityError

from hulltrack.api.v1.router import api_v1_router
from hulltrack.core.config import settings
from hulltrack.core.database import close_db, init_db, session_scope
from hulltrack.core.storage import PUBLIC_MOUNT_PATH, get_order_bucket
from hulltrack.db.seed import seed_if_empty

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application startup and shutdown lifecycle."""
    logger.info("Starting %s ...", settings.PROJECT_NAME)

    # Startup
    await init_db()
    logger.info("Database initialized")

    if settings.SEED_DEMO_DATA:
        async with session_scope() as session:
            result = await seed_if_empty(session)
            if result:
                await session.commit()
                logger.info("Demo data seeded: %s", result)
            else:
                logger.info("Database already has data, skipping seed")

    bucket = get_order_bucket()
    bucket.ensure()
    logger.info("Order bucket ready at %s", bucket.path)

    yield

    # Shutdown
    await close_db()
    logger.info("Database disconnected")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", settings.API_KEY_HEADER, "Accept"],
)


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Report constraint violations (duplicates, rows still referenced) as 409."""
    logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(status_code=409, content={"detail": str(exc.orig)})


# Register API v1 router
app.include_router(api_v1_router, prefix="/api/v1")

# Stored PDFs are served publicly; the lifespan creates the directory
app.mount(
    PUBLIC_MOUNT_PATH,
    StaticFiles(directory=settings.STORAGE_ROOT, check_dir=False),
    name="files",
)
