# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the CheckInn web app.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload --port 3000
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from app.config import settings
from app.exceptions import (
    CheckInnException,
    checkinn_exception_handler,
    http_exception_handler,
    request_validation_exception_handler,
    unexpected_exception_handler,
)
from app.middleware import MethodOverrideMiddleware
from app.routers import health, hotels, pages, reviews
from lib.mongo_client import MongoClient

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: open the MongoDB connection and attach it to app.state
    - Shutdown: close it
    """
    logger.info(f"Starting CheckInn in {settings.ENVIRONMENT} mode")

    mongo = MongoClient(settings.MONGODB_URL, settings.MONGODB_DATABASE)
    await mongo.connect()
    app.state.mongo = mongo

    yield

    logger.info("Shutting down CheckInn")
    await mongo.close()


# Create FastAPI application
app = FastAPI(
    title="CheckInn",
    description="Browse hotels, add your own and leave reviews.",
    version="1.0.0",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
)


# =============================================================================
# Middleware
# =============================================================================

# Signed cookie session; carries the flash messages between requests
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SECRET_KEY,
    session_cookie="checkinn_session",
    max_age=settings.SESSION_TTL_SECONDS,
    same_site="lax",
    https_only=settings.is_production,
)

# Added last so it runs first: routing must see the overridden method
app.add_middleware(MethodOverrideMiddleware)


# =============================================================================
# Exception Handlers
# =============================================================================

app.add_exception_handler(CheckInnException, checkinn_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
app.add_exception_handler(Exception, unexpected_exception_handler)


# =============================================================================
# Routers
# =============================================================================

app.include_router(pages.router, tags=["Pages"])

app.include_router(
    hotels.router,
    prefix="/hotels",
    tags=["Hotels"]
)

app.include_router(
    reviews.router,
    prefix="/hotels",
    tags=["Reviews"]
)

app.include_router(health.router, tags=["Health"])
