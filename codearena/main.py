"""
Main FastAPI application entry point.
Coding challenge platform API.
"""

import logging
from contextlib import asynccontextmanager

import sqlalchemy as sa
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded

from codearena.api import api_router
from codearena.config import get_settings, validate_runtime_config
from codearena.database import engine, init_db
from codearena.logging_config import configure_logging
from codearena.middleware.error_handler import register_error_handlers
from codearena.middleware.rate_limiter import limiter, rate_limit_exceeded_handler
from codearena.middleware.request_logging import RequestLoggingMiddleware

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Validates configuration and verifies the database connection on startup.

    Note: Database schema is managed by Alembic migrations.
    Run 'alembic upgrade head' to apply migrations.
    """
    validate_runtime_config(settings)
    try:
        with engine.connect() as conn:
            conn.execute(sa.text("SELECT 1"))
        init_db()
        logger.info("Database connection verified and tables initialized")
    except sa.exc.SQLAlchemyError:
        logger.exception("Database initialization failed. Check DATABASE_URL and credentials.")
    yield


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="""
    Backend for a coding challenge platform.

    Features:
    - Developer, recruiter and admin accounts
    - Coding problems managed by admins
    - Code submissions judged by Judge0
    - Profile statistics from submission history

    ## Authentication
    Protected endpoints require a Bearer token obtained from `/api/v1/auth/login`.
    """,
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/api/v1/doc",
)

cors_origins = [settings.frontend_url]
if settings.debug:
    cors_origins.extend([
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:3000",
    ])
cors_origins = list(set(origin for origin in cors_origins if origin))

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Configure rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

register_error_handlers(app)

app.add_middleware(RequestLoggingMiddleware)

# Include API routes
app.include_router(api_router)


@app.get("/")
async def root():
    """Root endpoint - basic health check."""
    return {
        "name": settings.app_name,
        "version": "1.0.0",
        "status": "healthy",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for load balancers."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import os
    import uvicorn
    port = int(os.getenv("PORT", "8000"))
    uvicorn.run(
        "codearena.main:app",
        host="0.0.0.0",
        port=port,
        reload=settings.debug,
    )
