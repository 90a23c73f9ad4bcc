"""
FastAPI Application Entry Point
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core import database
from app.core.logging import logger, setup_logging
from app.api.error_handlers import register_error_handlers
from app.api.v1 import jobs


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    # Startup
    setup_logging()
    logger.info(f"Starting {settings.APP_NAME} backend ({settings.ENVIRONMENT})")

    db = database.init_db(
        settings.DATABASE_URL,
        pool_size=settings.DATABASE_POOL_SIZE,
        max_overflow=settings.DATABASE_MAX_OVERFLOW,
    )
    if settings.AUTO_CREATE_TABLES:
        await db.create_tables()

    yield

    # Shutdown
    await db.dispose()
    logger.info(f"Shutting down {settings.APP_NAME} backend")


# Create FastAPI app
app = FastAPI(
    title="Jobly API",
    description="Jobs posted by companies, with admin-managed listings",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(jobs.router, prefix="/api/v1/jobs", tags=["Jobs"])


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint"""
    return {
        "message": f"Welcome to {settings.APP_NAME} API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    connected = database.db_manager is not None and await database.db_manager.health_check()
    return {
        "status": "healthy" if connected else "degraded",
        "environment": settings.ENVIRONMENT,
        "database": "connected" if connected else "unavailable",
    }
