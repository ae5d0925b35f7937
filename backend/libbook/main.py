"""
LibBook Seat Reservation API - Main Application Entry Point

Backend for the library seat map:
- Users, seats and time-slot bookings over a relational record store
- Double-booking prevention per (seat, date, start time)
- Whole-layout seat reconciliation for the floor-plan editor
- Structured logging with request correlation and Prometheus metrics
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from libbook.core.config import get_settings
from libbook.core.exceptions import register_exception_handlers
from libbook.core.logging import setup_logging, get_logger
from libbook.core.metrics import metrics_endpoint
from libbook.api.router import api_router
from libbook.api.middleware import RequestLoggingMiddleware
from libbook.db.session import AsyncSessionLocal, dispose_engine, engine, init_db
from libbook.services.seed_service import seed_data

settings = get_settings()


async def prepare_store() -> None:
    """
    Create tables and seed fixtures. A failure here is logged and the
    server keeps running; store-backed requests then fail one by one
    until the database is reachable.
    """
    logger = get_logger(__name__)
    try:
        if settings.CREATE_TABLES_ON_STARTUP:
            await init_db()
        if settings.SEED_ON_STARTUP:
            async with AsyncSessionLocal() as session:
                seeded = await seed_data(session)
            logger.info("seeding_complete", **seeded)
    except Exception as e:
        logger.error("seeding_failed", error=str(e), error_type=type(e).__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: startup and shutdown hooks."""
    setup_logging()
    logger = get_logger(__name__)

    logger.info(
        "application_starting",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        port=settings.PORT,
    )

    await prepare_store()

    yield

    await dispose_engine()
    logger.info("application_shutdown")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Library seat reservation API with double-booking prevention",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Custom middleware
app.add_middleware(RequestLoggingMiddleware)

register_exception_handlers(app)

# Routes
app.include_router(api_router)


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint for Docker and load balancers."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        database = "connected"
    except Exception as e:
        database = f"unavailable: {e}"
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "database": database,
    }


@app.get("/metrics", tags=["Health"], include_in_schema=False)
def metrics():
    return metrics_endpoint()


@app.get("/", tags=["Root"])
async def root():
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/docs",
    }


def run() -> None:
    import uvicorn

    uvicorn.run("libbook.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
