"""Branch Queue — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.adapters.persistence.database import engine
from app.config import settings
from app.infrastructure.api.routes_catalogue import router as catalogue_router
from app.infrastructure.api.routes_health import router as health_router
from app.infrastructure.api.routes_queue import router as queue_router
from app.infrastructure.api.routes_staff import router as staff_router
from app.infrastructure.api.routes_tickets import router as tickets_router

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    try:
        async with engine.begin():
            pass  # Connection pool warmed up
        logger.info("Database connection established")
    except Exception as e:
        logger.warning("Database not available on startup: %s", e)
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Branch Queue",
        description="Ticket queue for branch offices: staff matching and monitor board",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS for the monitor / kiosk frontends
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(queue_router, prefix="/api")
    app.include_router(catalogue_router, prefix="/api")
    app.include_router(tickets_router, prefix="/api")
    app.include_router(staff_router, prefix="/api")

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    uvicorn.run(
        "app.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
