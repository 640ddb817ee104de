"""fairdispatch — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fairdispatch.adapters.persistence.database import engine
from fairdispatch.config import settings
from fairdispatch.infrastructure.api.routes_distribution import router as distribution_router
from fairdispatch.infrastructure.api.routes_health import router as health_router
from fairdispatch.infrastructure.api.routes_history import router as history_router
from fairdispatch.infrastructure.api.routes_units import router as units_router
from fairdispatch.infrastructure.api.routes_workers import router as workers_router

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
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s | %(message)s",
    )

    app = FastAPI(
        title="fairdispatch",
        description="Workload-balanced assignment of service units to workers",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router, prefix="/api")
    app.include_router(workers_router, prefix="/api")
    app.include_router(units_router, prefix="/api")
    app.include_router(distribution_router, prefix="/api")
    app.include_router(history_router, prefix="/api")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("fairdispatch.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
