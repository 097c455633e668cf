"""
FastAPI Application Entry Point

Restaurant management backend.

Endpoints:
    - /api/admin/...: back-office CRUD for categories, items and users
    - GET /api/: customer API root
    - GET /api/menu: public menu
    - GET /health: system health check

Run with:
    python -m restaurant_api.main
    uvicorn restaurant_api.main:app --port 8001
"""

import asyncio
import logging
import sys
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

# Windows-specific event loop policy
if sys.platform == "win32":
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

from restaurant_api.core.config import Settings, get_settings, setup_logging
from restaurant_api.core.errors import setup_exception_handlers
from restaurant_api.database import build_engine, build_session_maker, init_db
from restaurant_api.repositories import Repositories
from restaurant_api.routes import admin, customer
from restaurant_api.schemas import HealthResponse
from restaurant_api.services import AdminService, CustomerService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    The engine, repositories and services are created in the lifespan and
    attached to ``app.state``; nothing is shared through module globals.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger.info("=" * 60)
        logger.info(f"Starting {settings.app_name}")
        logger.info(f"   Version: {settings.app_version}")
        logger.info(f"   Environment: {settings.env_mode.value}")
        logger.info(f"   Debug: {settings.debug}")
        logger.info("=" * 60)

        engine = build_engine(settings)
        await init_db(engine)
        logger.info("Database initialized")

        repositories = Repositories.build(build_session_maker(engine), settings)
        restaurant = await repositories.restaurants.ensure(
            name=settings.restaurant_name,
            subdomain=settings.restaurant_subdomain,
        )
        logger.info(f"Restaurant: {restaurant.name} ({restaurant.subdomain})")

        app.state.engine = engine
        app.state.repositories = repositories
        app.state.admin_service = AdminService(repositories)
        app.state.customer_service = CustomerService(repositories)

        logger.info("Application ready")

        yield  # Application runs

        # Shutdown
        logger.info("Shutting down...")
        await engine.dispose()
        logger.info("Cleanup complete")

    app = FastAPI(
        title=settings.app_name,
        description="Menu and user management for a single restaurant, plus its public menu.",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app, settings)
    app.include_router(admin.router)
    app.include_router(customer.router)

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="System Health Check",
    )
    async def health_check(request: Request) -> HealthResponse:
        """Verify the database is reachable."""
        db_status = "healthy"
        try:
            async with request.app.state.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            db_status = f"unhealthy: {str(e)}"
            logger.error(f"Database health check failed: {e}")

        restaurant = None
        if db_status == "healthy":
            current = await request.app.state.repositories.restaurants.get_current()
            restaurant = current.subdomain if current else None

        return HealthResponse(
            status="operational" if db_status == "healthy" else "degraded",
            database=db_status,
            restaurant=restaurant,
            timestamp=datetime.now(timezone.utc).isoformat(),
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
