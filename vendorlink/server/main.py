"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware
(CORS, signed cookie sessions, request logging), registers exception handlers
and includes all API routers. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from vendorlink.core.database import async_session_maker, init_db
from vendorlink.core.database.repositories import SessionRepository
from vendorlink.core.logging_config import get_logger, setup_logging
from vendorlink.core.monitoring import initialize_logfire

from .api.v1 import (
    auth,
    categories,
    group_orders,
    health,
    orders,
    price_alerts,
    products,
    reviews,
    stats,
    support_tickets,
    users,
)
from .auth import close_oidc_client
from .core import constant
from .core.config import Settings, settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestLoggingMiddleware
from .services.demo import seed_demo_data

# Initialize logging
setup_logging()
logger = get_logger(__name__)


def check_production_settings(config: Settings) -> None:
    """Refuse to start a production deployment with required settings missing."""
    if not config.is_production:
        return
    missing = config.missing_production_settings()
    if missing:
        raise RuntimeError(f"Missing required production settings: {', '.join(missing)}")


async def prune_expired_sessions() -> int:
    async with async_session_maker() as session:
        return await SessionRepository(session).prune_expired()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Startup validates the configuration, prepares the database, drops expired
    login sessions and seeds the demo account when demo mode is on. Shutdown
    drops the OIDC client.
    """
    logger.info(f"Starting up {constant.PROJECT_NAME} Server ({settings.environment})...")
    check_production_settings(settings)
    try:
        await init_db()
        logger.info("Database initialized successfully")
        pruned = await prune_expired_sessions()
        logger.info(f"Removed {pruned} expired login sessions")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    if settings.demo_mode:
        async with async_session_maker() as session:
            await seed_demo_data(session)
        logger.info("Demo mode enabled: all requests are served as the demo user")

    yield

    logger.info(f"Shutting down {constant.PROJECT_NAME} Server...")
    await close_oidc_client()


def create_app(config: Settings = settings) -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title=constant.PROJECT_NAME,
        description="""
        VendorLink API

        Backend of the VendorLink B2B marketplace: vendors buy from suppliers,
        pool demand in group orders, track deliveries and review suppliers.
        """,
        version=constant.VERSION,
        openapi_url=f"{constant.API_PREFIX}/openapi.json",
        docs_url=f"{constant.API_PREFIX}/docs",
        redoc_url=f"{constant.API_PREFIX}/redoc",
        lifespan=lifespan,
    )

    # Added last runs first: logging wraps sessions, sessions wrap CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors.origin_list,
        allow_credentials=config.cors.allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        SessionMiddleware,
        secret_key=config.session_secret(),
        session_cookie=config.session.cookie_name,
        max_age=config.session.ttl_seconds,
        same_site="strict" if config.is_production else "lax",
        https_only=config.is_production,
    )
    app.add_middleware(RequestLoggingMiddleware)

    setup_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    for module in (
        auth,
        users,
        categories,
        products,
        orders,
        group_orders,
        reviews,
        price_alerts,
        support_tickets,
        stats,
    ):
        app.include_router(module.router, prefix=constant.API_PREFIX)

    initialize_logfire(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "vendorlink.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
