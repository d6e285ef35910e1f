"""
FastAPI application entry point.

The database engine and the broker connection are opened in the lifespan
handler and closed on shutdown; requests receive them through dependencies.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.config import get_settings
from core.db import db
from core.logging import RequestLoggingMiddleware, configure_logging, get_logger
from core.messaging import EventPublisher

from .error_handlers import register_exception_handlers
from .routers import issues as issues_router
from .schemas import HealthResponse

settings = get_settings()
configure_logging(level="DEBUG" if settings.debug else settings.log_level)
logger = get_logger("api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open process-wide handles at startup and release them at shutdown."""
    logger.info("app_startup", app_name=settings.app_name)

    db.initialize(settings.database_url)
    logger.info("database_initialized")

    publisher = EventPublisher(settings.amqp_url, connect_timeout=settings.amqp_connect_timeout)
    publisher.connect()
    app.state.publisher = publisher

    try:
        yield
    finally:
        logger.info("app_shutdown")
        publisher.close()
        app.state.publisher = None
        db.reset()


def create_app() -> FastAPI:
    api_prefix = f"{settings.api_prefix}/v1"

    app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Request-ID",
        ],
        expose_headers=["X-Request-ID"],
    )

    # Request id binding and structured access logs
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    def health_check():
        """Liveness probe."""
        return {"status": "ok"}

    @app.get("/health/ready", tags=["health"])
    def readiness_check():
        """
        Readiness probe.

        The database is required; the broker is reported but a lost broker
        connection is reconnected lazily on the next publish.
        """
        db_health = db.health_check()
        publisher = getattr(app.state, "publisher", None)
        checks = {
            "database": db_health["healthy"],
            "broker": bool(publisher is not None and publisher.is_connected),
        }

        if not checks["database"]:
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "not_ready", "checks": checks},
            )

        return {"status": "ready", "checks": checks}

    app.include_router(issues_router.router, prefix=api_prefix)

    return app


app = create_app()
