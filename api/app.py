"""FastAPI application factory."""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config import load_config
from court.arena import configure_arena, get_arena
from internal.health import HealthChecker, check_event_loop, create_arena_check
from internal.logging import get_logger, LogLevel, StructuredLogger
from utils.crash import create_async_handler
from api.routes import health, probe

VERSION = "1.0.0"


def create_app(config=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    # Configure structured logging
    StructuredLogger.configure(min_level=LogLevel.parse(config.logging.level))
    logger_instance = get_logger()

    configure_arena(config.arena.width, config.arena.height)
    health_checker = HealthChecker()
    health_checker.register("event_loop", check_event_loop, critical=True)
    health_checker.register("arena", create_arena_check(get_arena, config.arena), critical=False)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger_instance.info("Application starting", version=VERSION)
        loop = asyncio.get_running_loop()
        loop.set_exception_handler(create_async_handler(logger_instance))
        logger_instance.info("Application started successfully")

        yield

        logger_instance.info("Application shutdown complete")

    app = FastAPI(
        title="Game Court Probe",
        version=VERSION,
        description="stateless probes over game object movement and collision",
        lifespan=lifespan,
    )

    health.init(health_checker)

    app.include_router(probe.router)
    app.include_router(health.router)

    return app
