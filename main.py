import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from app.application.use_cases.notifications import NotificationService
from app.config import Settings, get_settings
from app.infrastructure import database
from app.infrastructure.module_registry import ModuleRegistry
from app.infrastructure.notifications import EventBus
from app.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


def build_notification_service(
    settings: Settings,
    *,
    engine: Engine,
    modules: ModuleRegistry | None = None,
    bus: EventBus | None = None,
) -> NotificationService:
    """Compose the notification hub and subscribe it to the event bus."""

    if modules is None:
        if settings.modules_manifest:
            modules = ModuleRegistry.from_manifest(settings.modules_manifest)
        else:
            modules = ModuleRegistry()

    service = NotificationService(
        database.build_session_factory(engine),
        modules=modules,
        events=bus if bus is not None else EventBus(),
        settings=settings,
    )
    service.bind_events()
    return service


def create_app(
    *,
    settings: Settings | None = None,
    engine: Engine | None = None,
    modules: ModuleRegistry | None = None,
    bus: EventBus | None = None,
) -> FastAPI:
    """Create and configure the notification hub application."""

    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    engine = engine if engine is not None else database.engine

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Create the tables on startup; flush pending events and release the pool on shutdown."""

        database.initialize_database(engine)
        logger.info("Notification hub ready with %d modules", len(app.state.modules))
        yield
        await app.state.event_bus.drain()
        engine.dispose()

    app = FastAPI(lifespan=lifespan)
    service = build_notification_service(settings, engine=engine, modules=modules, bus=bus)
    app.state.notification_service = service
    app.state.modules = service.modules
    app.state.event_bus = service.events

    register_routes(app)
    return app


app = create_app()
