"""Shared fixtures for the notification hub tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.application.use_cases.notifications import NotificationService
from app.config import Settings
from app.domain.entities import Module
from app.infrastructure.database import (
    build_engine,
    build_session_factory,
    initialize_database,
)
from app.infrastructure.module_registry import ModuleRegistry
from app.infrastructure.notifications import EventBus


@pytest.fixture()
def settings() -> Settings:
    return Settings(database_url="sqlite://", app_timezone="UTC")


@pytest.fixture()
def engine(tmp_path: Path):
    """Return an engine bound to a fresh SQLite file with the hub tables."""

    engine = build_engine(f"sqlite:///{tmp_path / 'notifications.db'}")
    initialize_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture()
def modules(tmp_path: Path) -> ModuleRegistry:
    return ModuleRegistry(
        [
            Module(
                name="hitl",
                root=str(tmp_path / "modules" / "hitl"),
                menu_icon="chat",
                menu_text="Human in the loop",
            ),
            Module(
                name="analytics",
                root=str(tmp_path / "modules" / "analytics"),
                menu_icon="timeline",
                menu_text="Analytics",
            ),
        ]
    )


@pytest.fixture()
def bus() -> EventBus:
    return EventBus()


@pytest.fixture()
def service(session_factory, modules, bus, settings) -> NotificationService:
    service = NotificationService(
        session_factory, modules=modules, events=bus, settings=settings
    )
    service.bind_events()
    return service
