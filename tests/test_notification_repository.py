"""Tests for the SQLAlchemy notification repository."""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone

from app.domain.entities import Notification
from app.infrastructure.repositories import DEFAULT_PAGE_SIZE, NotificationRepository


def _notification(message: str, created_at: datetime | None = None) -> Notification:
    return Notification(
        id=str(uuid.uuid4()),
        message=message,
        level="info",
        module_id="botpress",
        icon="view_module",
        name="botpress",
        url="/",
        created_at=created_at,
    )


def test_create_stamps_creation_date(session_factory) -> None:
    with session_factory() as session:
        saved = NotificationRepository(session).create(_notification("hello"))

    assert saved.created_at is not None
    assert saved.created_at.tzinfo is not None
    assert saved.read is False
    assert saved.archived is False


def test_inbox_is_capped_and_newest_first(session_factory) -> None:
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    with session_factory() as session:
        repository = NotificationRepository(session)
        created = [
            repository.create(_notification(f"n{i}", start + timedelta(seconds=i)))
            for i in range(150)
        ]
        inbox = repository.list(archived=False)

    assert len(inbox) == DEFAULT_PAGE_SIZE == 100
    assert [n.id for n in inbox] == [n.id for n in reversed(created)][:100]
    dates = [n.created_at for n in inbox]
    assert dates == sorted(dates, reverse=True)


def test_archive_moves_row_out_of_inbox(session_factory) -> None:
    with session_factory() as session:
        repository = NotificationRepository(session)
        first = repository.create(_notification("first"))
        second = repository.create(_notification("second"))

        assert repository.archive(first.id) == 1

        assert [n.id for n in repository.list(archived=False)] == [second.id]
        archived = repository.list(archived=True)
        assert [n.id for n in archived] == [first.id]
        assert archived[0].read is False


def test_unknown_id_updates_nothing(session_factory) -> None:
    with session_factory() as session:
        repository = NotificationRepository(session)
        saved = repository.create(_notification("kept"))

        assert repository.archive("does-not-exist") == 0
        assert repository.mark_as_read("does-not-exist") == 0

        assert repository.get(saved.id) == saved


def test_bulk_updates_touch_every_row(session_factory) -> None:
    with session_factory() as session:
        repository = NotificationRepository(session)
        for i in range(3):
            repository.create(_notification(f"n{i}"))

        assert repository.mark_all_as_read() == 3
        assert all(n.read for n in repository.list(archived=False))

        assert repository.archive_all() == 3
        assert repository.list(archived=False) == []
        assert len(repository.list(archived=True)) == 3
