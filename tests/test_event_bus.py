"""Tests for the in-process event bus and the hub bindings."""

from __future__ import annotations

import logging

import anyio
import pytest
from anyio import to_thread

from app.infrastructure.notifications import EventBus, topics


def test_publish_runs_sync_and_async_handlers_in_order() -> None:
    bus = EventBus()
    calls = []

    async def async_handler(payload):
        calls.append(("async", payload))

    bus.on("demo", lambda payload: calls.append(("sync", payload)))
    bus.on("demo", async_handler)

    anyio.run(bus.publish, "demo", 1)

    assert calls == [("sync", 1), ("async", 1)]


def test_off_removes_handler() -> None:
    bus = EventBus()
    calls = []
    bus.on("demo", calls.append)
    bus.off("demo", calls.append)
    bus.off("unknown", calls.append)

    anyio.run(bus.publish, "demo", 1)

    assert calls == []
    assert bus.handlers("demo") == []


def test_publish_propagates_handler_errors() -> None:
    bus = EventBus()

    def failing(_payload):
        raise LookupError("boom")

    bus.on("demo", failing)

    with pytest.raises(LookupError):
        anyio.run(bus.publish, "demo", None)


def test_emit_inside_loop_is_scheduled() -> None:
    bus = EventBus()
    calls = []
    bus.on("demo", calls.append)

    async def scenario():
        bus.emit("demo", 1)
        bus.emit("demo", 2)
        assert calls == []
        await bus.drain()

    anyio.run(scenario)

    assert calls == [1, 2]


def test_emit_from_worker_thread_runs_on_loop() -> None:
    bus = EventBus()
    calls = []
    bus.on("demo", calls.append)

    async def scenario():
        await to_thread.run_sync(bus.emit, "demo", "from-thread")

    anyio.run(scenario)

    assert calls == ["from-thread"]


def test_emit_without_loop_delivers_immediately() -> None:
    bus = EventBus()
    calls = []
    bus.on("demo", calls.append)

    bus.emit("demo", "now")

    assert calls == ["now"]


def test_request_all_broadcasts_inbox(service, bus) -> None:
    first = service.create("first")
    received = []
    bus.on(topics.INBOX, received.append)

    anyio.run(bus.publish, topics.REQUEST_ALL, None)

    assert len(received) == 1
    assert [n["id"] for n in received[0]] == [first.id]


def test_request_read_marks_and_broadcasts(service, bus) -> None:
    notification = service.create("hi")
    received = []
    bus.on(topics.INBOX, received.append)

    anyio.run(bus.publish, topics.REQUEST_READ, notification.id)

    assert received[-1][0]["id"] == notification.id
    assert received[-1][0]["read"] is True
    assert received[-1][0]["archived"] is False


def test_request_read_accepts_mapping_payload(service, bus) -> None:
    notification = service.create("hi")

    anyio.run(bus.publish, topics.REQUEST_READ, {"id": notification.id})

    assert service.get_inbox()[0].read is True


def test_request_read_all_broadcasts_read_inbox(service, bus) -> None:
    for i in range(3):
        service.create(f"n{i}")
    received = []
    bus.on(topics.INBOX, received.append)

    anyio.run(bus.publish, topics.REQUEST_READ_ALL, None)

    assert len(received[-1]) == 3
    assert all(item["read"] for item in received[-1])


def test_request_trash_all_broadcasts_empty_inbox(service, bus) -> None:
    for i in range(3):
        service.create(f"n{i}")
    received = []
    bus.on(topics.INBOX, received.append)

    anyio.run(bus.publish, topics.REQUEST_TRASH_ALL, None)

    assert received == [[]]
    assert len(service.get_archived()) == 3


def test_request_trash_archives_one(service, bus) -> None:
    kept = service.create("kept")
    trashed = service.create("trashed")
    received = []
    bus.on(topics.INBOX, received.append)

    anyio.run(bus.publish, topics.REQUEST_TRASH, trashed.id)

    assert [n["id"] for n in received[-1]] == [kept.id]


def test_failed_scheduled_delivery_is_logged(caplog) -> None:
    bus = EventBus()
    calls = []

    def failing(_payload):
        raise LookupError("subscriber broke")

    bus.on("demo", failing)
    bus.on("other", calls.append)

    async def scenario():
        bus.emit("demo", 1)
        bus.emit("other", 2)
        await bus.drain()

    with caplog.at_level(logging.ERROR):
        anyio.run(scenario)

    assert calls == [2]
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert errors[0].getMessage() == "Delivery on demo failed"
    assert isinstance(errors[0].exc_info[1], LookupError)


def test_create_inside_loop_logs_failing_subscriber(service, bus, caplog) -> None:
    def failing(_payload):
        raise LookupError("badge offline")

    bus.on(topics.NEW, failing)

    async def scenario():
        notification = service.create("hi")
        await bus.drain()
        return notification

    with caplog.at_level(logging.ERROR):
        notification = anyio.run(scenario)

    assert service.get_inbox()[0].id == notification.id
    assert any(
        r.getMessage() == f"Delivery on {topics.NEW} failed" for r in caplog.records
    )
