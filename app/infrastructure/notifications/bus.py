"""In-process publish/subscribe bus shared by the hub components."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections import defaultdict
from typing import Any, Awaitable, Callable, DefaultDict, List, Set

import anyio
from anyio import from_thread

Handler = Callable[[Any], "Awaitable[None] | None"]

logger = logging.getLogger(__name__)


class EventBus:
    """Route payloads published on named topics to their subscribers.

    Handlers may be plain callables or coroutine functions. They run in
    registration order, so deliveries from a single publisher on one topic
    are observed in the order they were published.
    """

    def __init__(self) -> None:
        self._handlers: DefaultDict[str, List[Handler]] = defaultdict(list)
        self._pending: Set[asyncio.Task[None]] = set()

    def on(self, topic: str, handler: Handler) -> None:
        """Subscribe ``handler`` to ``topic``."""

        self._handlers[topic].append(handler)
        logger.debug("Registered handler %r for %s", handler, topic)

    def off(self, topic: str, handler: Handler) -> None:
        """Remove ``handler`` from ``topic`` if it was subscribed."""

        handlers = self._handlers.get(topic)
        if not handlers or handler not in handlers:
            return
        handlers.remove(handler)
        if not handlers:
            self._handlers.pop(topic, None)

    def handlers(self, topic: str) -> list[Handler]:
        return list(self._handlers.get(topic, ()))

    async def publish(self, topic: str, payload: Any = None) -> None:
        """Deliver ``payload`` to every subscriber of ``topic`` and wait for them.

        Handler errors propagate to the publisher.
        """

        for handler in self.handlers(topic):
            result = handler(payload)
            if inspect.isawaitable(result):
                await result

    def emit(self, topic: str, payload: Any = None) -> None:
        """Schedule delivery of ``payload`` without waiting for the handlers.

        Inside a running loop the delivery becomes a task. From an AnyIO worker
        thread it is handed back to the loop that spawned the thread, and with
        no loop at all the handlers run to completion before returning.
        """

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            pass
        else:
            task = loop.create_task(self.publish(topic, payload), name=topic)
            self._pending.add(task)
            task.add_done_callback(self._delivery_done)
            return

        if _in_worker_thread():
            from_thread.run(self.publish, topic, payload)
        else:
            anyio.run(self.publish, topic, payload)

    async def drain(self) -> None:
        """Wait for every delivery scheduled with :meth:`emit` to finish.

        Failures of scheduled deliveries are logged, not raised.
        """

        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def _delivery_done(self, task: "asyncio.Task[None]") -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Delivery on %s failed", task.get_name(), exc_info=exc)


def _in_worker_thread() -> bool:
    try:
        from_thread.check_cancelled()
    except RuntimeError:
        return False
    return True


__all__ = ["EventBus", "Handler"]
