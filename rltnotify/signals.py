"""Topic-based wake-up signals for waiting listeners."""

from __future__ import annotations

import asyncio
import threading
from typing import Callable


class EmptyTopicError(LookupError):
    """Raised when publishing to a topic nobody listens to."""

    def __init__(self, message: str = "no topic found") -> None:
        super().__init__(message)


class Signal:
    """Delivers a wake-up event to every current subscriber of a topic."""

    def __init__(self) -> None:
        self._topics: dict[str, list[asyncio.Event]] = {}
        self._lock = threading.Lock()

    def subscribe(self, topic_id: str) -> tuple[asyncio.Event, Callable[[], None]]:
        """Listen on a topic.

        Returns the event that is set on publish and a function that
        stops listening.
        """
        event = asyncio.Event()
        with self._lock:
            self._topics.setdefault(topic_id, []).append(event)

        def cancel() -> None:
            with self._lock:
                listeners = self._topics.get(topic_id, [])
                listeners[:] = [item for item in listeners if item is not event]

        return event, cancel

    def publish(self, topic_id: str) -> None:
        """Wake every subscriber of the topic."""
        with self._lock:
            listeners = list(self._topics.get(topic_id, ()))
        if not listeners:
            raise EmptyTopicError()
        for event in listeners:
            event.set()