"""The notification hub: stores notifications and wakes waiting listeners."""

from __future__ import annotations

import asyncio

from .entity import Notification
from .signals import EmptyTopicError, Signal
from .storage import MemoryWithChannel, Storage

DEFAULT_TIMEOUT = 120.0


def _topic(user_id: int) -> str:
    return f"user#{user_id}"


class Tuntun:
    """Hands notifications to clients, long-polling when none are waiting."""

    def __init__(
        self,
        storage: Storage,
        signal: Signal,
        default_timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.storage = storage
        self.signal = signal
        self.default_timeout = default_timeout

    def notify(self, user_id: int, notification: Notification) -> None:
        """Store a notification for a user and wake anyone listening."""
        self.storage.push(user_id, notification)
        try:
            self.signal.publish(_topic(user_id))
        except EmptyTopicError:
            pass

    async def get_notifications(
        self, client_id: int, timeout: float | None = None
    ) -> list[Notification]:
        """Return the client's notifications, waiting for one if there are none.

        Raises TimeoutError when nothing arrives within ``timeout`` seconds
        (the hub's default timeout when not given).
        """
        if self.storage.count(client_id) > 0:
            return self.storage.pop_all(client_id)

        wait_for = self.default_timeout if timeout is None else timeout
        event, cancel = self.signal.subscribe(_topic(client_id))
        try:
            await asyncio.wait_for(event.wait(), wait_for)
        except asyncio.TimeoutError as exc:
            raise TimeoutError(
                f"no notification for client {client_id} within {wait_for} seconds"
            ) from exc
        finally:
            cancel()
        return self.storage.pop_all(client_id)


def build() -> Tuntun:
    """Create a hub with in-memory storage of 100 notifications per client."""
    return Tuntun(MemoryWithChannel(100), Signal())