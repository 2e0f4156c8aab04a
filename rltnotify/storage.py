"""Per-client notification storage kept in memory."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections import deque

from .entity import Notification


class EmptyError(LookupError):
    """Raised when a client has no stored notifications."""

    def __init__(self, message: str = "no notifications found") -> None:
        super().__init__(message)


class Storage(ABC):
    """Bounded per-client notification queue."""

    @abstractmethod
    def push(self, client_id: int, notification: Notification) -> None:
        """Store a notification, dropping the oldest when full."""

    @abstractmethod
    def count(self, client_id: int) -> int:
        """Return how many notifications are stored for the client."""

    @abstractmethod
    def pop(self, client_id: int) -> Notification:
        """Remove and return the oldest notification."""

    @abstractmethod
    def pop_all(self, client_id: int) -> list[Notification]:
        """Remove and return every stored notification, oldest first."""


def _check_size(size: int) -> int:
    if size < 1:
        raise ValueError(f"storage size must be positive, got {size}")
    return size


class MemoryWithChannel(Storage):
    """Storage backed by one bounded queue per client.

    ``pop_all`` on an empty queue returns an empty list.
    """

    def __init__(self, size: int) -> None:
        self.size = _check_size(size)
        self._queues: dict[int, deque[Notification]] = {}
        self._lock = threading.Lock()

    def _get(self, client_id: int) -> deque[Notification]:
        with self._lock:
            return self._queues.setdefault(client_id, deque(maxlen=self.size))

    def push(self, client_id: int, notification: Notification) -> None:
        queue = self._get(client_id)
        with self._lock:
            queue.append(notification)

    def count(self, client_id: int) -> int:
        return len(self._get(client_id))

    def pop(self, client_id: int) -> Notification:
        queue = self._get(client_id)
        with self._lock:
            if not queue:
                raise EmptyError()
            return queue.popleft()

    def pop_all(self, client_id: int) -> list[Notification]:
        queue = self._get(client_id)
        with self._lock:
            items = list(queue)
            queue.clear()
        return items


class _UserStorage:
    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.notifications: list[Notification] = []


class MemoryWithList(Storage):
    """Storage backed by one locked list per client.

    ``pop_all`` on an empty list raises EmptyError.
    """

    def __init__(self, size: int) -> None:
        self.size = _check_size(size)
        self._users: dict[int, _UserStorage] = {}
        self._lock = threading.Lock()

    def _get(self, client_id: int) -> _UserStorage:
        with self._lock:
            return self._users.setdefault(client_id, _UserStorage())

    def push(self, client_id: int, notification: Notification) -> None:
        user = self._get(client_id)
        with user.lock:
            if len(user.notifications) >= self.size:
                del user.notifications[0]
            user.notifications.append(notification)

    def count(self, client_id: int) -> int:
        return len(self._get(client_id).notifications)

    def pop(self, client_id: int) -> Notification:
        user = self._get(client_id)
        with user.lock:
            if not user.notifications:
                raise EmptyError()
            return user.notifications.pop(0)

    def pop_all(self, client_id: int) -> list[Notification]:
        user = self._get(client_id)
        with user.lock:
            if not user.notifications:
                raise EmptyError()
            items, user.notifications = user.notifications, []
        return items