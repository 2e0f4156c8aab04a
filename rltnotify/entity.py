"""Notification types delivered to listening clients."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime, timezone
from typing import Any

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_JSON_NAMES = {"work_id": "workID"}


class Notification:
    """Anything that can be pushed to a client."""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping of this notification."""
        result = {}
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if isinstance(value, datetime):
                value = value.isoformat().replace("+00:00", "Z")
            result[_JSON_NAMES.get(f.name, f.name)] = value
        return result


@dataclass(frozen=True, kw_only=True)
class BaseNotification(Notification):
    created_at: datetime = ZERO_TIME


@dataclass(frozen=True, kw_only=True)
class UnreadWorkRequest(BaseNotification):
    work_id: int = 0
    title: str = ""


@dataclass(frozen=True, kw_only=True)
class UnreadMessagesNotification(BaseNotification):
    count: int = 0