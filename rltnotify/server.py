"""HTTP endpoints for long-polling notifications."""

from __future__ import annotations

import argparse
import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Sequence

from aiohttp import web

from .entity import ZERO_TIME, Notification, UnreadMessagesNotification, UnreadWorkRequest
from .tuntun import Tuntun, build


def _get(obj: dict[str, Any], name: str, kind: type, default: Any) -> Any:
    value = obj.get(name)
    if value is None:
        return default
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ValueError(f"field {name!r} must be of type {kind.__name__}")
    return value


def _created_at(obj: dict[str, Any]) -> datetime:
    text = _get(obj, "created_at", str, None)
    if text is None:
        return ZERO_TIME
    return datetime.fromisoformat(text.replace("Z", "+00:00").replace("z", "+00:00"))


@dataclass
class NotifyRequest:
    """Body of a notify call: a user and one kind of notification."""

    user_id: int = 0
    unread_message: UnreadMessagesNotification | None = None
    unread_work_request: UnreadWorkRequest | None = None

    @classmethod
    def from_dict(cls, data: Any) -> NotifyRequest:
        """Build a request from decoded JSON, raising ValueError if malformed."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("request body must be an object")
        request = cls(user_id=_get(data, "userID", int, 0))
        message = _get(data, "unreadMessage", dict, None)
        if message is not None:
            request.unread_message = UnreadMessagesNotification(
                created_at=_created_at(message), count=_get(message, "count", int, 0)
            )
        work = _get(data, "unreadWorkRequest", dict, None)
        if work is not None:
            request.unread_work_request = UnreadWorkRequest(
                created_at=_created_at(work),
                work_id=_get(work, "workID", int, 0),
                title=_get(work, "title", str, ""),
            )
        return request

    def notification(self) -> Notification:
        """Return the notification carried, preferring unread messages."""
        found = self.unread_message or self.unread_work_request
        if found is None:
            raise ValueError("bad notification")
        return found


class Server:
    """Request handlers bound to a notification hub."""

    def __init__(self, tuntun: Tuntun, listen_timeout: float | None = None) -> None:
        self.tuntun = tuntun
        self.listen_timeout = listen_timeout

    async def listen(self, request: web.Request) -> web.Response:
        try:
            client_id = int(request.match_info["id"])
        except ValueError:
            client_id = 0
        notifications = await self.tuntun.get_notifications(client_id, self.listen_timeout)
        return web.json_response([item.to_dict() for item in notifications])

    async def notify(self, request: web.Request) -> web.Response:
        try:
            notify_request = NotifyRequest.from_dict(await request.json())
        except (json.JSONDecodeError, ValueError) as exc:
            raise web.HTTPBadRequest(text=str(exc)) from exc
        self.tuntun.notify(notify_request.user_id, notify_request.notification())
        return web.Response(status=201, text="notification created")


def create_app(tuntun: Tuntun) -> web.Application:
    server = Server(tuntun)
    app = web.Application()
    app.router.add_get("/listen/{id}", server.listen)
    app.router.add_post("/notify", server.notify)
    return app


def main(argv: Sequence[str] | None = None) -> None:
    """Run the notification server."""
    parser = argparse.ArgumentParser(description="Serve long-polling notifications.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    web.run_app(create_app(build()), host=args.host, port=args.port)