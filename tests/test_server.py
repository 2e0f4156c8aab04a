import asyncio
from datetime import datetime, timezone

import pytest
from aiohttp.test_utils import TestClient, TestServer

from rltnotify.entity import UnreadMessagesNotification, UnreadWorkRequest
from rltnotify.server import NotifyRequest, create_app
from rltnotify.signals import Signal
from rltnotify.storage import MemoryWithChannel
from rltnotify.tuntun import Tuntun


def make_hub(timeout=2.0):
    return Tuntun(MemoryWithChannel(100), Signal(), default_timeout=timeout)


def test_from_dict_reads_unread_message():
    request = NotifyRequest.from_dict(
        {"userID": 4, "unreadMessage": {"count": 7, "created_at": "0001-01-01T00:00:00Z"}}
    )
    assert request.user_id == 4
    assert request.unread_message == UnreadMessagesNotification(count=7)
    assert request.unread_work_request is None
    assert request.notification() is request.unread_message


def test_from_dict_reads_work_request_with_time():
    request = NotifyRequest.from_dict(
        {
            "userID": 2,
            "unreadWorkRequest": {
                "workID": 12,
                "title": "fix",
                "created_at": "2024-05-01T10:00:00Z",
            },
        }
    )
    expected = UnreadWorkRequest(
        work_id=12,
        title="fix",
        created_at=datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc),
    )
    assert request.notification() == expected
    assert request.notification().to_dict()["created_at"] == "2024-05-01T10:00:00Z"


def test_unread_message_takes_precedence():
    message = UnreadMessagesNotification(count=1)
    work = UnreadWorkRequest(work_id=1, title="a")
    request = NotifyRequest(user_id=1, unread_message=message, unread_work_request=work)
    assert request.notification() is message


def test_empty_request_has_no_notification():
    with pytest.raises(ValueError, match="bad notification"):
        NotifyRequest(user_id=1).notification()


@pytest.mark.parametrize(
    "data",
    [
        {"userID": "one"},
        {"userID": True},
        {"userID": 1, "unreadMessage": {"count": "x"}},
        {"userID": 1, "unreadMessage": []},
        {"userID": 1, "unreadWorkRequest": {"title": 3}},
        {"userID": 1, "unreadMessage": {"created_at": "yesterday"}},
        [1, 2],
    ],
)
def test_from_dict_rejects_malformed(data):
    with pytest.raises(ValueError):
        NotifyRequest.from_dict(data)


@pytest.mark.asyncio
async def test_notify_then_listen_round_trip():
    hub = make_hub()
    async with TestClient(TestServer(create_app(hub))) as client:
        resp = await client.post(
            "/notify", json={"userID": 5, "unreadMessage": {"count": 3}}
        )
        assert resp.status == 201
        assert await resp.text() == "notification created"

        resp = await client.get("/listen/5")
        assert resp.status == 200
        body = await resp.json()
    assert body == [{"created_at": "0001-01-01T00:00:00Z", "count": 3}]
    assert hub.storage.count(5) == 0


@pytest.mark.asyncio
async def test_listen_waits_for_notify():
    hub = make_hub()
    async with TestClient(TestServer(create_app(hub))) as client:
        listening = asyncio.create_task(client.get("/listen/9"))
        await asyncio.sleep(0.05)
        assert not listening.done()

        resp = await client.post(
            "/notify",
            json={"userID": 9, "unreadWorkRequest": {"workID": 2, "title": "doc"}},
        )
        assert resp.status == 201

        listen_resp = await asyncio.wait_for(listening, 2)
        body = await listen_resp.json()
    assert [item["workID"] for item in body] == [2]
    assert [item["title"] for item in body] == ["doc"]


@pytest.mark.asyncio
async def test_listen_with_non_numeric_id_uses_client_zero():
    hub = make_hub()
    hub.notify(0, UnreadMessagesNotification(count=8))
    async with TestClient(TestServer(create_app(hub))) as client:
        resp = await client.get("/listen/abc")
        body = await resp.json()
    assert [item["count"] for item in body] == [8]


@pytest.mark.asyncio
async def test_notify_rejects_invalid_json():
    hub = make_hub()
    async with TestClient(TestServer(create_app(hub))) as client:
        resp = await client.post(
            "/notify", data="{not json", headers={"Content-Type": "application/json"}
        )
        assert resp.status == 400
    assert hub.storage.count(0) == 0