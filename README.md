# rltnotify

A small notification service that keeps per-user notifications in memory and
lets clients long-poll for them over HTTP.

A client asks for its notifications. If some are waiting, it gets all of them
straight away. If none are, the request waits until a notification for that
user arrives or the wait times out.

## Installation

```
pip install .
```

## Running the server

```
rltnotify
```

This starts an HTTP server on port 8080 with two endpoints:

- `GET /listen/{id}`: returns the pending notifications of user `id` as a
  JSON list and waits for one to arrive if there are none yet.
- `POST /notify`: stores a notification for a user and wakes up anyone
  listening for that user. The body is JSON and holds a `userID` together with
  either an `unreadMessage` or an `unreadWorkRequest` object:

```json
{"userID": 7, "unreadMessage": {"count": 3}}
```

```json
{"userID": 7, "unreadWorkRequest": {"workID": 12, "title": "Review draft"}}
```

A successful notify answers `201` with the text `notification created`.

## Using it as a library

```python
import asyncio

from rltnotify.entity import UnreadMessagesNotification
from rltnotify.tuntun import build


async def demo():
    tuntun = build()
    await tuntun.notify(7, UnreadMessagesNotification(count=2))
    print(await tuntun.get_notifications(7, 5.0))


asyncio.run(demo())
```

`build()` wires a `MemoryWithChannel` storage, which keeps at most 100
notifications per user and drops the oldest when full, to a `Signal` that
wakes waiting listeners. `rltnotify.storage.MemoryWithList` is an alternative
storage with the same interface.

To serve your own `Tuntun`, pass it to `rltnotify.server.create_app` and run
the returned aiohttp application.

## Tests

```
pip install .[test]
pytest
```