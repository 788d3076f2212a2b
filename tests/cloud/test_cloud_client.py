from __future__ import annotations

import asyncio

import aiohttp
import pytest

from src.class_attendance.class_attendance.cloud.client import CloudSyncClient
from src.class_attendance.class_attendance.core.exceptions import CloudSyncError


class FakeResponse:
    def __init__(self, status: int):
        self.status = status

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    def __init__(self, *, status: int = 200, error: Exception | None = None):
        self._status = status
        self._error = error
        self.posts: list[tuple[str, dict]] = []
        self.closed = False

    def post(self, url, json=None):
        self.posts.append((url, json))
        if self._error:
            raise self._error
        return FakeResponse(self._status)

    async def close(self):
        self.closed = True


def test_disabled_without_url():
    client = CloudSyncClient("  ")
    assert not client.enabled
    with pytest.raises(CloudSyncError):
        asyncio.run(client.submit({}))


def test_submit_posts_json_payload():
    session = FakeSession(status=200)
    client = CloudSyncClient("https://script.example/exec", session=session)

    asyncio.run(client.submit({"id": "r-1"}))

    assert session.posts == [("https://script.example/exec", {"id": "r-1"})]
    assert not session.closed


def test_http_error_status_raises():
    client = CloudSyncClient("https://script.example/exec", session=FakeSession(status=502))
    with pytest.raises(CloudSyncError, match="502"):
        asyncio.run(client.submit({"id": "r-1"}))


def test_connection_error_raises_cloud_sync_error():
    session = FakeSession(error=aiohttp.ClientConnectionError("refused"))
    client = CloudSyncClient("https://script.example/exec", session=session)
    with pytest.raises(CloudSyncError, match="Connection error"):
        asyncio.run(client.submit({"id": "r-1"}))


def test_timeout_raises_cloud_sync_error():
    session = FakeSession(error=asyncio.TimeoutError())
    client = CloudSyncClient("https://script.example/exec", timeout=3, session=session)
    with pytest.raises(CloudSyncError, match="timed out"):
        asyncio.run(client.submit({"id": "r-1"}))
