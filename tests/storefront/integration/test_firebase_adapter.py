"""Tests for the Firebase REST adapter against a mocked HTTP transport."""

import asyncio
import json

import httpx
import pytest
from storefront.exceptions import RemoteCallError
from storefront.remote.firebase_adapter import FirebaseDatabase
from storefront.remote.service import RemoteService

BASE_URL = "https://demo-default-rtdb.firebaseio.com/"


def _database(handler, auth_token=None):
    return FirebaseDatabase(BASE_URL, auth_token=auth_token, transport=httpx.MockTransport(handler))


def _run(database, coro_factory):
    async def scenario():
        try:
            return await coro_factory()
        finally:
            await database.aclose()

    return asyncio.run(scenario())


class TestGet:
    def test_get_builds_json_url(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"m1": {"name": "Sushi", "price": 22.99}})

        database = _database(handler)
        data = _run(database, lambda: database.get("/menu/"))

        assert data == {"m1": {"name": "Sushi", "price": 22.99}}
        assert seen[0].method == "GET"
        assert seen[0].url.host == "demo-default-rtdb.firebaseio.com"
        assert seen[0].url.path == "/menu.json"

    def test_auth_token_sent_as_query_param(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, content=b"null")

        database = _database(handler, auth_token="s3cret")
        assert _run(database, lambda: database.get("menu")) is None
        assert seen[0].url.params["auth"] == "s3cret"

    def test_http_error_status_raises(self):
        database = _database(lambda request: httpx.Response(401, json={"error": "Permission denied"}))
        with pytest.raises(RemoteCallError) as exc:
            _run(database, lambda: database.get("/menu"))
        assert exc.value.status_code == 401

    def test_connection_error_raises(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        database = _database(handler)
        with pytest.raises(RemoteCallError):
            _run(database, lambda: database.get("/menu"))

    def test_non_json_body_raises(self):
        database = _database(lambda request: httpx.Response(200, text="<html>maintenance</html>"))
        with pytest.raises(RemoteCallError):
            _run(database, lambda: database.get("/menu"))

    def test_malformed_base_url_raises(self):
        database = FirebaseDatabase(
            "https://demo\x00.firebaseio.com", transport=httpx.MockTransport(lambda request: httpx.Response(200))
        )
        with pytest.raises(RemoteCallError):
            _run(database, lambda: database.get("/menu"))


class TestPush:
    def test_push_posts_body_and_returns_name(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"name": "-NxYz123"})

        database = _database(handler)
        key = _run(database, lambda: database.push("/orders", {"name": "Ada", "totalAmount": 62.48}))

        assert key == "-NxYz123"
        assert seen[0].method == "POST"
        assert seen[0].url.path == "/orders.json"
        assert json.loads(seen[0].content) == {"name": "Ada", "totalAmount": 62.48}

    def test_push_without_key_raises(self):
        database = _database(lambda request: httpx.Response(200, json={}))
        with pytest.raises(RemoteCallError):
            _run(database, lambda: database.push("/orders", {"name": "Ada"}))


class TestThroughRemoteService:
    def test_server_error_becomes_failed_result(self):
        database = _database(lambda request: httpx.Response(503, text="unavailable"))
        service = RemoteService(database)

        async def scenario():
            try:
                return await service.create("/orders", {"name": "Ada"})
            finally:
                await service.aclose()

        result = asyncio.run(scenario())
        assert not result.success
        assert "503" in result.error

    def test_read_many_over_http(self):
        database = _database(
            lambda request: httpx.Response(200, json={"m1": {"name": "Sushi", "price": 22.99}})
        )
        service = RemoteService(database)

        async def scenario():
            try:
                return await service.read_many("/menu")
            finally:
                await service.aclose()

        result = asyncio.run(scenario())
        assert result.data == [{"id": "m1", "name": "Sushi", "price": 22.99}]

    def test_malformed_base_url_becomes_failed_result(self):
        database = FirebaseDatabase("https://demo\x00.firebaseio.com")
        service = RemoteService(database)

        async def scenario():
            try:
                return await service.read("/menu")
            finally:
                await service.aclose()

        result = asyncio.run(scenario())
        assert not result.success
        assert result.error
