"""Tests for the aiohttp APIClient against a local test server."""

import asyncio

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp import test_utils

from medicine_reminder.shared.core.exceptions import APIResponseError, APITimeoutError, ExternalAPIError
from medicine_reminder.shared.infrastructure.external_apis.api_client import APIClient, create_api_client


async def echo(request):
    return web.json_response({"received": await request.json()})


async def conflict(request):
    return web.json_response({"error": "userAlreadyExists"}, status=409)


async def plain_error(request):
    return web.Response(text="upstream exploded", status=502)


async def not_json(request):
    return web.Response(text="<html>ok</html>", status=200)


async def empty(request):
    return web.Response(status=204)


async def slow(request):
    await asyncio.sleep(1)
    return web.json_response({})


async def garbled_ok(request):
    return web.Response(body=b"\xff\xfe\xfa", status=200, content_type="application/json")


async def garbled_error(request):
    return web.Response(body=b"\xff\xfe\xfa", status=500, content_type="application/json")


@pytest_asyncio.fixture
async def server():
    app = web.Application()
    app.router.add_post("/echo", echo)
    app.router.add_post("/conflict", conflict)
    app.router.add_post("/plain-error", plain_error)
    app.router.add_post("/not-json", not_json)
    app.router.add_post("/empty", empty)
    app.router.add_post("/slow", slow)
    app.router.add_post("/garbled-ok", garbled_ok)
    app.router.add_post("/garbled-error", garbled_error)
    test_server = test_utils.TestServer(app)
    await test_server.start_server()
    yield test_server
    await test_server.close()


@pytest_asyncio.fixture
async def client(server):
    api_client = APIClient(base_url=str(server.make_url("/")), api_name="test-api", timeout=5)
    yield api_client
    await api_client.close()


class TestAPIClient:

    @pytest.mark.asyncio
    async def test_post_returns_decoded_json(self, client):
        assert await client.post("/echo", {"email": "a@b.com"}) == {"received": {"email": "a@b.com"}}
        assert client.get_stats()["successful_requests"] == 1

    @pytest.mark.asyncio
    async def test_empty_body_returns_none(self, client):
        assert await client.post("/empty") is None

    @pytest.mark.asyncio
    async def test_error_status_carries_status_and_json_body(self, client):
        with pytest.raises(APIResponseError) as exc_info:
            await client.post("/conflict", {})
        assert exc_info.value.status == 409
        assert exc_info.value.data == {"error": "userAlreadyExists"}
        assert exc_info.value.to_dict()["error"]["code"] == "API_RESPONSE_ERROR"
        assert client.get_stats()["failed_requests"] == 1

    @pytest.mark.asyncio
    async def test_error_status_with_text_body(self, client):
        with pytest.raises(APIResponseError) as exc_info:
            await client.post("/plain-error", {})
        assert exc_info.value.status == 502
        assert exc_info.value.data == "upstream exploded"

    @pytest.mark.asyncio
    async def test_undecodable_success_body(self, client):
        with pytest.raises(ExternalAPIError) as exc_info:
            await client.post("/not-json", {})
        assert not isinstance(exc_info.value, APIResponseError)

    @pytest.mark.asyncio
    async def test_non_utf8_success_body(self, client):
        with pytest.raises(ExternalAPIError) as exc_info:
            await client.post("/garbled-ok", {})
        assert not isinstance(exc_info.value, APIResponseError)

    @pytest.mark.asyncio
    async def test_non_utf8_error_body_has_no_data(self, client):
        with pytest.raises(APIResponseError) as exc_info:
            await client.post("/garbled-error", {})
        assert exc_info.value.status == 500
        assert exc_info.value.data is None

    @pytest.mark.asyncio
    async def test_timeout(self, server):
        api_client = APIClient(base_url=str(server.make_url("/")), api_name="test-api", timeout=0.1)
        try:
            with pytest.raises(APITimeoutError):
                await api_client.post("/slow", {})
        finally:
            await api_client.close()

    @pytest.mark.asyncio
    async def test_connection_refused_is_transport_error(self, unused_tcp_port):
        api_client = APIClient(base_url=f"http://127.0.0.1:{unused_tcp_port}", api_name="test-api", timeout=2)
        try:
            with pytest.raises(ExternalAPIError) as exc_info:
                await api_client.post("/echo", {})
            assert not isinstance(exc_info.value, APIResponseError)
        finally:
            await api_client.close()

    @pytest.mark.asyncio
    async def test_context_manager_closes_session(self, server):
        async with APIClient(base_url=str(server.make_url("/")), api_name="test-api") as api_client:
            await api_client.post("/echo", {})
            assert api_client.session is not None
        assert api_client.session is None

    def test_factory_uses_settings(self, settings):
        api_client = create_api_client(settings)
        assert api_client.base_url == "http://api.example.com"
        assert api_client.timeout == settings.API_TIMEOUT
        assert api_client.build_url("/auth/login") == "http://api.example.com/auth/login"
