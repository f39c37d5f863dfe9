"""Tests for the hosted backend gateway."""

from __future__ import annotations

import json

import httpx
import pytest
import pytest_mock

from zolarus.backend import BackendClient, Profile, Success, Unavailable
from zolarus.backend.client import check_backend
from zolarus.config.settings import Settings

SETTINGS = Settings(supabase_url="https://db.test/", supabase_anon_key="anon-key")


def _client(handler) -> BackendClient:
    return BackendClient(SETTINGS, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_fetch_profile_success() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"id": "u1", "full_name": "Ana Souza", "phone": None}])

    client = _client(handler)
    result = await client.fetch_profile("u1")
    await client.close()

    assert result == Success(Profile(id="u1", full_name="Ana Souza", phone=None))
    assert result.value.first_name == "Ana"
    assert seen[0].url.path == "/rest/v1/profiles"
    assert seen[0].url.params["id"] == "eq.u1"
    assert seen[0].headers["apikey"] == "anon-key"


@pytest.mark.asyncio
async def test_fetch_profile_without_row_is_success_none() -> None:
    client = _client(lambda request: httpx.Response(200, json=[]))

    result = await client.fetch_profile("u1")
    await client.close()

    assert result == Success(None)


@pytest.mark.asyncio
async def test_server_error_becomes_unavailable() -> None:
    client = _client(lambda request: httpx.Response(500, text="boom"))

    result = await client.fetch_profile("u1")
    await client.close()

    assert isinstance(result, Unavailable)
    assert not result.ok
    assert "500" in result.reason
    assert result.value_or(None) is None


@pytest.mark.asyncio
async def test_transport_error_becomes_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = _client(handler)
    result = await client.count_referrals("u1")
    await client.close()

    assert isinstance(result, Unavailable)
    assert result.value_or(0) == 0


@pytest.mark.asyncio
async def test_count_referrals_reads_content_range() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["Prefer"] == "count=exact"
        assert request.url.params["referrer_id"] == "eq.u1"
        return httpx.Response(
            200,
            json=[{"id": 1}, {"id": 2}],
            headers={"Content-Range": "0-1/7"},
        )

    client = _client(handler)
    result = await client.count_referrals("u1")
    await client.close()

    assert result == Success(7)


@pytest.mark.asyncio
async def test_count_referrals_falls_back_to_row_count() -> None:
    client = _client(lambda request: httpx.Response(200, json=[{"id": 1}, {"id": 2}]))

    result = await client.count_referrals("u1")
    await client.close()

    assert result.value_or(0) == 2


@pytest.mark.asyncio
async def test_load_memory_keeps_valid_messages_only() -> None:
    payload = [
        {
            "messages": [
                {"role": "bot", "text": "Hi!"},
                {"role": "system", "text": "ignored"},
                {"role": "user", "text": "open reminders"},
                "junk",
            ]
        }
    ]
    client = _client(lambda request: httpx.Response(200, json=payload))

    result = await client.load_memory("u1")
    await client.close()

    assert result == Success(
        [
            {"role": "bot", "text": "Hi!"},
            {"role": "user", "text": "open reminders"},
        ]
    )


@pytest.mark.asyncio
async def test_save_memory_upserts_transcript() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201)

    client = _client(handler)
    result = await client.save_memory("u1", [{"role": "user", "text": "hello"}])
    await client.close()

    assert result == Success(True)
    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/rest/v1/zola_memories"
    assert "merge-duplicates" in request.headers["Prefer"]
    assert json.loads(request.content) == {
        "user_id": "u1",
        "messages": [{"role": "user", "text": "hello"}],
    }


@pytest.mark.asyncio
async def test_get_user_sends_access_token() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["Authorization"] == "Bearer user-token"
        return httpx.Response(200, json={"id": "u1", "email": "ana@example.com"})

    client = _client(handler)
    result = await client.get_user("user-token")
    await client.close()

    assert result.value_or({})["email"] == "ana@example.com"


def test_missing_url_is_rejected() -> None:
    with pytest.raises(RuntimeError):
        BackendClient(Settings(supabase_url=""))


@pytest.mark.asyncio
async def test_check_backend_success(mocker: pytest_mock.MockerFixture) -> None:
    client_mock = mocker.patch("zolarus.backend.client.BackendClient", autospec=True)
    instance = client_mock.return_value
    instance.ping = mocker.AsyncMock(return_value=True)
    instance.close = mocker.AsyncMock(return_value=None)

    reachable, message = await check_backend(SETTINGS)

    assert reachable
    assert message == "Backend is reachable."
    instance.ping.assert_awaited_once()
    instance.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_check_backend_failure(mocker: pytest_mock.MockerFixture) -> None:
    client_mock = mocker.patch("zolarus.backend.client.BackendClient", autospec=True)
    instance = client_mock.return_value
    instance.ping = mocker.AsyncMock(return_value=False)
    instance.close = mocker.AsyncMock(return_value=None)

    reachable, message = await check_backend(SETTINGS)

    assert not reachable
    assert "non-success" in message.lower()
