"""Tests for the best-effort OpenDota wrappers."""

from __future__ import annotations

import asyncio
from types import SimpleNamespace

import httpx
import pytest

from infrastructure.api import OpenDotaClient, RequestGateway
from tests.factories import BASE_URL, FakeClock


def _client(handler, clock: FakeClock | None = None) -> OpenDotaClient:
    clock = clock or FakeClock()
    gateway = RequestGateway(
        BASE_URL,
        min_interval_ms=0,
        throttle_penalty_ms=1000,
        transport=httpx.MockTransport(handler),
        clock=clock,
        sleep=clock.sleep,
    )
    return OpenDotaClient(gateway)


def _run(handler, call):
    async def scenario():
        async with _client(handler) as client:
            return await call(client)

    return asyncio.run(scenario())


def test_profile_is_returned_as_decoded_json() -> None:
    payload = {"profile": {"account_id": 1, "personaname": "sub"}, "rank_tier": 55}
    result = _run(lambda r: httpx.Response(200, json=payload), lambda c: c.get_player_profile(1))
    assert result == payload


@pytest.mark.parametrize("status", [400, 404, 500, 503])
def test_single_entity_lookups_are_absent_on_error_status(status: int) -> None:
    handler = lambda r: httpx.Response(status, json={"error": "nope"})
    assert _run(handler, lambda c: c.get_player_profile(1)) is None
    assert _run(handler, lambda c: c.get_player_win_loss(1)) is None
    assert _run(handler, lambda c: c.get_player_counts(1)) is None
    assert _run(handler, lambda c: c.get_match_details(1)) is None


@pytest.mark.parametrize("status", [404, 500])
def test_list_lookups_are_empty_on_error_status(status: int) -> None:
    handler = lambda r: httpx.Response(status)
    assert _run(handler, lambda c: c.get_recent_matches(1)) == []
    assert _run(handler, lambda c: c.get_player_peers(1)) == []
    assert _run(handler, lambda c: c.get_player_heroes(1)) == []
    assert _run(handler, lambda c: c.get_hero_stats()) == []
    assert _run(handler, lambda c: c.get_heroes()) == []
    assert _run(handler, lambda c: c.get_pro_matches()) == []


def test_network_failure_degrades_to_absent_and_empty() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("dns failure", request=request)

    assert _run(handler, lambda c: c.get_match_details(42)) is None
    assert _run(handler, lambda c: c.get_recent_matches(1)) == []


def test_invalid_json_degrades_to_absent() -> None:
    handler = lambda r: httpx.Response(200, content=b"<html>oops</html>")
    assert _run(handler, lambda c: c.get_player_profile(1)) is None
    assert _run(handler, lambda c: c.get_player_peers(1)) == []


def test_unexpected_payload_shape_is_rejected() -> None:
    assert _run(lambda r: httpx.Response(200, json=[1, 2]), lambda c: c.get_player_profile(1)) is None
    assert _run(lambda r: httpx.Response(200, json={"rows": []}), lambda c: c.get_pro_matches()) == []


def test_recent_matches_requests_the_history_limit() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"match_id": 1}])

    result = _run(handler, lambda c: c.get_recent_matches(77, limit=50))
    assert result == [{"match_id": 1}]
    assert seen[0].url.path == "/api/players/77/matches"
    assert seen[0].url.params["limit"] == "50"


def test_throttling_is_invisible_to_wrapper_callers() -> None:
    clock = FakeClock()
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(429) if calls == 1 else httpx.Response(200, json={"win": 3, "lose": 1})

    async def scenario():
        async with _client(handler, clock) as client:
            return await client.get_player_win_loss(5)

    assert asyncio.run(scenario()) == {"win": 3, "lose": 1}
    assert clock.sleeps == [pytest.approx(1.0)]


def test_match_parse_request_is_fire_and_forget() -> None:
    seen: list[tuple[str, str]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path))
        return httpx.Response(200, json={"job": {"jobId": 1}})

    async def scenario():
        client = _client(handler)
        await client.__aenter__()
        task = client.request_match_parse(123)
        assert isinstance(task, asyncio.Task)
        assert not task.done()
        await client.aclose()
        return task

    task = asyncio.run(scenario())
    assert task.result() is True
    assert seen == [("POST", "/api/request/123")]


def test_failed_match_parse_request_resolves_false() -> None:
    async def scenario():
        async with _client(lambda r: httpx.Response(500)) as client:
            return await client.request_match_parse(9)

    assert asyncio.run(scenario()) is False


def test_from_settings_wires_the_gateway() -> None:
    config = SimpleNamespace(
        OPENDOTA_BASE_URL=BASE_URL,
        OPENDOTA_API_KEY="k",
        MIN_REQUEST_INTERVAL_MS=100,
        THROTTLE_PENALTY_MS=2000,
        MAX_THROTTLE_RETRIES=None,
        REQUEST_TIMEOUT=5.0,
    )
    client = OpenDotaClient.from_settings(config)
    gateway = client.gateway
    assert gateway.base_url == BASE_URL
    assert gateway.min_interval_ms == 100
    assert gateway.throttle_penalty_ms == 2000
    assert gateway.max_throttle_retries is None
    assert gateway.default_params == {"api_key": "k"}


def test_parse_requested_while_closing_is_still_sent() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        return httpx.Response(200, json={})

    async def scenario():
        client = _client(handler)
        await client.__aenter__()
        first = client.request_match_parse(1)
        closing = asyncio.create_task(client.aclose())
        await asyncio.sleep(0)  # aclose() is waiting on the first request
        second = client.request_match_parse(2)
        await asyncio.wait_for(closing, 1.0)
        return first, second

    first, second = asyncio.run(scenario())
    assert first.result() is True
    assert second.result() is True
    assert seen == ["/api/request/1", "/api/request/2"]


def test_lookup_after_close_is_absent() -> None:
    async def scenario():
        client = _client(lambda r: httpx.Response(200, json={"win": 1, "lose": 0}))
        async with client:
            pass
        return await client.get_player_win_loss(1), await client.get_recent_matches(1)

    assert asyncio.run(scenario()) == (None, [])
