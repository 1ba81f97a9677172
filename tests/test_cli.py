"""End-to-end command tests against a mocked OpenDota."""

from __future__ import annotations

import asyncio
import json
import logging
from types import SimpleNamespace

import httpx

from presentation.cli import DashboardSession, MatchCommand, PartyCommand, PlayerCommand
from tests.factories import BASE_URL, SUBJECT_ID

A, B = 2001, 2002

CONFIG = SimpleNamespace(
    OPENDOTA_BASE_URL=BASE_URL,
    OPENDOTA_API_KEY=None,
    MIN_REQUEST_INTERVAL_MS=0,
    THROTTLE_PENALTY_MS=1,
    MAX_THROTTLE_RETRIES=3,
    REQUEST_TIMEOUT=5.0,
    BEST_COMBO_MIN_MATCHES=2,
)


def _match(match_id: int, teammates: list[int], radiant_win: bool) -> dict:
    players = [{"account_id": SUBJECT_ID, "player_slot": 0, "hero_id": 1, "personaname": "subject"}]
    players += [
        {"account_id": mate, "player_slot": i, "hero_id": 10 + i, "personaname": f"mate{mate}"}
        for i, mate in enumerate(teammates, start=1)
    ]
    players += [{"account_id": None, "player_slot": 128 + i, "hero_id": 90 + i} for i in range(5)]
    return {"match_id": match_id, "radiant_win": radiant_win, "duration": 1800,
            "start_time": 1_700_000_000, "players": players}


MATCHES = {
    1: _match(1, [A, B], True),
    2: _match(2, [B, A], True),
    3: _match(3, [], False),
}


def handler(request: httpx.Request) -> httpx.Response:
    path = request.url.path.removeprefix("/api")
    if path == f"/players/{SUBJECT_ID}/matches":
        rows = [{"match_id": i, "player_slot": 0, "radiant_win": True, "hero_id": 1,
                 "duration": 1800, "start_time": 1_700_000_000} for i in (1, 2, 3, 4)]
        return httpx.Response(200, json=rows)
    if path == f"/players/{SUBJECT_ID}":
        return httpx.Response(200, json={"profile": {"account_id": SUBJECT_ID, "personaname": "subject"}})
    if path == f"/players/{SUBJECT_ID}/wl":
        return httpx.Response(200, json={"win": 2, "lose": 1})
    if path == "/heroes":
        return httpx.Response(200, json=[{"id": 1, "name": "npc_dota_hero_antimage", "localized_name": "Anti-Mage"}])
    if path.startswith("/matches/"):
        match = MATCHES.get(int(path.rsplit("/", 1)[-1]))
        return httpx.Response(200, json=match) if match else httpx.Response(404)
    if path.startswith("/request/"):
        return httpx.Response(200, json={"job": {"jobId": 1}})
    return httpx.Response(404, json={"error": "Not Found"})


def _run(command_cls, call):
    async def scenario() -> int:
        async with DashboardSession(CONFIG, transport=httpx.MockTransport(handler)) as session:
            return await call(command_cls(session))

    return asyncio.run(scenario())


def test_party_command_prints_json_report(capsys) -> None:
    code = _run(PartyCommand, lambda cmd: cmd.run(SUBJECT_ID, limit=4, as_json=True))

    report = json.loads(capsys.readouterr().out)
    assert code == 0
    assert report["matches"] == 3
    assert report["skipped_match_ids"] == [4]
    assert report["best_combo"] == f"{A},{B}"
    assert [p["id"] for p in report["parties"]] == [f"{A},{B}", "SOLO"]
    assert report["parties"][0]["wins"] == 2
    assert report["parties"][0]["matches"][0]["played_hero_name"] == "Anti-Mage"


def test_party_command_renders_table(capsys) -> None:
    code = _run(PartyCommand, lambda cmd: cmd.run(SUBJECT_ID, limit=4))

    out = capsys.readouterr().out
    assert code == 0
    assert "OPTIMAL SQUAD" in out
    assert f"mate{A}" in out
    assert "[SOLO]" in out


def test_party_command_without_history(capsys) -> None:
    code = _run(PartyCommand, lambda cmd: cmd.run(42, limit=4))
    assert code == 1
    assert "NO DATA" in capsys.readouterr().out


def test_player_command_for_unknown_account(capsys) -> None:
    code = _run(PlayerCommand, lambda cmd: cmd.run(42))
    assert code == 1
    assert "SUBJECT NOT FOUND" in capsys.readouterr().out


def test_player_command_overview(capsys) -> None:
    code = _run(PlayerCommand, lambda cmd: cmd.run(SUBJECT_ID, limit=4))
    out = capsys.readouterr().out
    assert code == 0
    assert "RECORD: 2W-1L" in out
    assert "Anti-Mage" in out


def test_match_command_shows_anonymous_players(capsys) -> None:
    code = _run(MatchCommand, lambda cmd: cmd.run(1))
    out = capsys.readouterr().out
    assert code == 0
    assert "RADIANT VICTORY" in out
    assert "Anonymous" in out


def test_parse_request(capsys) -> None:
    assert _run(MatchCommand, lambda cmd: cmd.request_parse(1)) == 0
    assert "ACCEPTED" in capsys.readouterr().out


def test_commands_log_their_outcome(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="presentation.cli"):
        _run(PartyCommand, lambda cmd: cmd.run(SUBJECT_ID, limit=4))
        _run(PlayerCommand, lambda cmd: cmd.run(42))

    messages = [(r.levelname, r.getMessage()) for r in caplog.records if r.name.startswith("presentation.cli")]
    assert ("INFO", f"party-start account_id={SUBJECT_ID} limit=4") in messages
    assert ("SUCCESS", f"party-complete account_id={SUBJECT_ID} parties=2") in messages
    assert ("WARNING", "player-not-found account_id=42") in messages
    assert all(r.service == "cli" for r in caplog.records if r.name.startswith("presentation.cli"))
