"""Main CLI entry-point."""
from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Optional

from core.logging import bootstrap_logging, shutdown_logging
from config import settings
from presentation.cli import DashboardSession, GlobalCommand, MatchCommand, PartyCommand, PlayerCommand
from presentation.cli import _style as s
from presentation.cli.player_command import TABS


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dota-terminal",
        description="Dota 2 player, party and match statistics from OpenDota.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    party = sub.add_parser("party", help="group recent matches by party")
    party.add_argument("account_id", type=int)
    party.add_argument("--limit", type=int, default=settings.RECENT_MATCHES_LIMIT)
    party.add_argument("--json", action="store_true", help="print the report as JSON")

    player = sub.add_parser("player", help="profile, record and one tab of details")
    player.add_argument("account_id", type=int)
    player.add_argument("--tab", choices=TABS, default="overview")
    player.add_argument("--limit", type=int, default=settings.RECENT_MATCHES_LIMIT)

    match = sub.add_parser("match", help="scoreboard of one match")
    match.add_argument("match_id", type=int)

    parse = sub.add_parser("parse", help="ask upstream to parse a match replay")
    parse.add_argument("match_id", type=int)

    heroes = sub.add_parser("heroes", help="public hero statistics")
    heroes.add_argument("--sort", choices=("win_rate", "picks", "pro"), default="win_rate")

    sub.add_parser("pro", help="latest professional matches")
    return parser


async def _dispatch(args: argparse.Namespace) -> int:
    async with DashboardSession(settings) as session:
        if args.command == "party":
            return await PartyCommand(session).run(args.account_id, limit=args.limit, as_json=args.json)
        if args.command == "player":
            return await PlayerCommand(session).run(args.account_id, tab=args.tab, limit=args.limit)
        if args.command == "match":
            return await MatchCommand(session).run(args.match_id)
        if args.command == "parse":
            return await MatchCommand(session).request_parse(args.match_id)
        if args.command == "heroes":
            return await GlobalCommand(session).heroes(sort_by=args.sort)
        return await GlobalCommand(session).pro_matches()


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        settings.validate()
    except ValueError as e:
        print(s.r(f"Configuration error: {e}"), file=sys.stderr)
        return 2

    settings.create_directories()
    bootstrap_logging(
        service="dashboard",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="dashboard.jsonl",
    )
    try:
        return asyncio.run(_dispatch(args))
    except KeyboardInterrupt:
        print(f"\n  {s.y('Interrupted.')}")
        return 130
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
