"""`match` and `parse` commands."""
from __future__ import annotations

from core.logging import get_logger
from domain.enums import TeamSide
from . import _style as s
from .session import DashboardSession


class MatchCommand:
    def __init__(self, session: DashboardSession) -> None:
        self.session = session
        self.log = get_logger(__name__, service="cli")

    async def run(self, match_id: int) -> int:
        self.log.info(f"match-start match_id={match_id}")
        detail = await self.session.match_repo.get_match_details(match_id)
        s.header(f"MATCH // {match_id}")
        if detail is None:
            self.log.warning(f"match-not-found match_id={match_id}")
            print(f"  {s.r('MATCH NOT FOUND')} {s.dim('it may not be available upstream yet')}")
            return 1

        await self.session.hero_catalog.ensure_loaded()
        catalog = self.session.hero_catalog
        winner = detail.winning_side.label.upper()
        print(f"  {s.g(winner + ' VICTORY')}  {detail.radiant_score} - {detail.dire_score}  "
              f"{s.clock(detail.duration)}  {s.dim(s.date(detail.start_time))}")
        for side in (TeamSide.RADIANT, TeamSide.DIRE):
            print(s.rule("─"))
            print(f"  {s.c(side.label.upper())}")
            for p in detail.players_on(side):
                name = p.personaname or ("Anonymous" if p.is_anonymous else str(p.account_id))
                print(f"  {name[:18]:<18} {catalog.hero_name(p.hero_id)[:16]:<16} "
                      f"{p.kills:>2}/{p.deaths:>2}/{p.assists:>2}  "
                      f"{p.total_gold(detail.duration) / 1000:>5.1f}k  "
                      f"{p.gold_per_min:>4}/{p.xp_per_min:<4}  {p.hero_damage / 1000:>5.1f}k dmg")
        self.log.success(f"match-complete match_id={match_id} players={len(detail.players)}")
        return 0

    async def request_parse(self, match_id: int) -> int:
        task = self.session.client.request_match_parse(match_id)
        print(f"  parse requested for {match_id} {s.dim('(queued)')}")
        accepted = await task
        self.log.info(f"parse-requested match_id={match_id} accepted={accepted}")
        print(f"  {s.g('ACCEPTED') if accepted else s.y('NOT ACCEPTED')}")
        return 0 if accepted else 1
