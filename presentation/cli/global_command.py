"""`heroes` and `pro` commands: data not tied to one player."""
from __future__ import annotations

from core.logging import get_logger
from . import _style as s
from .session import DashboardSession

TOP_ROWS = 20


class GlobalCommand:
    def __init__(self, session: DashboardSession) -> None:
        self.session = session
        self.log = get_logger(__name__, service="cli")

    async def heroes(self, *, sort_by: str = "win_rate") -> int:
        self.log.info(f"heroes-start sort_by={sort_by}")
        heroes = await self.session.hero_repo.get_global_heroes()
        s.header("HEROES // PUBLIC")
        if not heroes:
            s.no_data("hero statistics unavailable")
            return 1
        key = {
            "win_rate": lambda h: h.win_rate,
            "picks": lambda h: h.total_picks,
            "pro": lambda h: h.pro_pick,
        }[sort_by]
        for h in sorted(heroes, key=key, reverse=True)[:TOP_ROWS]:
            print(f"  {h.localized_name:<22} {h.primary_attr:<4} {h.total_picks:>9} picks  "
                  f"{s.percent(h.win_rate):>4}  pro {h.pro_pick:>4} ({s.percent(h.pro_win_rate)})")
        self.log.success(f"heroes-complete count={len(heroes)}")
        return 0

    async def pro_matches(self) -> int:
        self.log.info("pro-start")
        matches = await self.session.match_repo.get_pro_matches()
        s.header("PRO CIRCUIT // FEED")
        if not matches:
            s.no_data("no professional matches")
            return 1
        for m in matches[:TOP_ROWS]:
            radiant = s.g(m.radiant_name or "Radiant") if m.radiant_win else (m.radiant_name or "Radiant")
            dire = s.g(m.dire_name or "Dire") if not m.radiant_win else (m.dire_name or "Dire")
            print(f"  {m.match_id:>11}  {radiant} {m.radiant_score}-{m.dire_score} {dire}  "
                  f"{s.clock(m.duration)}  {s.dim(m.league_name)}")
        self.log.success(f"pro-complete count={len(matches)}")
        return 0
