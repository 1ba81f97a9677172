"""`player` command: profile header plus one optional tab."""
from __future__ import annotations

from application.use_cases import PlayerOverview, PlayerOverviewUseCase
from core.logging import get_logger
from . import _style as s
from .session import DashboardSession

TABS = ("overview", "heroes", "peers", "counts")
TOP_ROWS = 15


class PlayerCommand:
    def __init__(self, session: DashboardSession) -> None:
        self.session = session
        self.log = get_logger(__name__, service="cli")
        self.use_case = PlayerOverviewUseCase(session.player_repo, session.match_repo)

    async def run(self, account_id: int, *, tab: str = "overview", limit: int = 50) -> int:
        self.log.info(f"player-start account_id={account_id} tab={tab}")
        overview = await self.use_case.execute(account_id, limit=limit)
        if not overview.found:
            self.log.warning(f"player-not-found account_id={account_id}")
            s.header(f"PLAYER // {account_id}")
            print(f"  {s.r('SUBJECT NOT FOUND')} {s.dim('check the account id')}")
            return 1

        self._render_header(overview)
        if tab == "heroes":
            await self._render_heroes(account_id)
        elif tab == "peers":
            await self._render_peers(account_id)
        elif tab == "counts":
            await self._render_counts(account_id)
        else:
            await self._render_recent(overview)
        self.log.success(f"player-complete account_id={account_id} tab={tab}")
        return 0

    def _render_header(self, overview: PlayerOverview) -> None:
        profile = overview.profile
        s.header(f"{profile.personaname} // {overview.account_id}")
        if profile.loccountrycode:
            print(f"  LOC: {profile.loccountrycode}")
        if profile.medal:
            print(f"  RANK: medal {profile.medal} ★{profile.stars}"
                  + (f"  #{profile.leaderboard_rank}" if profile.leaderboard_rank else ""))
        if overview.win_loss:
            wl = overview.win_loss
            print(f"  RECORD: {wl.win}W-{wl.lose}L  ({overview.win_rate * 100:.1f}%)")
        print(f"  AVG KDA: {overview.average_kda:.2f}   AVG DURATION: {overview.average_duration_minutes:.0f} MIN")

    async def _render_recent(self, overview: PlayerOverview) -> None:
        print(s.rule("─"))
        if not overview.recent_matches:
            s.no_data("no recent matches")
            return
        await self.session.hero_catalog.ensure_loaded()
        catalog = self.session.hero_catalog
        for m in overview.recent_matches:
            outcome = s.g("WON ") if m.won else s.r("LOST")
            print(f"  {m.match_id:>12}  {outcome}  {catalog.hero_name(m.hero_id):<20} "
                  f"{m.kills}/{m.deaths}/{m.assists}  {s.clock(m.duration)}  {s.dim(s.date(m.start_time))}")

    async def _render_heroes(self, account_id: int) -> None:
        print(s.rule("─"))
        heroes = await self.use_case.load_heroes(account_id)
        if not heroes:
            s.no_data("no hero statistics")
            return
        await self.session.hero_catalog.ensure_loaded()
        for h in heroes[:TOP_ROWS]:
            print(f"  {self.session.hero_catalog.hero_name(h.hero_id):<22} {h.games:>5} games  {s.percent(h.win_rate):>4}")

    async def _render_peers(self, account_id: int) -> None:
        print(s.rule("─"))
        peers = await self.use_case.load_peers(account_id)
        if not peers:
            s.no_data("no peers")
            return
        for p in peers[:TOP_ROWS]:
            print(f"  {p.personaname or p.account_id!s:<24} with {p.with_games:>4} games  {s.percent(p.with_win_rate):>4}")

    async def _render_counts(self, account_id: int) -> None:
        print(s.rule("─"))
        counts = await self.use_case.load_counts(account_id)
        if counts is None or not counts.categories:
            s.no_data("no counts")
            return
        for name in ("game_mode", "lobby_type", "lane_role"):
            buckets = counts.category(name)
            if not buckets:
                continue
            print(f"  {s.c(name)}")
            for key, bucket in sorted(buckets.items(), key=lambda kv: kv[1].games, reverse=True):
                print(f"    {key:>4}: {bucket.games:>5} games  {s.percent(bucket.win_rate):>4}")
