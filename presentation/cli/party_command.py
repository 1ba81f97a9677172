"""`party` command: the subject's parties and their records."""
from __future__ import annotations

import json

from application.use_cases import BuildPartyReportUseCase, PartyReport
from core.logging import get_logger
from domain.entities import PartyGroup
from . import _style as s
from .session import DashboardSession


class PartyCommand:
    def __init__(self, session: DashboardSession) -> None:
        self.session = session
        self.log = get_logger(__name__, service="cli")

    async def run(self, account_id: int, *, limit: int, as_json: bool = False) -> int:
        use_case = BuildPartyReportUseCase(
            self.session.match_repo,
            self.session.hero_catalog,
            best_combo_min_matches=self.session.config.BEST_COMBO_MIN_MATCHES,
        )
        self.log.info(f"party-start account_id={account_id} limit={limit}")
        report = await use_case.execute(account_id, limit=limit)
        if as_json:
            print(json.dumps(self._to_json(report), separators=(",", ":"), ensure_ascii=False))
        else:
            self._render(report)
        if not report.has_data:
            self.log.warning(f"party-empty account_id={account_id}")
            return 1
        self.log.success(f"party-complete account_id={account_id} parties={len(report.parties)}")
        return 0

    def _to_json(self, report: PartyReport) -> dict:
        return {
            "account_id": report.account_id,
            "matches": len(report.matches),
            "skipped_match_ids": list(report.skipped_match_ids),
            "best_combo": report.best_combo.id if report.best_combo else None,
            "parties": [p.to_dict() for p in report.parties],
        }

    def _member_names(self, party: PartyGroup) -> str:
        if party.is_solo:
            return s.dim("[SOLO]")
        catalog = self.session.hero_catalog
        return ", ".join(
            f"{m.personaname} ({catalog.hero_name(m.most_played_hero_id)})" for m in party.teammates
        )

    def _render(self, report: PartyReport) -> None:
        s.header(f"PARTIES // {report.account_id}")
        if not report.has_data:
            s.no_data("no analyzable matches")
            return

        print(f"  matches: {len(report.matches)}   skipped: {len(report.skipped_match_ids)}")
        best = report.best_combo
        if best is not None:
            print(f"  {s.g('OPTIMAL SQUAD')} {s.percent(best.win_rate)} "
                  f"{best.wins}W-{best.losses}L  {self._member_names(best)}")
        print(s.rule("─"))
        print(f"  {'GAMES':>5}  {'W-L':>7}  {'WR':>4}  MEMBERS")
        for party in report.parties:
            record = f"{party.wins}-{party.losses}"
            rate = s.percent(party.win_rate)
            rate = s.g(f"{rate:>4}") if party.win_rate >= 0.5 else s.r(f"{rate:>4}")
            print(f"  {party.games:>5}  {record:>7}  {rate}  {self._member_names(party)}")
