"""Use case: reconstruct a player's parties from recent matches."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from application.services.hero_catalog import HeroCatalog
from application.services.party_analysis import analyze_match, best_combo, group_matches_by_party
from core.logging import context
from domain.entities import ExtendedMatch, MatchDetail, MatchSummary, PartyGroup
from domain.interfaces import IMatchRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PartyReport:
    account_id: int
    matches: tuple[ExtendedMatch, ...]
    parties: tuple[PartyGroup, ...]
    best_combo: Optional[PartyGroup] = None
    skipped_match_ids: tuple[int, ...] = field(default_factory=tuple)

    @property
    def has_data(self) -> bool:
        return bool(self.matches)

    @property
    def wins(self) -> int:
        return sum(p.wins for p in self.parties)

    @property
    def losses(self) -> int:
        return sum(p.losses for p in self.parties)


class BuildPartyReportUseCase:
    """
    Fetch summaries, fetch each match detail, analyze, group.

    All detail requests are submitted at once; the gateway serializes them,
    so this only saves the round-trips between awaits. A match whose detail
    is missing or does not contain the player is skipped, never fatal.
    """

    def __init__(
        self,
        match_repo: IMatchRepository,
        hero_catalog: HeroCatalog,
        best_combo_min_matches: int = 2,
    ):
        self.match_repo = match_repo
        self.hero_catalog = hero_catalog
        self.best_combo_min_matches = best_combo_min_matches

    async def execute(self, account_id: int, limit: int = 50) -> PartyReport:
        with context(account_id=account_id):
            await self.hero_catalog.ensure_loaded()
            summaries = await self.match_repo.get_recent_matches(account_id, limit=limit)
            if not summaries:
                logger.info(f"no recent matches for {account_id}")
                return PartyReport(account_id=account_id, matches=(), parties=())

            details: List[Optional[MatchDetail]] = await asyncio.gather(
                *(self.match_repo.get_match_details(s.match_id) for s in summaries)
            )
            return self._build(account_id, summaries, details)

    def _build(
        self,
        account_id: int,
        summaries: List[MatchSummary],
        details: List[Optional[MatchDetail]],
    ) -> PartyReport:
        matches: List[ExtendedMatch] = []
        skipped: List[int] = []
        for summary, detail in zip(summaries, details):
            extended = analyze_match(account_id, summary, detail, self.hero_catalog.hero_name)
            if extended is None:
                skipped.append(summary.match_id)
            else:
                matches.append(extended)

        parties = group_matches_by_party(matches)
        if skipped:
            logger.warning(f"{len(skipped)} of {len(summaries)} matches skipped for {account_id}")
        logger.info(f"party-report {account_id} matches={len(matches)} parties={len(parties)}")
        return PartyReport(
            account_id=account_id,
            matches=tuple(matches),
            parties=tuple(parties),
            best_combo=best_combo(parties, min_matches=self.best_combo_min_matches),
            skipped_match_ids=tuple(skipped),
        )
