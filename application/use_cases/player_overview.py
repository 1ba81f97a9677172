"""Use case: a player's profile page."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from core.logging import context
from domain.entities import MatchSummary, Peer, PlayerCounts, PlayerHeroStats, PlayerProfile, WinLoss
from domain.interfaces import IMatchRepository, IPlayerRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerOverview:
    account_id: int
    profile: Optional[PlayerProfile]
    win_loss: Optional[WinLoss]
    recent_matches: tuple[MatchSummary, ...] = field(default_factory=tuple)

    @property
    def found(self) -> bool:
        return self.profile is not None

    @property
    def win_rate(self) -> float:
        return self.win_loss.win_rate if self.win_loss else 0.0

    @property
    def average_kda(self) -> float:
        """Mean of (kills + assists) / max(deaths, 1) over recent matches."""
        if not self.recent_matches:
            return 0.0
        total = sum((m.kills + m.assists) / max(m.deaths, 1) for m in self.recent_matches)
        return total / len(self.recent_matches)

    @property
    def average_duration_minutes(self) -> float:
        if not self.recent_matches:
            return 0.0
        return sum(m.duration for m in self.recent_matches) / len(self.recent_matches) / 60.0


class PlayerOverviewUseCase:
    """Loads the header data together; tab data (peers, heroes, counts) on demand."""

    def __init__(self, player_repo: IPlayerRepository, match_repo: IMatchRepository):
        self.player_repo = player_repo
        self.match_repo = match_repo

    async def execute(self, account_id: int, limit: int = 50) -> PlayerOverview:
        with context(account_id=account_id):
            profile, win_loss, matches = await asyncio.gather(
                self.player_repo.get_profile(account_id),
                self.player_repo.get_win_loss(account_id),
                self.match_repo.get_recent_matches(account_id, limit=limit),
            )
            if profile is None:
                logger.info(f"player {account_id} not found")
            return PlayerOverview(
                account_id=account_id,
                profile=profile,
                win_loss=win_loss,
                recent_matches=tuple(matches),
            )

    async def load_peers(self, account_id: int) -> List[Peer]:
        return await self.player_repo.get_peers(account_id)

    async def load_heroes(self, account_id: int) -> List[PlayerHeroStats]:
        """Per-hero records, most played first."""
        heroes = await self.player_repo.get_hero_stats(account_id)
        return sorted(heroes, key=lambda h: h.games, reverse=True)

    async def load_counts(self, account_id: int) -> Optional[PlayerCounts]:
        return await self.player_repo.get_counts(account_id)
