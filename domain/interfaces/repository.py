"""Repository interfaces for upstream data access."""
from abc import ABC, abstractmethod
from typing import Optional, List
from ..entities import (
    GlobalHero, Hero, MatchDetail, MatchSummary, Peer,
    PlayerCounts, PlayerHeroStats, PlayerProfile, ProMatch, WinLoss,
)


class IMatchRepository(ABC):
    """Interface for match data repository."""

    @abstractmethod
    async def get_recent_matches(self, account_id: int, limit: int = 50) -> List[MatchSummary]:
        """Get a player's most recent matches, newest first."""

    @abstractmethod
    async def get_match_details(self, match_id: int) -> Optional[MatchDetail]:
        """Get the full record of one match."""

    @abstractmethod
    async def get_pro_matches(self) -> List[ProMatch]:
        """Get the latest professional matches."""


class IPlayerRepository(ABC):
    """Interface for player data repository."""

    @abstractmethod
    async def get_profile(self, account_id: int) -> Optional[PlayerProfile]:
        """Get the public profile of an account."""

    @abstractmethod
    async def get_win_loss(self, account_id: int) -> Optional[WinLoss]:
        """Get lifetime wins and losses."""

    @abstractmethod
    async def get_counts(self, account_id: int) -> Optional[PlayerCounts]:
        """Get games and wins split by category."""

    @abstractmethod
    async def get_peers(self, account_id: int) -> List[Peer]:
        """Get accounts the player has played with or against."""

    @abstractmethod
    async def get_hero_stats(self, account_id: int) -> List[PlayerHeroStats]:
        """Get per-hero records of the player."""


class IHeroRepository(ABC):
    """Interface for hero catalogue repository."""

    @abstractmethod
    async def get_heroes(self) -> List[Hero]:
        """Get every hero with its internal and localized names."""

    @abstractmethod
    async def get_global_heroes(self) -> List[GlobalHero]:
        """Get every hero with public pick/win totals."""
