"""Player-level entities: profile, records and aggregates."""
from dataclasses import dataclass, field
from typing import Optional
from ..rates import win_rate


@dataclass(frozen=True)
class PlayerProfile:
    """Public profile of a Dota 2 account."""

    account_id: int
    personaname: str
    avatarfull: str = ""
    profileurl: str = ""
    loccountrycode: Optional[str] = None
    plus: bool = False
    rank_tier: Optional[int] = None
    leaderboard_rank: Optional[int] = None

    @property
    def medal(self) -> Optional[int]:
        """Medal tier (1 Herald .. 8 Immortal) encoded in rank_tier's tens digit."""
        return self.rank_tier // 10 if self.rank_tier else None

    @property
    def stars(self) -> Optional[int]:
        return self.rank_tier % 10 if self.rank_tier else None


@dataclass(frozen=True)
class WinLoss:
    win: int
    lose: int

    @property
    def games(self) -> int:
        return self.win + self.lose

    @property
    def win_rate(self) -> float:
        return win_rate(self.win, self.games)


@dataclass(frozen=True)
class CountBucket:
    games: int
    win: int

    @property
    def win_rate(self) -> float:
        return win_rate(self.win, self.games)


@dataclass(frozen=True)
class PlayerCounts:
    """Games and wins split by category (game_mode, lobby_type, patch, ...)."""

    categories: dict[str, dict[str, CountBucket]] = field(default_factory=dict)

    def category(self, name: str) -> dict[str, CountBucket]:
        return self.categories.get(name, {})

    @property
    def total_games(self) -> int:
        """Total games, taken from any one category since each splits all games."""
        for buckets in self.categories.values():
            return sum(b.games for b in buckets.values())
        return 0


@dataclass(frozen=True)
class Peer:
    """Another account the player has shared matches with."""

    account_id: int
    personaname: str = ""
    avatar: str = ""
    last_played: int = 0
    win: int = 0
    games: int = 0
    with_win: int = 0
    with_games: int = 0
    against_win: int = 0
    against_games: int = 0

    @property
    def with_win_rate(self) -> float:
        return win_rate(self.with_win, self.with_games)

    @property
    def against_win_rate(self) -> float:
        return win_rate(self.against_win, self.against_games)


@dataclass(frozen=True)
class PlayerHeroStats:
    hero_id: int
    last_played: int = 0
    games: int = 0
    win: int = 0
    with_games: int = 0
    with_win: int = 0
    against_games: int = 0
    against_win: int = 0

    @property
    def win_rate(self) -> float:
        return win_rate(self.win, self.games)
