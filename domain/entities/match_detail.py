"""Match detail entities: the full record of one match."""
from dataclasses import dataclass, field
from typing import Optional
from ..enums import TeamSide
from ..rates import kda_ratio


@dataclass(frozen=True)
class MatchPlayerDetail:
    """One of the (up to ten) participants of a match."""

    # Identity (account_id is None for players hiding their profile)
    account_id: Optional[int]
    player_slot: int
    hero_id: int
    personaname: Optional[str] = None

    # Combat
    kills: int = 0
    deaths: int = 0
    assists: int = 0
    win: int = 0

    # Economy & damage
    gold_per_min: int = 0
    xp_per_min: int = 0
    hero_damage: int = 0
    tower_damage: int = 0

    # Items (inventory 0-5, backpack 0-2)
    items: tuple[int, ...] = field(default_factory=tuple)
    backpack: tuple[int, ...] = field(default_factory=tuple)
    neutral_item: int = 0

    @property
    def side(self) -> TeamSide:
        return TeamSide.from_slot(self.player_slot)

    @property
    def is_anonymous(self) -> bool:
        return self.account_id is None

    @property
    def kda(self) -> float:
        return kda_ratio(self.kills, self.deaths, self.assists)

    def total_gold(self, duration: int) -> int:
        """Estimate gold earned over a match of ``duration`` seconds."""
        return round(self.gold_per_min * duration / 60)

    def to_dict(self) -> dict:
        return {
            'account_id': self.account_id,
            'player_slot': self.player_slot,
            'side': self.side.value,
            'hero_id': self.hero_id,
            'personaname': self.personaname,
            'kills': self.kills,
            'deaths': self.deaths,
            'assists': self.assists,
            'kda': self.kda,
            'gold_per_min': self.gold_per_min,
            'xp_per_min': self.xp_per_min,
            'hero_damage': self.hero_damage,
            'tower_damage': self.tower_damage,
            'items': list(self.items),
            'backpack': list(self.backpack),
            'neutral_item': self.neutral_item,
        }


@dataclass(frozen=True)
class MatchDetail:
    """Represents a complete Dota 2 match."""

    match_id: int
    radiant_win: bool
    duration: int  # Seconds
    start_time: int  # Unix timestamp seconds
    radiant_score: int = 0
    dire_score: int = 0
    players: tuple[MatchPlayerDetail, ...] = field(default_factory=tuple)

    @property
    def winning_side(self) -> TeamSide:
        return TeamSide.winner(self.radiant_win)

    def find_player(self, account_id: int) -> Optional[MatchPlayerDetail]:
        """Get the participant with this account id, if it is public in this match."""
        return next((p for p in self.players if p.account_id == account_id), None)

    def players_on(self, side: TeamSide) -> list[MatchPlayerDetail]:
        """Get all participants of one side, in slot order as received."""
        return [p for p in self.players if p.side is side]

    def to_dict(self) -> dict:
        return {
            'match_id': self.match_id,
            'radiant_win': self.radiant_win,
            'duration': self.duration,
            'start_time': self.start_time,
            'radiant_score': self.radiant_score,
            'dire_score': self.dire_score,
            'players': [p.to_dict() for p in self.players],
        }
