"""Match summary entity: one row of a player's match history."""
from dataclasses import dataclass
from typing import Optional
from ..enums import TeamSide
from ..rates import kda_ratio


@dataclass(frozen=True)
class MatchSummary:
    """A match as listed in a player's recent history."""

    # Identity
    match_id: int
    player_slot: int  # < 128 Radiant, >= 128 Dire

    # Outcome & timing
    radiant_win: bool
    duration: int  # Seconds
    start_time: int  # Unix timestamp seconds

    # Player performance
    hero_id: int
    kills: int = 0
    deaths: int = 0
    assists: int = 0

    # Hints reported by upstream, not always present
    party_size: Optional[int] = None
    lobby_type: Optional[int] = None
    skill: Optional[int] = None

    @property
    def side(self) -> TeamSide:
        """Side according to the history row (the match detail is authoritative)."""
        return TeamSide.from_slot(self.player_slot)

    @property
    def won(self) -> bool:
        """Outcome as reported by the history row itself."""
        return self.radiant_win == (self.side is TeamSide.RADIANT)

    @property
    def kda(self) -> float:
        return kda_ratio(self.kills, self.deaths, self.assists)

    @property
    def duration_minutes(self) -> float:
        return self.duration / 60.0

    def to_dict(self) -> dict:
        """Convert summary to dictionary."""
        return {
            'match_id': self.match_id,
            'player_slot': self.player_slot,
            'radiant_win': self.radiant_win,
            'duration': self.duration,
            'start_time': self.start_time,
            'hero_id': self.hero_id,
            'kills': self.kills,
            'deaths': self.deaths,
            'assists': self.assists,
            'party_size': self.party_size,
            'lobby_type': self.lobby_type,
            'skill': self.skill,
        }
