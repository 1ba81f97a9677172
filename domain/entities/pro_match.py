"""Professional match entity."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ProMatch:
    """A match from the professional feed."""

    match_id: int
    duration: int
    start_time: int
    radiant_win: bool
    radiant_team_id: Optional[int] = None
    radiant_name: str = ""
    dire_team_id: Optional[int] = None
    dire_name: str = ""
    leagueid: int = 0
    league_name: str = ""
    series_id: int = 0
    series_type: int = 0
    radiant_score: int = 0
    dire_score: int = 0

    @property
    def winner_name(self) -> str:
        return self.radiant_name if self.radiant_win else self.dire_name
