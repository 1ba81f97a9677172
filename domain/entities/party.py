"""Derived party entities produced by the aggregation engine."""
from dataclasses import dataclass, field
from ..enums import MatchResult
from ..rates import win_rate
from .match_summary import MatchSummary

# Reserved party id for matches without any identified teammate.
SOLO_PARTY_ID = "SOLO"


@dataclass(frozen=True)
class Teammate:
    """An ally with a public account found in one match."""

    account_id: int
    personaname: str
    hero_id: int


@dataclass(frozen=True)
class ExtendedMatch:
    """A history row enriched with its teammates and a recomputed outcome."""

    summary: MatchSummary
    teammates: tuple[Teammate, ...]
    result: MatchResult
    played_hero_name: str

    @property
    def match_id(self) -> int:
        return self.summary.match_id

    @property
    def hero_id(self) -> int:
        return self.summary.hero_id

    @property
    def start_time(self) -> int:
        return self.summary.start_time

    @property
    def duration(self) -> int:
        return self.summary.duration

    @property
    def won(self) -> bool:
        return self.result.is_win

    @property
    def teammate_ids(self) -> list[int]:
        return [t.account_id for t in self.teammates]

    def to_dict(self) -> dict:
        data = self.summary.to_dict()
        data.update({
            'teammates': [
                {'account_id': t.account_id, 'personaname': t.personaname, 'hero_id': t.hero_id}
                for t in self.teammates
            ],
            'result': self.result.value,
            'played_hero_name': self.played_hero_name,
        })
        return data


@dataclass(frozen=True)
class PartyTeammate:
    """A party member with their most played hero inside that party."""

    account_id: int
    personaname: str
    most_played_hero_id: int


@dataclass(frozen=True)
class PartyGroup:
    """All matches the subject played with one exact set of teammates."""

    id: str
    player_ids: tuple[int, ...]
    teammates: tuple[PartyTeammate, ...]
    wins: int
    losses: int
    matches: tuple[ExtendedMatch, ...] = field(default_factory=tuple)

    @property
    def games(self) -> int:
        return len(self.matches)

    @property
    def win_rate(self) -> float:
        return win_rate(self.wins, self.games)

    @property
    def is_solo(self) -> bool:
        return self.id == SOLO_PARTY_ID

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'player_ids': list(self.player_ids),
            'teammates': [
                {
                    'account_id': t.account_id,
                    'personaname': t.personaname,
                    'most_played_hero_id': t.most_played_hero_id,
                }
                for t in self.teammates
            ],
            'wins': self.wins,
            'losses': self.losses,
            'games': self.games,
            'win_rate': self.win_rate,
            'matches': [m.to_dict() for m in self.matches],
        }
