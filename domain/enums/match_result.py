"""Match outcome enumeration."""
from enum import Enum


class MatchResult(Enum):
    """Outcome of a match from the subject player's point of view."""

    WON = "Won"
    LOST = "Lost"

    @classmethod
    def from_flag(cls, won: bool) -> 'MatchResult':
        return cls.WON if won else cls.LOST

    @property
    def is_win(self) -> bool:
        return self is MatchResult.WON
